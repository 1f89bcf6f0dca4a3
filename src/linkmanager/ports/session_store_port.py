from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from linkmanager.domain.session import Session


@runtime_checkable
class SessionStorePort(Protocol):
    def save(self, session: Session, path: Path) -> Path:
        """Persist the serializable part of a session."""

    def load(self, path: Path) -> Session:
        """Load a saved session; handles are absent until reconciliation."""
