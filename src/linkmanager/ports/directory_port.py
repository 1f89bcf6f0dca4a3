from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from linkmanager.domain.models import DirectoryEntry


@runtime_checkable
class DirectoryPort(Protocol):
    def list_entries(self, root: Path) -> list[DirectoryEntry]:
        """Return every file under root in stable order."""
