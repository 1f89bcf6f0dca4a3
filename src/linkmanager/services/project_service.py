from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from linkmanager.domain.session import Session
from linkmanager.ports.session_store_port import SessionStorePort

logger = logging.getLogger(__name__)

SESSION_FILE_PREFIX = "projeto_links_"


def default_session_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"{SESSION_FILE_PREFIX}{today.isoformat()}.json"


class ProjectService:
    def __init__(self, store: SessionStorePort, session_dir: str | Path) -> None:
        self._store = store
        self._session_dir = Path(session_dir)

    def save(self, session: Session, path: Path | None = None) -> Path:
        target = Path(path) if path else self._session_dir / default_session_filename()
        return self._store.save(session, target)

    def load(self, path: Path) -> Session:
        """Load a saved project; folders stay empty until the root folder is reloaded."""
        session = self._store.load(Path(path))
        if not session.records:
            logger.warning("Project %s has no records", path)
        return session

    def list_saved(self) -> list[Path]:
        if not self._session_dir.exists():
            return []
        return sorted(self._session_dir.glob(f"{SESSION_FILE_PREFIX}*.json"), reverse=True)
