from __future__ import annotations

import json
import logging
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

from linkmanager.domain.errors import LinkManagerError, SessionDeserializeError
from linkmanager.domain.session import Session
from linkmanager.domain.session_codec import session_from_dict, session_to_dict
from linkmanager.ports.session_store_port import SessionStorePort

logger = logging.getLogger(__name__)


class JsonSessionStore(SessionStorePort):
    def save(self, session: Session, path: Path) -> Path:
        path = Path(path)
        timestamp = datetime.now(timezone.utc).isoformat()
        payload = session_to_dict(session, timestamp)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                json.dumps(payload, ensure_ascii=False, indent=2, default=_json_default),
                encoding="utf-8",
            )
        except OSError as exc:
            raise LinkManagerError(f"Failed to save session: {path}") from exc
        logger.info("Saved %d records to %s", len(session.records), path)
        return path

    def load(self, path: Path) -> Session:
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SessionDeserializeError(f"Failed to read session file: {path}") from exc
        session = session_from_dict(data)
        logger.info("Loaded %d records from %s", len(session.records), path)
        return session


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)
