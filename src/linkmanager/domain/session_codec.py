from __future__ import annotations

from typing import Any

from .errors import SessionDeserializeError
from .models import FOUND, MATCH_STATUSES, FileNode, RowResolutionRecord
from .session import Session

SESSION_FORMAT_VERSION = 2

# camelCase keys written by the first version of the tool.
_LEGACY_RECORD_KEYS = {
    "rowId": "row_id",
    "targetFolder": "target_folder",
    "originalContent": "original_content",
    "extractedQueries": "extracted_queries",
    "extractedDates": "extracted_dates",
    "matchStatus": "match_status",
    "matchedFile": "matched_file",
    "aiSuggestion": "ai_suggestion",
    "manualResolutions": "manual_resolutions",
    "manualResolution": "manual_resolution",
    "isIgnored": "is_ignored",
}


def file_node_to_dict(node: FileNode) -> dict[str, Any]:
    return {"name": node.name, "path": node.path, "last_modified": node.last_modified}


def file_node_from_dict(data: Any) -> FileNode:
    if not isinstance(data, dict):
        raise SessionDeserializeError(f"Invalid file entry: {data!r}")
    path = data.get("path")
    if not isinstance(path, str) or not path:
        raise SessionDeserializeError(f"File entry without path: {data!r}")
    name = data.get("name")
    last_modified = data.get("last_modified", data.get("lastModified", 0))
    try:
        last_modified = float(last_modified or 0)
    except (TypeError, ValueError):
        last_modified = 0.0
    return FileNode(
        path=path,
        name=name if isinstance(name, str) and name else path.rsplit("/", 1)[-1],
        last_modified=last_modified,
    )


def record_to_dict(record: RowResolutionRecord) -> dict[str, Any]:
    return {
        "row_id": record.row_id,
        "target_folder": record.target_folder,
        "original_content": record.original_content,
        "extracted_queries": list(record.extracted_queries),
        "extracted_dates": list(record.extracted_dates),
        "match_status": record.match_status,
        "matched_file": (
            file_node_to_dict(record.matched_file) if record.matched_file else None
        ),
        "candidates": (
            [file_node_to_dict(node) for node in record.candidates]
            if record.candidates is not None
            else None
        ),
        "manual_resolutions": [file_node_to_dict(node) for node in record.manual_resolutions],
        "is_ignored": record.is_ignored,
        "ai_suggestion": record.ai_suggestion,
    }


def migrate_legacy_record(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Bring a stored record to the current layout.

    Renames camelCase keys and promotes the old singular manual resolution
    into the list form when the list is absent or empty. The singular field is
    dropped afterwards.
    """
    migrated = {_LEGACY_RECORD_KEYS.get(key, key): value for key, value in raw.items()}
    legacy_single = migrated.pop("manual_resolution", None)
    if legacy_single and not migrated.get("manual_resolutions"):
        migrated["manual_resolutions"] = [legacy_single]
    return migrated


def record_from_dict(raw: Any) -> RowResolutionRecord:
    if not isinstance(raw, dict):
        raise SessionDeserializeError(f"Invalid record: {raw!r}")
    data = migrate_legacy_record(raw)

    row_id = data.get("row_id")
    if not isinstance(row_id, int) or isinstance(row_id, bool) or row_id < 1:
        raise SessionDeserializeError(f"Invalid row id: {row_id!r}")
    status = data.get("match_status")
    if status not in MATCH_STATUSES:
        raise SessionDeserializeError(f"Invalid match status for row {row_id}: {status!r}")

    matched = data.get("matched_file")
    candidates = data.get("candidates")
    manual = tuple(file_node_from_dict(item) for item in _as_list(data.get("manual_resolutions")))
    if manual:
        status = FOUND
    target_folder = data.get("target_folder")
    ai_suggestion = data.get("ai_suggestion")
    return RowResolutionRecord(
        row_id=row_id,
        target_folder=target_folder if isinstance(target_folder, str) else None,
        original_content=str(data.get("original_content") or ""),
        extracted_queries=tuple(str(item) for item in _as_list(data.get("extracted_queries"))),
        extracted_dates=tuple(str(item) for item in _as_list(data.get("extracted_dates"))),
        match_status=status,
        matched_file=file_node_from_dict(matched) if matched else None,
        candidates=(
            tuple(file_node_from_dict(item) for item in _as_list(candidates))
            if candidates is not None
            else None
        ),
        manual_resolutions=manual,
        is_ignored=bool(data.get("is_ignored", False)),
        ai_suggestion=ai_suggestion if isinstance(ai_suggestion, str) else None,
    )


def session_to_dict(session: Session, timestamp: str) -> dict[str, Any]:
    return {
        "version": SESSION_FORMAT_VERSION,
        "timestamp": timestamp,
        "raw_rows": [list(row) for row in session.raw_rows],
        "records": [record_to_dict(record) for record in session.records],
    }


def session_from_dict(data: Any) -> Session:
    """Rebuild a resumed session; file handles stay empty until reconciliation."""
    if not isinstance(data, dict):
        raise SessionDeserializeError("Session file is not a JSON object.")
    records_raw = data.get("records", data.get("results"))
    if not isinstance(records_raw, list):
        raise SessionDeserializeError("Session file has no record list.")
    raw_rows = data.get("raw_rows", data.get("rawExcelData")) or []
    if not isinstance(raw_rows, list):
        raise SessionDeserializeError("Session file has an invalid row grid.")
    records = tuple(record_from_dict(item) for item in records_raw)
    return Session(
        records=records,
        is_resumed=True,
        raw_rows=[list(row) if isinstance(row, list) else [] for row in raw_rows],
    )


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    raise SessionDeserializeError(f"Expected a list, got {type(value).__name__}")
