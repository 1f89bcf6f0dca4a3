from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Union

from .errors import LinkManagerError, RecordNotFoundError
from .models import FOUND, FileNode, RowResolutionRecord


@dataclass(frozen=True)
class Session:
    folders: dict[str, list[FileNode]] = field(default_factory=dict)
    records: tuple[RowResolutionRecord, ...] = ()
    is_resumed: bool = False
    raw_rows: list[list[Any]] = field(default_factory=list)

    def all_files(self) -> list[FileNode]:
        files: list[FileNode] = []
        for nodes in self.folders.values():
            files.extend(nodes)
        return files

    def file_count(self) -> int:
        return sum(len(nodes) for nodes in self.folders.values())

    def get_record(self, row_id: int) -> RowResolutionRecord:
        for record in self.records:
            if record.row_id == row_id:
                return record
        raise RecordNotFoundError(row_id)


@dataclass(frozen=True)
class SelectionChanged:
    row_id: int
    files: tuple[FileNode, ...]


@dataclass(frozen=True)
class SelectionAdded:
    row_id: int
    file: FileNode


@dataclass(frozen=True)
class SelectionRemoved:
    row_id: int
    path: str


@dataclass(frozen=True)
class MatchValidated:
    row_id: int


@dataclass(frozen=True)
class IgnoreToggled:
    row_id: int


@dataclass(frozen=True)
class OracleResolved:
    row_id: int
    file: FileNode


SessionEvent = Union[
    SelectionChanged,
    SelectionAdded,
    SelectionRemoved,
    MatchValidated,
    IgnoreToggled,
    OracleResolved,
]


def apply_event(session: Session, event: SessionEvent) -> Session:
    """Return a new session with ``event`` applied to the addressed record."""
    record = session.get_record(event.row_id)
    updated = _apply_to_record(record, event)
    records = tuple(
        updated if item.row_id == event.row_id else item for item in session.records
    )
    return replace(session, records=records)


def _apply_to_record(
    record: RowResolutionRecord, event: SessionEvent
) -> RowResolutionRecord:
    # Selection edits never change the status; only validation does.
    if isinstance(event, SelectionChanged):
        return replace(record, manual_resolutions=_dedupe(event.files))
    if isinstance(event, SelectionAdded):
        return replace(
            record, manual_resolutions=_dedupe(record.manual_resolutions + (event.file,))
        )
    if isinstance(event, SelectionRemoved):
        return replace(
            record,
            manual_resolutions=tuple(
                node for node in record.manual_resolutions if node.path != event.path
            ),
        )
    if isinstance(event, MatchValidated):
        if not record.manual_resolutions and record.matched_file is None:
            raise LinkManagerError(f"No file selected to validate for row {record.row_id}")
        return replace(record, match_status=FOUND, is_ignored=False)
    if isinstance(event, IgnoreToggled):
        return replace(record, is_ignored=not record.is_ignored)
    if isinstance(event, OracleResolved):
        return replace(
            record,
            manual_resolutions=(event.file,),
            match_status=FOUND,
            ai_suggestion=event.file.name,
        )
    raise TypeError(f"Unsupported session event: {type(event).__name__}")


def _dedupe(nodes: tuple[FileNode, ...]) -> tuple[FileNode, ...]:
    seen: set[str] = set()
    result: list[FileNode] = []
    for node in nodes:
        if node.path in seen:
            continue
        seen.add(node.path)
        result.append(node)
    return tuple(result)
