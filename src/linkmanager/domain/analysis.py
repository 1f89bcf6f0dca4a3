from __future__ import annotations

from typing import Any, Iterator

from .extraction import extract_metadata
from .matching import classify
from .models import DirectoryEntry, FileNode, RowResolutionRecord
from .routing import ROW_MAPPINGS, RowRange, folder_label_for_path, target_folder_for_row
from .scoring import DEFAULT_MATCH_CONFIG, MatchConfig

CONTENT_COLUMN_INDEX = 2


def group_entries(
    entries: list[DirectoryEntry],
) -> tuple[dict[str, list[FileNode]], dict[str, Any]]:
    """
    Split an enumeration into the routed file pool and a path -> handle map.

    Every entry lands in the handle map; only entries under a routed folder
    become candidates.
    """
    folders: dict[str, list[FileNode]] = {}
    handles: dict[str, Any] = {}
    for entry in entries:
        if entry.handle is not None:
            handles[entry.relative_path] = entry.handle
        label = folder_label_for_path(entry.relative_path)
        if label is None:
            continue
        folders.setdefault(label, []).append(
            FileNode(
                path=entry.relative_path,
                name=entry.name,
                last_modified=entry.last_modified,
                handle=entry.handle,
            )
        )
    return folders, handles


def build_record(
    row_id: int,
    content: str,
    target_folder: str,
    folders: dict[str, list[FileNode]],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> tuple[RowResolutionRecord, str]:
    reference = extract_metadata(content)
    outcome = classify(
        reference.queries, reference.dates, folders.get(target_folder, []), config
    )
    record = RowResolutionRecord(
        row_id=row_id,
        target_folder=target_folder,
        original_content=content,
        extracted_queries=reference.queries,
        extracted_dates=reference.dates,
        match_status=outcome.status,
        matched_file=outcome.file,
        candidates=outcome.candidates,
    )
    return record, outcome.rationale


def iter_analyzed_rows(
    rows: list[list[Any]],
    folders: dict[str, list[FileNode]],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
    mappings: tuple[RowRange, ...] = ROW_MAPPINGS,
) -> Iterator[tuple[RowResolutionRecord, str]]:
    """Yield a record and its decision rationale per routed row whose content cell holds text."""
    for index, row in enumerate(rows):
        row_id = index + 1
        target_folder = target_folder_for_row(row_id, mappings)
        if target_folder is None:
            continue
        content = row[CONTENT_COLUMN_INDEX] if len(row) > CONTENT_COLUMN_INDEX else None
        if not isinstance(content, str):
            continue
        yield build_record(row_id, content, target_folder, folders, config)


def analyze_rows(
    rows: list[list[Any]],
    folders: dict[str, list[FileNode]],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
    mappings: tuple[RowRange, ...] = ROW_MAPPINGS,
) -> list[RowResolutionRecord]:
    return [record for record, _ in iter_analyzed_rows(rows, folders, config, mappings)]
