from __future__ import annotations

from .models import AMBIGUOUS, FOUND, NO_QUERY, NOT_FOUND, FileNode, RowResolutionRecord
from .routing import folder_label_for_path

FILTER_ALL = "ALL"
FILTER_FOUND = FOUND
FILTER_AMBIGUOUS = AMBIGUOUS
FILTER_NOT_FOUND = NOT_FOUND
FILTER_IGNORED = "IGNORED"

REVIEW_FILTERS = (FILTER_ALL, FILTER_FOUND, FILTER_AMBIGUOUS, FILTER_NOT_FOUND, FILTER_IGNORED)

SEARCH_RESULT_LIMIT = 20


def reviewable(records: list[RowResolutionRecord]) -> list[RowResolutionRecord]:
    return [record for record in records if record.match_status != NO_QUERY]


def filter_records(
    records: list[RowResolutionRecord], active_filter: str
) -> list[RowResolutionRecord]:
    """Ignored rows only show under IGNORED; every other bucket excludes them."""
    if active_filter not in REVIEW_FILTERS:
        raise ValueError(f"Unknown review filter: {active_filter}")
    selected: list[RowResolutionRecord] = []
    for record in reviewable(records):
        if active_filter == FILTER_IGNORED:
            if record.is_ignored:
                selected.append(record)
            continue
        if record.is_ignored:
            continue
        if active_filter == FILTER_ALL or record.match_status == active_filter:
            selected.append(record)
    return selected


def count_by_filter(records: list[RowResolutionRecord]) -> dict[str, int]:
    return {name: len(filter_records(records, name)) for name in REVIEW_FILTERS}


def quoted_text_lines(records: list[RowResolutionRecord]) -> list[str]:
    return [f'"{query}"' for record in records for query in record.extracted_queries]


def failure_lines(records: list[RowResolutionRecord]) -> list[str]:
    return [record.original_content for record in filter_records(records, FILTER_NOT_FOUND)]


def awaits_resolution(record: RowResolutionRecord) -> bool:
    """An ambiguous row nobody has decided or ignored yet."""
    return (
        record.match_status == AMBIGUOUS
        and bool(record.candidates)
        and not record.manual_resolutions
        and not record.is_ignored
    )


def is_in_target_folder(file: FileNode, target_folder: str | None) -> bool:
    if not target_folder:
        return False
    return folder_label_for_path(file.path) == target_folder


def search_files(
    all_files: list[FileNode],
    term: str,
    target_folder: str | None,
    candidates: tuple[FileNode, ...] | None = None,
    limit: int = SEARCH_RESULT_LIMIT,
) -> list[FileNode]:
    """
    Global file search used for manual selection.

    With no search term the row's initial candidates are offered. Otherwise
    names are matched case-insensitively, files from the row's own folder
    come first, then alphabetical order.
    """
    if not term:
        return list(candidates or ())
    lowered = term.lower()
    matches = [node for node in all_files if lowered in node.name.lower()]
    matches.sort(
        key=lambda node: (not is_in_target_folder(node, target_folder), node.name.lower(), node.path)
    )
    return matches[:limit]
