from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from .models import FileNode, RowResolutionRecord


@dataclass(frozen=True)
class ReconciliationResult:
    records: list[RowResolutionRecord]
    attached: int
    complete: bool


def reconcile(
    records: list[RowResolutionRecord], handles: Mapping[str, Any]
) -> ReconciliationResult:
    """
    Re-attach live handles to stored records by path.

    Nodes that already carry a handle are left alone and paths missing from
    ``handles`` stay handle-less, so running this twice with the same mapping
    changes nothing the second time. Decision state is never touched.
    """
    attached = 0
    reconciled: list[RowResolutionRecord] = []
    for record in records:
        changes: dict[str, Any] = {}
        if record.matched_file is not None:
            node, added = _attach(record.matched_file, handles)
            if added:
                changes["matched_file"] = node
                attached += 1
        if record.candidates:
            nodes, added = _attach_all(record.candidates, handles)
            if added:
                changes["candidates"] = nodes
                attached += added
        if record.manual_resolutions:
            nodes, added = _attach_all(record.manual_resolutions, handles)
            if added:
                changes["manual_resolutions"] = nodes
                attached += added
        reconciled.append(replace(record, **changes) if changes else record)
    return ReconciliationResult(
        records=reconciled,
        attached=attached,
        complete=resolved_files_have_handles(reconciled),
    )


def resolved_files(record: RowResolutionRecord) -> tuple[FileNode, ...]:
    if record.manual_resolutions:
        return record.manual_resolutions
    if record.matched_file is not None:
        return (record.matched_file,)
    return ()


def resolved_files_have_handles(records: list[RowResolutionRecord]) -> bool:
    return all(
        node.has_handle for record in records for node in resolved_files(record)
    )


def _attach(node: FileNode, handles: Mapping[str, Any]) -> tuple[FileNode, bool]:
    if node.has_handle:
        return node, False
    handle = handles.get(node.path)
    if handle is None:
        return node, False
    return replace(node, handle=handle), True


def _attach_all(
    nodes: tuple[FileNode, ...], handles: Mapping[str, Any]
) -> tuple[tuple[FileNode, ...], int]:
    added = 0
    result: list[FileNode] = []
    for node in nodes:
        updated, was_added = _attach(node, handles)
        added += int(was_added)
        result.append(updated)
    return tuple(result), added
