from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from linkmanager.domain.analysis import group_entries
from linkmanager.domain.reconciliation import ReconciliationResult, reconcile
from linkmanager.domain.session import Session
from linkmanager.ports.directory_port import DirectoryPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FolderLoadResult:
    session: Session
    file_count: int
    reconciliation: ReconciliationResult | None = None

    @property
    def ready_to_view(self) -> bool:
        return (
            self.reconciliation is not None
            and bool(self.session.records)
            and self.reconciliation.complete
        )


class FolderService:
    def __init__(self, directory: DirectoryPort) -> None:
        self._directory = directory

    def load_folder(self, session: Session, root: Path) -> FolderLoadResult:
        """
        Enumerate ``root`` and make it the session's file pool.

        A resumed session keeps its records and gets their handles back; a
        fresh session starts over, since its records were built from the old
        pool.
        """
        entries = self._directory.list_entries(root)
        folders, handles = group_entries(entries)
        file_count = sum(len(nodes) for nodes in folders.values())
        logger.info(
            "Found %d routed files in %d folders under %s", file_count, len(folders), root
        )

        if not session.is_resumed:
            return FolderLoadResult(session=Session(folders=folders), file_count=file_count)

        result = reconcile(list(session.records), handles)
        logger.info(
            "Reattached %d file handles to %d records (complete=%s)",
            result.attached,
            len(result.records),
            result.complete,
        )
        updated = replace(session, folders=folders, records=tuple(result.records))
        return FolderLoadResult(session=updated, file_count=file_count, reconciliation=result)
