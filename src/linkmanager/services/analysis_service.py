from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from linkmanager.domain.analysis import iter_analyzed_rows
from linkmanager.domain.errors import LinkManagerError
from linkmanager.domain.routing import ROW_MAPPINGS, RowRange
from linkmanager.domain.scoring import DEFAULT_MATCH_CONFIG, MatchConfig
from linkmanager.domain.session import Session
from linkmanager.ports.tabular_port import TabularPort

logger = logging.getLogger(__name__)


class AnalysisService:
    def __init__(
        self,
        tabular: TabularPort,
        config: MatchConfig = DEFAULT_MATCH_CONFIG,
        mappings: tuple[RowRange, ...] = ROW_MAPPINGS,
    ) -> None:
        self._tabular = tabular
        self._config = config
        self._mappings = mappings

    def run(self, session: Session, workbook_path: Path) -> Session:
        if session.file_count() == 0:
            raise LinkManagerError("Load the folder with the files before starting the analysis.")

        rows = self._tabular.read_rows(workbook_path)
        records = []
        for record, rationale in iter_analyzed_rows(
            rows, session.folders, self._config, self._mappings
        ):
            logger.debug("Row %d -> %s (%s)", record.row_id, record.match_status, rationale)
            records.append(record)

        counts = Counter(record.match_status for record in records)
        logger.info(
            "Analyzed %d rows: %s",
            len(records),
            ", ".join(f"{status}={count}" for status, count in sorted(counts.items())),
        )
        return Session(
            folders=session.folders,
            records=tuple(records),
            is_resumed=False,
            raw_rows=rows,
        )

    def resume(self, session: Session) -> Session:
        if not session.is_resumed:
            raise LinkManagerError("No saved project has been loaded.")
        if session.file_count() == 0:
            raise LinkManagerError(
                "Load the root folder with the original files to resume the project."
            )
        if not session.records:
            raise LinkManagerError("The loaded project has no results. Start a new project.")
        return session
