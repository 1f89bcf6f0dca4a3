from __future__ import annotations

import logging
from pathlib import Path

from linkmanager.domain.errors import LinkManagerError
from linkmanager.domain.export import build_output_cells
from linkmanager.domain.session import Session
from linkmanager.ports.tabular_port import TabularPort

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "Analise_Com_Links.xlsx"


class ExportService:
    def __init__(self, tabular: TabularPort) -> None:
        self._tabular = tabular

    def export(self, session: Session, output_path: Path | None = None) -> Path:
        if not session.raw_rows:
            raise LinkManagerError("There is no spreadsheet data to export.")
        cells = build_output_cells(list(session.records))
        target = Path(output_path) if output_path else Path(DEFAULT_EXPORT_NAME)
        written = self._tabular.write_rows(target, session.raw_rows, cells)
        logger.info("Exported %d link cells to %s", len(cells), written)
        return written
