from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.hyperlink import Hyperlink

from linkmanager.domain.errors import LinkManagerError, SpreadsheetParseError
from linkmanager.domain.export import OUTPUT_COLUMN_INDEX, OUTPUT_SHEET_NAME, OutputCell
from linkmanager.ports.tabular_port import TabularPort

logger = logging.getLogger(__name__)

_LINK_FONT = Font(color="0563C1", underline="single")


class OpenpyxlTabularAdapter(TabularPort):
    def read_rows(self, path: Path) -> list[list[Any]]:
        try:
            workbook = load_workbook(Path(path), read_only=True, data_only=True)
        except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as exc:
            raise SpreadsheetParseError(f"Failed to read workbook: {path}") from exc
        try:
            if not workbook.sheetnames:
                raise SpreadsheetParseError(f"Workbook has no sheets: {path}")
            sheet = workbook[workbook.sheetnames[0]]
            rows = [list(row) for row in sheet.iter_rows(values_only=True)]
        finally:
            workbook.close()
        logger.info("Read %d rows from %s", len(rows), path)
        return rows

    def write_rows(
        self, path: Path, rows: list[list[Any]], cells: dict[int, OutputCell]
    ) -> Path:
        path = Path(path)
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = OUTPUT_SHEET_NAME

        for row_index, row in enumerate(rows, start=1):
            for column_index, value in enumerate(row, start=1):
                if value is not None:
                    sheet.cell(row=row_index, column=column_index, value=value)

        column = OUTPUT_COLUMN_INDEX + 1
        for row_id, output in sorted(cells.items()):
            cell = sheet.cell(row=row_id, column=column, value=output.text)
            if output.link_target:
                cell.hyperlink = Hyperlink(
                    ref=cell.coordinate, target=output.link_target, tooltip=output.tooltip
                )
                cell.font = _LINK_FONT

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            workbook.save(path)
        except OSError as exc:
            raise LinkManagerError(f"Failed to write workbook: {path}") from exc
        logger.info("Wrote %d link cells to %s", len(cells), path)
        return path
