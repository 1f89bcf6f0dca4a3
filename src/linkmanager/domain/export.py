from __future__ import annotations

from dataclasses import dataclass

from .models import AMBIGUOUS, NOT_FOUND, RowResolutionRecord
from .reconciliation import resolved_files

OUTPUT_COLUMN_INDEX = 3
OUTPUT_SHEET_NAME = "Links Gerados"
MULTIPLE_PREFIX = "(Múltiplos)"
AMBIGUOUS_PREFIX = "AMBÍGUO:"
FAILURE_MARKER = "FALHA - Verificar Manualmente"


@dataclass(frozen=True)
class OutputCell:
    text: str
    link_target: str | None = None
    tooltip: str | None = None


def build_output_cell(record: RowResolutionRecord) -> OutputCell | None:
    """
    Decide what goes into the link column for one record.

    Only one hyperlink fits in a cell, so multiple resolutions link to the
    first file and list every name in the text.
    """
    files = resolved_files(record)
    if files:
        names = ", ".join(node.name for node in files)
        primary = files[0]
        if len(files) > 1:
            return OutputCell(
                text=f"{MULTIPLE_PREFIX} {names}",
                link_target=primary.path,
                tooltip=f"Abre: {primary.name}. (Outros ficheiros listados no texto)",
            )
        return OutputCell(
            text=names,
            link_target=primary.path,
            tooltip=f"Abrir ficheiro local: {primary.name}",
        )
    if record.match_status == AMBIGUOUS and not record.is_ignored:
        names = ", ".join(node.name for node in record.candidates or ())
        return OutputCell(text=f"{AMBIGUOUS_PREFIX} {names}")
    if record.match_status == NOT_FOUND and not record.is_ignored:
        return OutputCell(text=FAILURE_MARKER)
    return None


def build_output_cells(records: list[RowResolutionRecord]) -> dict[int, OutputCell]:
    cells: dict[int, OutputCell] = {}
    for record in records:
        cell = build_output_cell(record)
        if cell is not None:
            cells[record.row_id] = cell
    return cells
