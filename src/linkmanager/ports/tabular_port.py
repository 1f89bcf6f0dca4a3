from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from linkmanager.domain.export import OutputCell


@runtime_checkable
class TabularPort(Protocol):
    def read_rows(self, path: Path) -> list[list[Any]]:
        """Return the first sheet as a grid; row 0 is workbook row 1."""

    def write_rows(
        self, path: Path, rows: list[list[Any]], cells: dict[int, OutputCell]
    ) -> Path:
        """Write a copy of the grid with the link column filled in."""
