from __future__ import annotations

from typing import Protocol, runtime_checkable

from linkmanager.domain.oracle import OracleAnswer


@runtime_checkable
class OraclePort(Protocol):
    def choose(self, cell_text: str, candidate_names: list[str]) -> OracleAnswer:
        """Pick at most one of the candidate names for the cell text."""
