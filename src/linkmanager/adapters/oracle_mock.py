from __future__ import annotations

from linkmanager.domain.oracle import ORACLE_NOT_CONFIGURED, OracleAnswer
from linkmanager.ports.oracle_port import OraclePort


class MockOracleAdapter(OraclePort):
    def choose(self, cell_text: str, candidate_names: list[str]) -> OracleAnswer:
        _ = cell_text
        _ = candidate_names
        return OracleAnswer(file_name=None, signals=[ORACLE_NOT_CONFIGURED])
