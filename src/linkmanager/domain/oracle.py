from __future__ import annotations

from dataclasses import dataclass, field

ORACLE_NOT_CONFIGURED = "ORACLE_NOT_CONFIGURED"
ORACLE_REQUEST_FAILED = "ORACLE_REQUEST_FAILED"
ORACLE_TIMED_OUT = "ORACLE_TIMED_OUT"
ORACLE_OUTPUT_PARSE_FAILED = "ORACLE_OUTPUT_PARSE_FAILED"
ORACLE_NO_CANDIDATES = "ORACLE_NO_CANDIDATES"
ORACLE_ABSTAINED = "ORACLE_ABSTAINED"


@dataclass
class OracleAnswer:
    file_name: str | None
    signals: list[str] = field(default_factory=list)
    reasoning: str = ""


def sanitize_cell_text(text: str) -> str:
    """Make cell text safe to embed inside a quoted prompt line."""
    return text.replace('"', "'").replace("\n", " ")


def normalize_answer_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None
