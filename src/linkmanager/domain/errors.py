from __future__ import annotations


class LinkManagerError(RuntimeError):
    """Base class for failures surfaced to the caller."""


class SpreadsheetParseError(LinkManagerError):
    """The workbook could not be read; the current run is aborted."""


class SessionDeserializeError(LinkManagerError):
    """A saved session could not be loaded; in-memory state is kept."""


class RecordNotFoundError(LinkManagerError):
    def __init__(self, row_id: int) -> None:
        super().__init__(f"Row not found: {row_id}")
        self.row_id = row_id


class OracleError(LinkManagerError):
    """Non-fatal disambiguation failure; the record is left unchanged."""


class OracleUnavailable(OracleError):
    pass


class OracleTimeout(OracleError):
    pass


class OracleInvalidAnswer(OracleError):
    def __init__(self, file_name: str) -> None:
        super().__init__(f"Oracle suggested a name that is not a candidate: {file_name}")
        self.file_name = file_name
