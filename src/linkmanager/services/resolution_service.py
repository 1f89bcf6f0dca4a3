from __future__ import annotations

import logging
from dataclasses import dataclass, field

from linkmanager.domain.errors import (
    OracleError,
    OracleInvalidAnswer,
    OracleTimeout,
    OracleUnavailable,
)
from linkmanager.domain.models import FileNode
from linkmanager.domain.oracle import (
    ORACLE_NOT_CONFIGURED,
    ORACLE_OUTPUT_PARSE_FAILED,
    ORACLE_REQUEST_FAILED,
    ORACLE_TIMED_OUT,
)
from linkmanager.domain.review import awaits_resolution
from linkmanager.domain.session import OracleResolved, Session, apply_event
from linkmanager.ports.oracle_port import OraclePort

logger = logging.getLogger(__name__)

_UNAVAILABLE_SIGNALS = frozenset(
    {ORACLE_NOT_CONFIGURED, ORACLE_REQUEST_FAILED, ORACLE_OUTPUT_PARSE_FAILED}
)


@dataclass
class BatchResolutionSummary:
    resolved: list[int] = field(default_factory=list)
    unresolved: list[int] = field(default_factory=list)
    failed: dict[int, str] = field(default_factory=dict)


class ResolutionService:
    def __init__(self, oracle: OraclePort) -> None:
        self._oracle = oracle

    def resolve_with_oracle(
        self, session: Session, row_id: int
    ) -> tuple[Session, FileNode | None]:
        """
        Ask the oracle to pick one of a row's candidates.

        Returns the session unchanged and None when the oracle abstains or
        the row is no longer open: validated, manually resolved or ignored.
        Oracle failures raise an OracleError and also leave the session
        unchanged; the caller decides how to report them.
        """
        record = session.get_record(row_id)
        if not awaits_resolution(record):
            return session, None

        names = [node.name for node in record.candidates]
        try:
            answer = self._oracle.choose(record.original_content, names)
        except Exception as exc:
            logger.warning("Oracle call failed for row %d: %s", row_id, exc)
            raise OracleUnavailable(f"Oracle call failed for row {row_id}") from exc

        signals = set(answer.signals)
        if ORACLE_TIMED_OUT in signals:
            logger.warning("Oracle timed out for row %d", row_id)
            raise OracleTimeout(f"Oracle timed out for row {row_id}")
        if signals & _UNAVAILABLE_SIGNALS:
            logger.warning("Oracle unavailable for row %d: %s", row_id, sorted(signals))
            raise OracleUnavailable(
                f"Oracle unavailable for row {row_id}: {', '.join(sorted(signals))}"
            )
        if answer.file_name is None:
            logger.info("Oracle found no clear match for row %d", row_id)
            return session, None

        matched = next(
            (node for node in record.candidates if node.name == answer.file_name), None
        )
        if matched is None:
            logger.warning(
                "Oracle answered %r for row %d, which is not a candidate",
                answer.file_name,
                row_id,
            )
            raise OracleInvalidAnswer(answer.file_name)

        logger.info("Oracle resolved row %d to %s", row_id, matched.path)
        return apply_event(session, OracleResolved(row_id=row_id, file=matched)), matched

    def resolve_all_ambiguous(
        self, session: Session
    ) -> tuple[Session, BatchResolutionSummary]:
        """Run the oracle sequentially over every open ambiguous row."""
        summary = BatchResolutionSummary()
        pending = [record.row_id for record in session.records if awaits_resolution(record)]
        for row_id in pending:
            try:
                session, chosen = self.resolve_with_oracle(session, row_id)
            except OracleUnavailable as exc:
                # every remaining row would fail the same way
                summary.failed[row_id] = str(exc)
                logger.warning("Stopping batch resolution at row %d: %s", row_id, exc)
                break
            except OracleError as exc:
                summary.failed[row_id] = str(exc)
                continue
            if chosen is None:
                summary.unresolved.append(row_id)
            else:
                summary.resolved.append(row_id)
        return session, summary

