from __future__ import annotations

import re

from .models import ExtractedReference

# Straight or smart quotes; a straight opener may close with a smart quote and vice versa.
QUOTE_RE = re.compile(r"[\"“]([^\"”]+)[\"”]")

DATE_RE = re.compile(
    r"\b[0-9]{1,2}[/\-.][0-9]{1,2}[/\-.][0-9]{4}\b"
    r"|\b[0-9]{4}[/\-.][0-9]{1,2}[/\-.][0-9]{1,2}\b"
)


def extract_metadata(cell_content: object) -> ExtractedReference:
    """
    Pull quoted references and date-like substrings out of a cell.

    Dates are kept even when nothing is quoted, but only quoted text is ever
    searched.

    Example:
        >>> extract_metadata('Email "Relatório Final" de 20/04/2010')
        ExtractedReference(queries=('Relatório Final',), dates=('20/04/2010',))
    """
    if not isinstance(cell_content, str) or not cell_content:
        return ExtractedReference()

    dates = tuple(match.group(0) for match in DATE_RE.finditer(cell_content))
    queries = tuple(
        query
        for query in (match.group(1).strip() for match in QUOTE_RE.finditer(cell_content))
        if query
    )
    return ExtractedReference(queries=queries, dates=dates)
