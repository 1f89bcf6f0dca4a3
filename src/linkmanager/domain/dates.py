from __future__ import annotations

import re

_PART_SPLIT_RE = re.compile(r"[/\-.\s]")


def date_variants(raw: str) -> list[str]:
    """
    Expand a matched date into the literal forms a filename might contain.

    A four-digit first component is read as year-first, anything else as
    day-first. No calendar validation happens, so 03/04/2020 stays
    ambiguous between March and April.

    Examples:
        >>> date_variants("20/04/2010")[:2]
        ['20042010', '20100420']
        >>> date_variants("2010-4-2")[:2]
        ['02042010', '20100402']
        >>> date_variants("20/04")
        ['20/04']
    """
    parts = [part for part in _PART_SPLIT_RE.split(raw) if part]
    if len(parts) != 3:
        return [raw]

    if len(parts[0]) == 4:
        year, month, day = parts
    else:
        day, month, year = parts
    day = day.zfill(2)
    month = month.zfill(2)

    return [
        f"{day}{month}{year}",
        f"{year}{month}{day}",
        f"{day}-{month}-{year}",
        f"{year}-{month}-{day}",
        f"{year}_{month}_{day}",
        f"{year}.{month}.{day}",
        f"{day}_{month}_{year}",
        f"{day}.{month}.{year}",
        f"{day} {month} {year}",
    ]


def date_search_terms(dates: list[str] | tuple[str, ...]) -> list[str]:
    terms: list[str] = []
    for raw in dates:
        terms.extend(date_variants(raw))
    return terms
