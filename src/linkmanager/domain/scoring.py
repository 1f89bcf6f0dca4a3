from __future__ import annotations

from dataclasses import dataclass

from .dates import date_search_terms
from .models import FileNode
from .tokens import alnum_only, digits_only, tokenize


@dataclass(frozen=True)
class MatchConfig:
    """Empirical thresholds and boosts for scoring and classification."""

    match_threshold: float = 0.55
    date_boost: float = 0.40
    extension_boost: float = 0.20
    sequence_boost: float = 0.15
    decisive_score: float = 1.2
    winner_margin: float = 0.1
    max_candidates: int = 5
    min_date_digits: int = 6
    min_extension_length: int = 3


DEFAULT_MATCH_CONFIG = MatchConfig()


@dataclass(frozen=True)
class PreparedQuery:
    text: str
    tokens: tuple[str, ...]
    extension: str
    alnum: str


def prepare_query(query: str) -> PreparedQuery:
    return PreparedQuery(
        text=query,
        tokens=tuple(tokenize(query)),
        extension=trailing_suffix(query),
        alnum=alnum_only(query),
    )


def date_digit_terms(dates: list[str] | tuple[str, ...], config: MatchConfig) -> list[str]:
    terms: list[str] = []
    for term in date_search_terms(dates):
        digits = digits_only(term)
        if len(digits) >= config.min_date_digits and digits not in terms:
            terms.append(digits)
    return terms


def trailing_suffix(text: str) -> str:
    """Lower-cased text after the last dot, or the whole text when there is none."""
    return text.rpartition(".")[2].lower()


def score_candidate(
    query: str,
    dates: list[str] | tuple[str, ...],
    file: FileNode,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> float | None:
    """
    Score one quoted reference against one candidate file name.

    Returns None when the query and the name share no token. The score is
    never capped: stacked boosts push it past 1.0, which the classifier reads
    as a very strong signal.
    """
    return score_prepared(prepare_query(query), date_digit_terms(dates, config), file, config)


def score_prepared(
    query: PreparedQuery,
    date_terms: list[str],
    file: FileNode,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> float | None:
    if not query.tokens:
        return None
    file_tokens = tokenize(file.name)
    if not file_tokens:
        return None

    match_count = sum(1 for token in query.tokens if token in file_tokens)
    if match_count == 0:
        return None

    score = max(match_count / len(file_tokens), match_count / len(query.tokens))

    file_digits = digits_only(file.name)
    if any(term in file_digits for term in date_terms):
        score += config.date_boost

    if (
        query.extension == trailing_suffix(file.name)
        and len(query.extension) >= config.min_extension_length
    ):
        score += config.extension_boost

    if query.alnum and query.alnum in alnum_only(file.name):
        score += config.sequence_boost

    return score
