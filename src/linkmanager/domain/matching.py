from __future__ import annotations

from .models import (
    AMBIGUOUS,
    FOUND,
    NO_QUERY,
    NOT_FOUND,
    FileNode,
    MatchOutcome,
    ScoredCandidate,
)
from .scoring import (
    DEFAULT_MATCH_CONFIG,
    MatchConfig,
    date_digit_terms,
    prepare_query,
    score_prepared,
)


def decide_match(
    best: float,
    runner_up: float | None,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> tuple[str, str]:
    if best > config.decisive_score:
        return FOUND, f"best={best:.4f} decisive={config.decisive_score:.4f}"
    if runner_up is None:
        return FOUND, f"best={best:.4f} runner_up=None"
    rationale = (
        f"best={best:.4f} runner_up={runner_up:.4f} margin={config.winner_margin:.4f}"
    )
    if best > runner_up + config.winner_margin:
        return FOUND, rationale
    return AMBIGUOUS, rationale


def score_files(
    queries: list[str] | tuple[str, ...],
    dates: list[str] | tuple[str, ...],
    files: list[FileNode],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> list[ScoredCandidate]:
    """Score every (query, file) pair, keep survivors, best score per path, best first."""
    date_terms = date_digit_terms(dates, config)
    best_by_path: dict[str, ScoredCandidate] = {}
    for query in queries:
        prepared = prepare_query(query)
        if not prepared.tokens:
            continue
        for file in files:
            score = score_prepared(prepared, date_terms, file, config)
            if score is None or score < config.match_threshold:
                continue
            existing = best_by_path.get(file.path)
            if existing is None or score > existing.score:
                best_by_path[file.path] = ScoredCandidate(file=file, score=score)
    return sorted(best_by_path.values(), key=lambda item: (-item.score, item.file.path))


def classify(
    queries: list[str] | tuple[str, ...],
    dates: list[str] | tuple[str, ...],
    files: list[FileNode],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> MatchOutcome:
    if not queries:
        return MatchOutcome(status=NO_QUERY, rationale="no quoted reference")

    ranked = score_files(queries, dates, files, config)
    if not ranked:
        return MatchOutcome(status=NOT_FOUND, rationale="no candidate above threshold")

    best = ranked[0]
    runner_up = ranked[1].score if len(ranked) > 1 else None
    status, rationale = decide_match(best.score, runner_up, config)
    if status == FOUND:
        return MatchOutcome(status=FOUND, file=best.file, rationale=rationale)
    return MatchOutcome(
        status=AMBIGUOUS,
        candidates=tuple(item.file for item in ranked[: config.max_candidates]),
        rationale=rationale,
    )
