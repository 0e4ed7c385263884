from typing import Iterable

from loguru import logger

from src.models.outcome import MatchResult
from .normalizer import normalize_text

# A best candidate is accepted only when its score is strictly above this.
MATCH_THRESHOLD = 0.5


def is_contained(a: str, b: str) -> bool:
    """True when either normalized string is a substring of the other."""
    return a in b or b in a


def length_ratio(a: str, b: str) -> float:
    """Shorter length over longer length; identical strings score 1.0."""
    longer = max(len(a), len(b))
    if longer == 0:
        return 1.0
    return min(len(a), len(b)) / longer


def best_match(query: str, candidates: Iterable[str]) -> MatchResult:
    """Picks the candidate that best approximates ``query``.

    Candidates are only scored when their normalized form contains, or is
    contained in, the normalized query. Among those, the highest length ratio
    wins, earlier candidates winning ties. The winner is returned only if its
    score clears MATCH_THRESHOLD, so a short fragment like "united" is not
    accepted against "Newcastle United Football Club".
    """
    normalized_query = normalize_text(query)
    best_candidate = None
    best_score = 0.0

    for candidate in candidates:
        normalized_candidate = normalize_text(candidate)
        if not is_contained(normalized_query, normalized_candidate):
            continue

        score = length_ratio(normalized_query, normalized_candidate)
        if score > best_score:
            best_score = score
            best_candidate = candidate

    if best_candidate is not None and best_score > MATCH_THRESHOLD:
        logger.debug(f"~ fuzzy '{query}' -> '{best_candidate}' (score={best_score:.2f})")
        return MatchResult(best_candidate=best_candidate, score=best_score)

    return MatchResult(best_candidate=None, score=best_score)
