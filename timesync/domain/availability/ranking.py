from typing import Iterable

from .models import MatchResult

DEFAULT_MAX_RESULTS = 5


def rank_matches(
    matches: Iterable[MatchResult], max_results: int = DEFAULT_MAX_RESULTS
) -> list[MatchResult]:
    """Order matches by (start, end) ascending and keep at most max_results"""
    if max_results <= 0:
        return []
    # sorted() is stable, so equal windows keep their evaluation order
    ordered = sorted(matches, key=lambda m: (m.start, m.end))
    return ordered[:max_results]
