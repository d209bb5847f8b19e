"""
Group Coverage Evaluator

A user covers a candidate window when one of their intervals fully contains
it; partial overlap does not count. A window is accepted only if every group
has at least its minimum number of covering users.
"""

from typing import Iterable, Iterator, Optional, Sequence

from .models import CandidateWindow, GroupAvailability, GroupCoverage, MatchResult


def covering_users(group: GroupAvailability, window: CandidateWindow) -> list[str]:
    """User ids of the group that are free for the whole window, in roster order"""
    return [member.user_id for member in group.members if member.covers(window)]


def group_coverage(group: GroupAvailability, window: CandidateWindow) -> GroupCoverage:
    available = covering_users(group, window)
    return GroupCoverage(
        group_id=group.group_id,
        name=group.name,
        available_user_ids=tuple(available),
        count=len(available),
        group_size=group.group_size,
        roster_size=group.roster_size,
    )


def evaluate_window(
    window: CandidateWindow,
    groups: Sequence[GroupAvailability],
    short_circuit: bool = True,
) -> Optional[MatchResult]:
    """
    Evaluate one window against every group.

    With short_circuit the first group below its minimum rejects the window
    immediately; otherwise all groups are evaluated and the results combined.
    Both strategies accept exactly the same windows.
    """
    coverages = []
    for group in groups:
        coverage = group_coverage(group, window)
        if short_circuit and coverage.count < group.min_attendance:
            return None
        coverages.append(coverage)

    if not all(c.count >= g.min_attendance for c, g in zip(coverages, groups)):
        return None

    return MatchResult(window=window, groups=tuple(coverages))


def evaluate_windows(
    windows: Iterable[CandidateWindow],
    groups: Sequence[GroupAvailability],
    short_circuit: bool = True,
) -> Iterator[MatchResult]:
    """Yield a MatchResult for every accepted window, in window order"""
    for window in windows:
        result = evaluate_window(window, groups, short_circuit=short_circuit)
        if result is not None:
            yield result
