"""
Availability matching engine

Pipeline: IntervalCollector -> extract_candidate_windows -> evaluate_windows
-> rank_matches. Each stage only reads the previous stage's output; the whole
pipeline is re-run per request and keeps no state between calls.
"""

import logging
from typing import Mapping, Optional, Sequence

from ...errors import ValidationError
from ...shared.validators import validate_group_ids
from .boundaries import extract_candidate_windows
from .collector import AvailabilitySource, IntervalCollector
from .coverage import evaluate_windows
from .models import GroupAvailability, MatchResult
from .ranking import DEFAULT_MAX_RESULTS, rank_matches

logger = logging.getLogger(__name__)

DEFAULT_MIN_PER_GROUP = 1


def find_matches(
    groups: Sequence[GroupAvailability],
    max_results: int = DEFAULT_MAX_RESULTS,
    short_circuit: bool = True,
) -> list[MatchResult]:
    """Compute the ranked match windows for already-collected groups"""
    windows = extract_candidate_windows(groups)
    accepted = evaluate_windows(windows, groups, short_circuit=short_circuit)
    return rank_matches(accepted, max_results)


def _require_count(name: str, value) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"{name} must be a non-negative integer, got {value!r}")
    return value


class AvailabilityMatcher:
    """Runs the full fetch-then-evaluate pipeline against an AvailabilitySource"""

    def __init__(self, source: AvailabilitySource):
        self.source = source

    def resolve_minimums(
        self,
        group_ids: list[str],
        min_per_group: int,
        group_minimums: Optional[Mapping[str, int]] = None,
    ) -> dict[str, int]:
        """Per-group minimum attendance: explicit override, else min_per_group"""
        min_per_group = _require_count("min_per_group", min_per_group)
        minimums = {group_id: min_per_group for group_id in group_ids}

        for raw_id, minimum in (group_minimums or {}).items():
            group_id = validate_group_ids([raw_id])[0]
            if group_id not in minimums:
                raise ValidationError(
                    f"Minimum given for group {raw_id} which is not part of the request"
                )
            minimums[group_id] = _require_count(f"minimum for group {raw_id}", minimum)
        return minimums

    def match(
        self,
        group_ids: list[str],
        min_per_group: int = DEFAULT_MIN_PER_GROUP,
        max_results: int = DEFAULT_MAX_RESULTS,
        group_minimums: Optional[Mapping[str, int]] = None,
        short_circuit: bool = True,
    ) -> list[MatchResult]:
        """
        Find meeting windows where every group has enough free members.

        Args:
            group_ids: Groups to match, results list groups in this order
            min_per_group: Minimum covering users required in each group
            max_results: Maximum number of windows to return
            group_minimums: Optional per-group overrides of min_per_group
            short_circuit: Reject a window on the first failing group

        Returns:
            Matches sorted by window start, at most max_results long

        Raises:
            ValidationError: Bad group ids or counts
            NotFoundError: A group or user does not exist
            DataAccessError: Raised by the source, passed through unchanged
        """
        group_ids = validate_group_ids(group_ids)
        max_results = _require_count("max_results", max_results)
        minimums = self.resolve_minimums(group_ids, min_per_group, group_minimums)

        groups = IntervalCollector(self.source).collect(group_ids, minimums)
        matches = find_matches(groups, max_results, short_circuit=short_circuit)

        logger.info(
            f"Matched {len(groups)} groups (minimums={list(minimums.values())}): "
            f"{len(matches)} windows returned (max {max_results})"
        )
        return matches
