"""Boundary Extractor - splits the timeline at every interval endpoint"""

from datetime import datetime
from typing import Iterable

from .models import CandidateWindow, GroupAvailability


def collect_boundaries(groups: Iterable[GroupAvailability]) -> list[datetime]:
    """Every interval start and end across all groups, sorted and de-duplicated"""
    boundaries = set()
    for group in groups:
        for member in group.members:
            for interval in member.intervals:
                boundaries.add(interval.start)
                boundaries.add(interval.end)
    return sorted(boundaries)


def extract_candidate_windows(groups: Iterable[GroupAvailability]) -> list[CandidateWindow]:
    """
    Build the coarsest decomposition of the timeline over which coverage is constant.

    Attendee sets only change at an interval boundary, so each pair of adjacent
    distinct boundaries forms one candidate window.
    """
    boundaries = collect_boundaries(groups)
    return [
        CandidateWindow(start=start, end=end)
        for start, end in zip(boundaries, boundaries[1:])
        if start < end
    ]
