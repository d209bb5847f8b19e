"""
Interval Collector

Gathers, per requested group, the roster and each member's availability
intervals from an AvailabilitySource. Availability sources shared by several
members (in the same or different groups) are fetched once per call.
"""

import logging
from typing import Mapping, Optional, Protocol

from ...errors import NotFoundError
from ...shared.validators import validate_group_ids
from .models import GroupAvailability, GroupRoster, Interval, UserAvailability, UserRecord

logger = logging.getLogger(__name__)


class AvailabilitySource(Protocol):
    """Read-only lookups the collector depends on"""

    def get_group_roster(self, group_id: str) -> Optional[GroupRoster]: ...

    def get_user(self, user_id: str) -> Optional[UserRecord]: ...

    def get_intervals(self, source_id: str) -> list[Interval]: ...


class IntervalCollector:
    def __init__(self, source: AvailabilitySource):
        self.source = source

    def collect(
        self,
        group_ids: list[str],
        minimums: Optional[Mapping[str, int]] = None,
    ) -> list[GroupAvailability]:
        """
        Fetch every requested group's members and their intervals.

        Args:
            group_ids: Group identifiers, in the order results should be reported
            minimums: Minimum attendance per group id (missing ids default to 1)

        Returns:
            One GroupAvailability per distinct group id, in request order

        Raises:
            ValidationError: Empty or malformed group id list
            NotFoundError: A group, or a user on a roster, does not exist
        """
        group_ids = validate_group_ids(group_ids)
        minimums = minimums or {}

        # Request-scoped memo: availability source id -> intervals
        interval_cache: dict[str, tuple[Interval, ...]] = {}

        groups = []
        for group_id in group_ids:
            roster = self.source.get_group_roster(group_id)
            if roster is None:
                raise NotFoundError("group", group_id)

            members = []
            for user_id in roster.member_ids:
                user = self.source.get_user(user_id)
                if user is None:
                    raise NotFoundError("user", user_id)

                # Users without a linked schedule can never cover a window
                if user.availability_source_id is None:
                    logger.debug(f"User {user_id} in group {group_id} has no schedule, skipping")
                    continue

                source_id = user.availability_source_id
                if source_id not in interval_cache:
                    interval_cache[source_id] = tuple(self.source.get_intervals(source_id))
                members.append(
                    UserAvailability(user_id=user_id, intervals=interval_cache[source_id])
                )

            groups.append(
                GroupAvailability(
                    group_id=group_id,
                    name=roster.name,
                    min_attendance=minimums.get(group_id, 1),
                    roster_size=len(roster.member_ids),
                    members=tuple(members),
                )
            )

        logger.debug(
            f"Collected {len(groups)} groups using {len(interval_cache)} availability sources"
        )
        return groups
