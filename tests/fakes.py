"""In-memory AvailabilitySource and time helpers for engine tests"""

from collections import Counter
from datetime import datetime, timezone
from typing import Optional

from timesync.domain.availability.models import (
    GroupAvailability,
    GroupRoster,
    Interval,
    UserAvailability,
    UserRecord,
)

G1 = "11111111-1111-1111-1111-111111111111"
G2 = "22222222-2222-2222-2222-222222222222"
G3 = "33333333-3333-3333-3333-333333333333"
MISSING = "99999999-9999-9999-9999-999999999999"


def at(hour: int, minute: int = 0, day: int = 6) -> datetime:
    return datetime(2025, 1, day, hour, minute, tzinfo=timezone.utc)


def iv(start_hour, end_hour, day: int = 6) -> Interval:
    """Interval from hours; fractional hours become minutes"""
    return Interval(
        start=at(int(start_hour), int(round((start_hour % 1) * 60)), day),
        end=at(int(end_hour), int(round((end_hour % 1) * 60)), day),
    )


def group(group_id: str, members: dict, minimum: int = 1, name: Optional[str] = None):
    """GroupAvailability from {user_id: [Interval, ...]}"""
    return GroupAvailability(
        group_id=group_id,
        name=name or group_id[:4],
        min_attendance=minimum,
        roster_size=len(members),
        members=tuple(
            UserAvailability(user_id=user_id, intervals=tuple(intervals))
            for user_id, intervals in members.items()
        ),
    )


class FakeAvailabilitySource:
    """
    rosters: {group_id: (name, [user_id, ...])}
    users: {user_id: source_id or None}
    intervals: {source_id: [Interval, ...]}
    """

    def __init__(self, rosters: dict, users: dict, intervals: dict, fail_with=None):
        self.rosters = rosters
        self.users = users
        self.intervals = intervals
        self.fail_with = fail_with
        self.interval_fetches = Counter()

    def get_group_roster(self, group_id: str) -> Optional[GroupRoster]:
        if group_id not in self.rosters:
            return None
        name, member_ids = self.rosters[group_id]
        return GroupRoster(group_id=group_id, name=name, member_ids=tuple(member_ids))

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        if user_id not in self.users:
            return None
        return UserRecord(user_id=user_id, availability_source_id=self.users[user_id])

    def get_intervals(self, source_id: str) -> list[Interval]:
        if self.fail_with is not None:
            raise self.fail_with
        self.interval_fetches[source_id] += 1
        return list(self.intervals.get(source_id, []))


def scenario_a_source() -> FakeAvailabilitySource:
    return FakeAvailabilitySource(
        rosters={G1: ("Raiders", ["u1"]), G2: ("Healers", ["u2"])},
        users={"u1": "s1", "u2": "s2"},
        intervals={"s1": [iv(9, 11)], "s2": [iv(10, 12)]},
    )
