"""Availability engine value types - immutable pydantic models"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


def _require_aware(value: datetime) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("timestamp must be timezone-aware")
    return value.astimezone(timezone.utc)


class Interval(_Frozen):
    """Half-open time range [start, end) with start < end, normalised to UTC"""

    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def validate_aware(cls, v: datetime) -> datetime:
        return _require_aware(v)

    @model_validator(mode="after")
    def validate_order(self):
        if self.start >= self.end:
            raise ValueError(f"interval start {self.start} must be before end {self.end}")
        return self

    def contains(self, start: datetime, end: datetime) -> bool:
        """True if [start, end) lies entirely inside this interval"""
        return self.start <= start and self.end >= end


class CandidateWindow(Interval):
    """Atomic window between two adjacent boundaries; coverage is constant inside it"""


class UserAvailability(_Frozen):
    user_id: str
    intervals: tuple[Interval, ...] = ()

    @field_validator("intervals")
    @classmethod
    def sort_intervals(cls, v: tuple[Interval, ...]) -> tuple[Interval, ...]:
        return tuple(sorted(v, key=lambda i: (i.start, i.end)))

    def covers(self, window: CandidateWindow) -> bool:
        return any(interval.contains(window.start, window.end) for interval in self.intervals)


class GroupRoster(_Frozen):
    """Roster record returned by the data source"""

    group_id: str
    name: str
    member_ids: tuple[str, ...] = ()


class UserRecord(_Frozen):
    """User record returned by the data source"""

    user_id: str
    availability_source_id: Optional[str] = None


class GroupAvailability(_Frozen):
    """
    One group's availability for a single match request.

    `members` holds only users with an availability source, in roster order;
    `roster_size` counts everyone on the roster.
    """

    group_id: str
    name: str
    min_attendance: int = 1
    roster_size: int = 0
    members: tuple[UserAvailability, ...] = ()

    @property
    def group_size(self) -> int:
        return len(self.members)


class GroupCoverage(_Frozen):
    group_id: str
    name: str
    available_user_ids: tuple[str, ...]
    count: int
    group_size: int
    roster_size: int

    @model_validator(mode="after")
    def validate_count(self):
        if self.count != len(self.available_user_ids):
            raise ValueError("count must equal the number of available users")
        return self


class MatchResult(_Frozen):
    window: CandidateWindow
    groups: tuple[GroupCoverage, ...]

    @property
    def start(self) -> datetime:
        return self.window.start

    @property
    def end(self) -> datetime:
        return self.window.end
