from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from fakes import at, iv
from timesync.domain.availability.models import (
    CandidateWindow,
    GroupCoverage,
    Interval,
    UserAvailability,
)


def test_interval_requires_start_before_end():
    with pytest.raises(PydanticValidationError):
        Interval(start=at(10), end=at(10))
    with pytest.raises(PydanticValidationError):
        Interval(start=at(11), end=at(10))


def test_interval_rejects_naive_timestamps():
    with pytest.raises(PydanticValidationError):
        Interval(start=datetime(2025, 1, 6, 9), end=datetime(2025, 1, 6, 10))


def test_interval_normalises_to_utc():
    plus_two = timezone(timedelta(hours=2))
    interval = Interval(
        start=datetime(2025, 1, 6, 11, tzinfo=plus_two),
        end=datetime(2025, 1, 6, 12, tzinfo=plus_two),
    )
    assert interval.start == at(9)
    assert interval.start.utcoffset() == timedelta(0)


def test_interval_is_immutable():
    interval = iv(9, 10)
    with pytest.raises(PydanticValidationError):
        interval.start = at(8)


def test_contains_requires_full_containment():
    interval = iv(9, 12)
    assert interval.contains(at(9), at(12))
    assert interval.contains(at(10), at(11))
    assert not interval.contains(at(8), at(10))
    assert not interval.contains(at(11), at(13))


def test_user_availability_sorts_intervals():
    user = UserAvailability(user_id="u1", intervals=(iv(14, 15), iv(9, 10)))
    assert [i.start for i in user.intervals] == [at(9), at(14)]


def test_user_covers_window_from_any_interval():
    user = UserAvailability(user_id="u1", intervals=(iv(9, 10), iv(14, 16)))
    assert user.covers(CandidateWindow(start=at(14), end=at(15)))
    assert not user.covers(CandidateWindow(start=at(10), end=at(14)))


def test_group_coverage_count_must_match_users():
    with pytest.raises(PydanticValidationError):
        GroupCoverage(
            group_id="g",
            name="g",
            available_user_ids=("u1",),
            count=2,
            group_size=2,
            roster_size=2,
        )
