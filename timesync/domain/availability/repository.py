"""Availability repository - SQL-backed lookups consumed by the IntervalCollector"""

from typing import Optional

from sqlalchemy.orm import Session

from ...database import data_access
from ...models import Group, GroupMember, TimeSlot, User
from ...shared.validators import ensure_aware_utc
from .models import GroupRoster, Interval, UserRecord


class SqlAvailabilitySource:
    """AvailabilitySource over the schedules / groups tables of one session"""

    def __init__(self, db: Session):
        self.db = db

    @data_access
    def get_group_roster(self, group_id: str) -> Optional[GroupRoster]:
        group = self.db.query(Group).filter(Group.id == group_id).first()
        if not group:
            return None

        member_ids = [
            row.user_id
            for row in self.db.query(GroupMember.user_id)
            .filter(GroupMember.group_id == group_id)
            .order_by(GroupMember.position, GroupMember.user_id)
            .all()
        ]
        return GroupRoster(group_id=group.id, name=group.name, member_ids=tuple(member_ids))

    @data_access
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        user = self.db.query(User).filter(User.user_id == user_id).first()
        if not user:
            return None
        return UserRecord(user_id=user.user_id, availability_source_id=user.schedule_id)

    @data_access
    def get_intervals(self, source_id: str) -> list[Interval]:
        slots = (
            self.db.query(TimeSlot)
            .filter(TimeSlot.schedule_id == source_id)
            .order_by(TimeSlot.start_time.asc())
            .all()
        )
        return [
            Interval(start=ensure_aware_utc(slot.start_time), end=ensure_aware_utc(slot.end_time))
            for slot in slots
        ]
