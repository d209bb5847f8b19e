"""Schedule service - Business logic for schedule operations"""

import logging
from datetime import timezone

from sqlalchemy.orm import Session

from ...errors import NotFoundError
from ...models import Schedule
from ...shared.validators import canonical_uuid
from ...utils.sanitization import sanitize_name
from ..groups.repository import UserRepository
from .repository import ScheduleRepository
from .schemas import ScheduleCreate, ScheduleUpdate, TimeSlotCreate

logger = logging.getLogger(__name__)


def _slot_rows(slots: list[TimeSlotCreate]) -> list[tuple]:
    """Slots as (start, end, is_recurring) with instants normalised to UTC"""
    return [
        (slot.start.astimezone(timezone.utc), slot.end.astimezone(timezone.utc), slot.is_recurring)
        for slot in slots
    ]


class ScheduleService:
    """Service layer for schedule business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ScheduleRepository()
        self.users = UserRepository()

    def get_schedule(self, schedule_id: str) -> Schedule:
        schedule = self.repo.get_schedule_by_id(self.db, canonical_uuid(schedule_id, "schedule"))
        if not schedule:
            raise NotFoundError("schedule", schedule_id)
        return schedule

    def create_schedule(self, data: ScheduleCreate) -> Schedule:
        """Create a schedule with its slots, optionally linking a user to it"""
        logger.info(f"Creating schedule '{data.name}' with {len(data.slots)} slots")

        schedule = self.repo.create_schedule(
            self.db, sanitize_name(data.name), data.timezone, _slot_rows(data.slots)
        )

        if data.user_id:
            self.users.upsert_user(self.db, data.user_id, schedule.id)
            logger.info(f"Linked user {data.user_id} to schedule {schedule.id}")

        return schedule

    def update_schedule(self, schedule_id: str, data: ScheduleUpdate) -> Schedule:
        schedule = self.get_schedule(schedule_id)

        slots = _slot_rows(data.slots) if data.slots is not None else None
        name = sanitize_name(data.name) if data.name is not None else None

        return self.repo.update_schedule(
            self.db, schedule, slots=slots, name=name, timezone=data.timezone
        )

    def get_time_slots(self, schedule_id: str):
        return self.repo.get_time_slots(self.db, schedule_id)
