"""Schedule repository - Database operations for schedules and time slots"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ...database import data_access
from ...models import Schedule, TimeSlot


class ScheduleRepository:
    """Repository for schedule database operations"""

    @staticmethod
    @data_access
    def get_schedule_by_id(db: Session, schedule_id: str) -> Optional[Schedule]:
        return db.query(Schedule).filter(Schedule.id == schedule_id).first()

    @staticmethod
    @data_access
    def create_schedule(
        db: Session, name: str, timezone: str, slots: list[tuple[datetime, datetime, bool]]
    ) -> Schedule:
        """Create a schedule together with its slots in one transaction"""
        schedule = Schedule(name=name, timezone=timezone)
        for start, end, is_recurring in slots:
            schedule.time_slots.append(
                TimeSlot(start_time=start, end_time=end, is_recurring=is_recurring)
            )
        db.add(schedule)
        db.commit()
        db.refresh(schedule)
        return schedule

    @staticmethod
    @data_access
    def update_schedule(
        db: Session,
        schedule: Schedule,
        slots: Optional[list[tuple[datetime, datetime, bool]]] = None,
        **updates,
    ) -> Schedule:
        """Update schedule fields; a non-None `slots` replaces all existing slots"""
        for key, value in updates.items():
            if value is not None and hasattr(schedule, key):
                setattr(schedule, key, value)

        if slots is not None:
            db.query(TimeSlot).filter(TimeSlot.schedule_id == schedule.id).delete(
                synchronize_session=False
            )
            db.expire(schedule, ["time_slots"])
            for start, end, is_recurring in slots:
                db.add(
                    TimeSlot(
                        schedule_id=schedule.id,
                        start_time=start,
                        end_time=end,
                        is_recurring=is_recurring,
                    )
                )

        db.commit()
        db.refresh(schedule)
        return schedule

    @staticmethod
    @data_access
    def get_time_slots(db: Session, schedule_id: str) -> list[TimeSlot]:
        return (
            db.query(TimeSlot)
            .filter(TimeSlot.schedule_id == schedule_id)
            .order_by(TimeSlot.start_time.asc())
            .all()
        )
