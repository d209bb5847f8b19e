"""Schedule router - FastAPI endpoints for schedule operations"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import Schedule
from ...shared.validators import ensure_aware_utc
from .schemas import (
    ScheduleCreate,
    ScheduleResponse,
    ScheduleUpdate,
    ScheduleUpdateResponse,
    TimeSlotResponse,
)
from .service import ScheduleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedules", tags=["Schedules"])


def get_schedule_service(db: Session = Depends(get_db)) -> ScheduleService:
    """Dependency injection for ScheduleService"""
    return ScheduleService(db)


def _schedule_response(schedule: Schedule, service: ScheduleService) -> ScheduleResponse:
    return ScheduleResponse(
        id=schedule.id,
        name=schedule.name,
        timezone=schedule.timezone,
        created_at=ensure_aware_utc(schedule.created_at) if schedule.created_at else None,
        slots=[
            TimeSlotResponse(
                start=ensure_aware_utc(slot.start_time),
                end=ensure_aware_utc(slot.end_time),
                is_recurring=slot.is_recurring,
            )
            for slot in service.get_time_slots(schedule.id)
        ],
    )


@router.post("", response_model=ScheduleResponse)
def create_schedule(
    data: ScheduleCreate, service: ScheduleService = Depends(get_schedule_service)
):
    """Create a schedule and its availability slots"""
    schedule = service.create_schedule(data)
    return _schedule_response(schedule, service)


@router.get("/{schedule_id}", response_model=ScheduleResponse)
def get_schedule(schedule_id: str, service: ScheduleService = Depends(get_schedule_service)):
    """Get a schedule with its slots ordered by start time"""
    return _schedule_response(service.get_schedule(schedule_id), service)


@router.put("/{schedule_id}", response_model=ScheduleUpdateResponse)
def update_schedule(
    schedule_id: str,
    data: ScheduleUpdate,
    service: ScheduleService = Depends(get_schedule_service),
):
    """Update name/timezone; `slots` replaces the whole slot list"""
    schedule = service.update_schedule(schedule_id, data)
    return ScheduleUpdateResponse(id=schedule.id, updated_at=datetime.now(timezone.utc))
