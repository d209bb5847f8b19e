"""Schedule domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from ...shared.validators import validate_timezone


def _validate_name(v: Optional[str]) -> Optional[str]:
    if v is not None and not v.strip():
        raise ValueError("Name must not be blank")
    return v


class TimeSlotCreate(BaseModel):
    """A concrete availability interval; recurring slots are stored as given"""

    start: datetime
    end: datetime
    is_recurring: bool = False

    @field_validator("start", "end")
    @classmethod
    def validate_aware(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("Timestamps must include a timezone offset")
        return v

    @model_validator(mode="after")
    def validate_range(self):
        if self.end <= self.start:
            raise ValueError("Slot end must be after start")
        return self


class ScheduleCreate(BaseModel):
    name: str
    timezone: str = "UTC"
    slots: list[TimeSlotCreate] = []
    user_id: Optional[str] = None  # Link this schedule to a user on creation

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _validate_name(v)

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v):
        return validate_timezone(v)


class ScheduleUpdate(BaseModel):
    """`slots`, when given, replaces every existing slot"""

    name: Optional[str] = None
    timezone: Optional[str] = None
    slots: Optional[list[TimeSlotCreate]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _validate_name(v)

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v):
        if v is None:
            return v
        return validate_timezone(v)


class TimeSlotResponse(BaseModel):
    start: datetime
    end: datetime
    is_recurring: bool


class ScheduleResponse(BaseModel):
    id: str
    name: str
    timezone: str
    created_at: Optional[datetime] = None
    slots: list[TimeSlotResponse] = []


class ScheduleUpdateResponse(BaseModel):
    id: str
    updated_at: datetime
