"""Group domain schemas - Pydantic models for users, groups and roles"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator


def _require_text(v: str, field: str) -> str:
    if not v or not v.strip():
        raise ValueError(f"{field} must not be blank")
    return v.strip()


class UserCreate(BaseModel):
    user_id: str
    schedule_id: str

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v):
        return _require_text(v, "user_id")


class UserResponse(BaseModel):
    user_id: str
    schedule_id: Optional[str] = None


class GroupCreate(BaseModel):
    name: str
    server_id: str
    member_ids: list[str] = []

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "name")

    @field_validator("server_id")
    @classmethod
    def validate_server_id(cls, v):
        return _require_text(v, "server_id")

    @field_validator("member_ids")
    @classmethod
    def validate_member_ids(cls, v):
        return [_require_text(member_id, "member id") for member_id in v]


class GroupUpdate(BaseModel):
    name: Optional[str] = None
    add_member_ids: Optional[list[str]] = None
    remove_member_ids: Optional[list[str]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        return _require_text(v, "name")


class GroupRoleUpdate(BaseModel):
    role_id: str

    @field_validator("role_id")
    @classmethod
    def validate_role_id(cls, v):
        return _require_text(v, "role_id")


class GroupMemberResponse(BaseModel):
    user_id: str
    schedule_id: Optional[str] = None


class GroupResponse(BaseModel):
    id: str
    name: str
    server_id: str
    role_id: Optional[str] = None


class GroupDetailResponse(GroupResponse):
    members: list[GroupMemberResponse] = []


class GroupUpdateResponse(BaseModel):
    id: str
    updated_at: datetime


class GroupRoleResponse(BaseModel):
    id: str
    role_id: str
    updated_at: datetime
