"""Group router - FastAPI endpoints for users and groups"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import Group
from .schemas import (
    GroupCreate,
    GroupDetailResponse,
    GroupMemberResponse,
    GroupResponse,
    GroupRoleResponse,
    GroupRoleUpdate,
    GroupUpdate,
    GroupUpdateResponse,
    UserCreate,
    UserResponse,
)
from .service import GroupService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Groups"])


def get_group_service(db: Session = Depends(get_db)) -> GroupService:
    """Dependency injection for GroupService"""
    return GroupService(db)


def _group_response(group: Group) -> GroupResponse:
    return GroupResponse(
        id=group.id, name=group.name, server_id=group.server_id, role_id=group.role_id
    )


# ============================================================================
# USERS
# ============================================================================


@router.post("/users", response_model=UserResponse)
def create_user(data: UserCreate, service: GroupService = Depends(get_group_service)):
    """Link a user to an existing schedule (creates the user if needed)"""
    user = service.link_user(data.user_id, data.schedule_id)
    return UserResponse(user_id=user.user_id, schedule_id=user.schedule_id)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: str, service: GroupService = Depends(get_group_service)):
    user = service.get_user(user_id)
    return UserResponse(user_id=user.user_id, schedule_id=user.schedule_id)


@router.get("/users/{user_id}/groups", response_model=list[GroupResponse])
def get_user_groups(user_id: str, service: GroupService = Depends(get_group_service)):
    """Groups the user is a member of"""
    return [_group_response(g) for g in service.get_user_groups(user_id)]


# ============================================================================
# GROUPS
# ============================================================================


@router.post("/groups", response_model=GroupResponse)
def create_group(data: GroupCreate, service: GroupService = Depends(get_group_service)):
    return _group_response(service.create_group(data))


@router.get("/groups/{group_id}", response_model=GroupDetailResponse)
def get_group(group_id: str, service: GroupService = Depends(get_group_service)):
    """Group with its members in roster order"""
    group = service.get_group(group_id)
    members = [
        GroupMemberResponse(user_id=user.user_id, schedule_id=user.schedule_id)
        for user in service.get_members(group.id)
    ]
    return GroupDetailResponse(**_group_response(group).model_dump(), members=members)


@router.put("/groups/{group_id}", response_model=GroupUpdateResponse)
def update_group(
    group_id: str, data: GroupUpdate, service: GroupService = Depends(get_group_service)
):
    """Rename a group and/or add and remove members"""
    group = service.update_group(group_id, data)
    return GroupUpdateResponse(id=group.id, updated_at=datetime.now(timezone.utc))


@router.put("/groups/{group_id}/role", response_model=GroupRoleResponse)
def update_group_role(
    group_id: str, data: GroupRoleUpdate, service: GroupService = Depends(get_group_service)
):
    """Record the chat role created for this group"""
    group = service.set_group_role(group_id, data.role_id)
    return GroupRoleResponse(id=group.id, role_id=group.role_id, updated_at=datetime.now(timezone.utc))
