"""Group service - Business logic for users, groups and memberships"""

import logging

from sqlalchemy.orm import Session

from ...errors import NotFoundError
from ...models import Group, User
from ...shared.validators import canonical_uuid, validate_uuid
from ...utils.sanitization import sanitize_name
from ..schedules.repository import ScheduleRepository
from .repository import GroupRepository, UserRepository
from .schemas import GroupCreate, GroupUpdate

logger = logging.getLogger(__name__)


class GroupService:
    """Service layer for user and group business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository()
        self.groups = GroupRepository()
        self.schedules = ScheduleRepository()

    # Users

    def link_user(self, user_id: str, schedule_id: str) -> User:
        """Create or relink a user to an existing schedule"""
        schedule = None
        if validate_uuid(schedule_id):
            schedule_id = canonical_uuid(schedule_id, "schedule")
            schedule = self.schedules.get_schedule_by_id(self.db, schedule_id)
        if not schedule:
            raise NotFoundError("schedule", schedule_id)

        logger.info(f"Linking user {user_id} to schedule {schedule_id}")
        return self.users.upsert_user(self.db, user_id, schedule_id)

    def get_user(self, user_id: str) -> User:
        user = self.users.get_user_by_id(self.db, user_id)
        if not user:
            raise NotFoundError("user", user_id)
        return user

    def get_user_groups(self, user_id: str) -> list[Group]:
        self.get_user(user_id)
        return self.users.get_user_groups(self.db, user_id)

    # Groups

    def get_group(self, group_id: str) -> Group:
        group = self.groups.get_group_by_id(self.db, canonical_uuid(group_id, "group"))
        if not group:
            raise NotFoundError("group", group_id)
        return group

    def get_members(self, group_id: str) -> list[User]:
        return [user for _, user in self.groups.get_members(self.db, group_id)]

    def create_group(self, data: GroupCreate) -> Group:
        """Create a group; unknown members are created without a schedule"""
        logger.info(f"Creating group '{data.name}' on server {data.server_id}")

        group = self.groups.create_group(self.db, sanitize_name(data.name), data.server_id)
        for user_id in data.member_ids:
            self.users.ensure_user(self.db, user_id)
            self.groups.add_member(self.db, group.id, user_id)

        self.groups.commit(self.db)
        self.db.refresh(group)
        return group

    def update_group(self, group_id: str, data: GroupUpdate) -> Group:
        group = self.get_group(group_id)

        if data.name is not None:
            group.name = sanitize_name(data.name)

        for user_id in data.add_member_ids or []:
            self.users.ensure_user(self.db, user_id)
            self.groups.add_member(self.db, group.id, user_id)

        for user_id in data.remove_member_ids or []:
            self.groups.remove_member(self.db, group.id, user_id)

        self.groups.commit(self.db)
        self.db.refresh(group)
        logger.info(
            f"Updated group {group.id}: +{len(data.add_member_ids or [])} "
            f"-{len(data.remove_member_ids or [])} members"
        )
        return group

    def set_group_role(self, group_id: str, role_id: str) -> Group:
        group = self.get_group(group_id)
        group.role_id = role_id
        self.groups.commit(self.db)
        self.db.refresh(group)
        return group
