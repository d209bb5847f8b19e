"""Group repository - Database operations for users, groups and memberships"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...database import data_access
from ...models import Group, GroupMember, User


class UserRepository:
    """Repository for user database operations"""

    @staticmethod
    @data_access
    def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
        return db.query(User).filter(User.user_id == user_id).first()

    @staticmethod
    @data_access
    def upsert_user(
        db: Session, user_id: str, schedule_id: Optional[str] = None, commit: bool = True
    ) -> User:
        """Create the user, or relink an existing one to `schedule_id`"""
        user = db.query(User).filter(User.user_id == user_id).first()
        if user is None:
            user = User(user_id=user_id, schedule_id=schedule_id)
            db.add(user)
        else:
            user.schedule_id = schedule_id
        if commit:
            db.commit()
            db.refresh(user)
        else:
            db.flush()
        return user

    @staticmethod
    @data_access
    def ensure_user(db: Session, user_id: str) -> User:
        """Return the user, creating it without a schedule if unknown"""
        user = db.query(User).filter(User.user_id == user_id).first()
        if user is None:
            user = User(user_id=user_id)
            db.add(user)
            db.flush()
        return user

    @staticmethod
    @data_access
    def get_user_groups(db: Session, user_id: str) -> list[Group]:
        return (
            db.query(Group)
            .join(GroupMember, GroupMember.group_id == Group.id)
            .filter(GroupMember.user_id == user_id)
            .order_by(Group.created_at.asc(), Group.name.asc())
            .all()
        )


class GroupRepository:
    """Repository for group database operations"""

    @staticmethod
    @data_access
    def get_group_by_id(db: Session, group_id: str) -> Optional[Group]:
        return db.query(Group).filter(Group.id == group_id).first()

    @staticmethod
    @data_access
    def create_group(db: Session, name: str, server_id: str) -> Group:
        group = Group(name=name, server_id=server_id)
        db.add(group)
        db.flush()
        return group

    @staticmethod
    @data_access
    def add_member(db: Session, group_id: str, user_id: str) -> GroupMember:
        """Add a member at the end of the roster; existing members are left in place"""
        member = (
            db.query(GroupMember)
            .filter(GroupMember.group_id == group_id, GroupMember.user_id == user_id)
            .first()
        )
        if member:
            return member

        last_position = (
            db.query(func.max(GroupMember.position))
            .filter(GroupMember.group_id == group_id)
            .scalar()
        )
        member = GroupMember(
            group_id=group_id,
            user_id=user_id,
            position=0 if last_position is None else last_position + 1,
        )
        db.add(member)
        db.flush()
        return member

    @staticmethod
    @data_access
    def remove_member(db: Session, group_id: str, user_id: str) -> None:
        db.query(GroupMember).filter(
            GroupMember.group_id == group_id, GroupMember.user_id == user_id
        ).delete(synchronize_session=False)
        db.flush()

    @staticmethod
    @data_access
    def get_members(db: Session, group_id: str) -> list[tuple[GroupMember, User]]:
        return (
            db.query(GroupMember, User)
            .join(User, User.user_id == GroupMember.user_id)
            .filter(GroupMember.group_id == group_id)
            .order_by(GroupMember.position.asc(), GroupMember.user_id.asc())
            .all()
        )

    @staticmethod
    @data_access
    def commit(db: Session) -> None:
        db.commit()
