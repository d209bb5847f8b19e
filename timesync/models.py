import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate a UUID primary key"""
    return str(uuid.uuid4())


class Schedule(Base):
    """A user's availability source: a named set of time slots"""

    __tablename__ = "schedules"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    timezone = Column(String(64), nullable=False, default="UTC")  # Display timezone only
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    time_slots = relationship(
        "TimeSlot",
        back_populates="schedule",
        cascade="all, delete-orphan",
        order_by="TimeSlot.start_time",
    )
    users = relationship("User", back_populates="schedule")


class TimeSlot(Base):
    __tablename__ = "time_slots"
    __table_args__ = (CheckConstraint("end_time > start_time", name="valid_time_range"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    schedule_id = Column(String(36), ForeignKey("schedules.id"), nullable=False, index=True)
    start_time = Column(DateTime(timezone=True), nullable=False, index=True)
    end_time = Column(DateTime(timezone=True), nullable=False, index=True)
    is_recurring = Column(Boolean, default=False, nullable=False)  # Stored, not expanded
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    schedule = relationship("Schedule", back_populates="time_slots")


class User(Base):
    """A chat-platform user, optionally linked to a schedule"""

    __tablename__ = "users"

    user_id = Column(String(255), primary_key=True)
    schedule_id = Column(String(36), ForeignKey("schedules.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    schedule = relationship("Schedule", back_populates="users")
    memberships = relationship("GroupMember", back_populates="user", cascade="all, delete-orphan")


class Group(Base):
    __tablename__ = "groups"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    server_id = Column(String(255), nullable=False, index=True)
    role_id = Column(String(255), nullable=True)  # Set once the chat role exists
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    members = relationship(
        "GroupMember",
        back_populates="group",
        cascade="all, delete-orphan",
        order_by="GroupMember.position",
    )


class GroupMember(Base):
    __tablename__ = "group_members"

    group_id = Column(String(36), ForeignKey("groups.id"), primary_key=True, index=True)
    user_id = Column(String(255), ForeignKey("users.user_id"), primary_key=True, index=True)
    position = Column(Integer, nullable=False, default=0)  # Roster order
    joined_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    group = relationship("Group", back_populates="members")
    user = relationship("User", back_populates="memberships")
