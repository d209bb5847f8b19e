"""Availability API schemas - Pydantic models for the match response"""

from datetime import datetime

from pydantic import BaseModel

from .models import MatchResult


class MatchGroupResponse(BaseModel):
    """Coverage of one group inside a matched window"""

    group_id: str
    name: str
    available_user_ids: list[str]
    count: int
    group_size: int  # Members with a linked schedule
    roster_size: int  # All members on the roster


class MatchWindowResponse(BaseModel):
    start: datetime
    end: datetime
    groups: list[MatchGroupResponse]

    @classmethod
    def from_result(cls, result: MatchResult) -> "MatchWindowResponse":
        return cls(
            start=result.start,
            end=result.end,
            groups=[
                MatchGroupResponse(
                    group_id=g.group_id,
                    name=g.name,
                    available_user_ids=list(g.available_user_ids),
                    count=g.count,
                    group_size=g.group_size,
                    roster_size=g.roster_size,
                )
                for g in result.groups
            ],
        )


class MatchResponse(BaseModel):
    matches: list[MatchWindowResponse]
