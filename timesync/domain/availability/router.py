"""Availability router - FastAPI endpoint for multi-group matching"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import config
from ...database import get_db
from ...errors import ValidationError
from ...rate_limiter import create_rate_limiter
from ...shared.validators import parse_id_list
from .engine import AvailabilityMatcher
from .repository import SqlAvailabilitySource
from .schemas import MatchResponse, MatchWindowResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/availability", tags=["Availability"])

match_rate_limit = create_rate_limiter(
    limit=config.MATCH_RATE_LIMIT,
    window_seconds=config.MATCH_RATE_WINDOW_SECONDS,
    key_prefix="availability_match",
)


def get_matcher(db: Session = Depends(get_db)) -> AvailabilityMatcher:
    """Dependency injection for AvailabilityMatcher"""
    return AvailabilityMatcher(SqlAvailabilitySource(db))


@router.get("/match", response_model=MatchResponse)
def match_availability(
    group_ids: str = Query("", description="Comma-separated group UUIDs"),
    min_per_group: int = Query(config.MATCH_DEFAULT_MIN_PER_GROUP),
    count: int = Query(config.MATCH_DEFAULT_COUNT),
    matcher: AvailabilityMatcher = Depends(get_matcher),
    _: None = Depends(match_rate_limit),
):
    """
    Find meeting times where at least `min_per_group` members of every group are free.

    GET /api/availability/match?group_ids=uuid1,uuid2&min_per_group=2&count=5
    """
    if count > config.MATCH_MAX_COUNT:
        raise ValidationError(f"count must be at most {config.MATCH_MAX_COUNT}")

    matches = matcher.match(
        parse_id_list(group_ids), min_per_group=min_per_group, max_results=count
    )
    return MatchResponse(matches=[MatchWindowResponse.from_result(m) for m in matches])
