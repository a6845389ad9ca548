from fastapi import APIRouter, Depends, Query
from typing import List
from checkin_app.core.config import settings
from checkin_app.core.dependencies import get_activity_feed
from checkin_app.schemas.feed import FeedItem
from checkin_app.services import ActivityFeedAggregator

router = APIRouter()

@router.get("/{user_id}", response_model=List[FeedItem])
def get_activity_feed(
    user_id: int,
    limit: int = Query(settings.FEED_DEFAULT_LIMIT, ge=1, le=settings.FEED_MAX_LIMIT),
    aggregator: ActivityFeedAggregator = Depends(get_activity_feed)
):
    """
    Get friends' recent check-ins, most recent first
    """
    return aggregator.feed(user_id, limit=limit)
