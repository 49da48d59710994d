from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_activity_feed, get_current_user_id
from app.models.activity import Activity
from app.schemas.activity import ActivityCreate
from app.services.activity_feed import ActivityFeedService

router = APIRouter(prefix="/activities", tags=["Activities"])


@router.get("", response_model=List[Activity])
async def list_activities(
    limit: Optional[int] = Query(None, ge=0, le=100),
    user_id: int = Depends(get_current_user_id),
    feed: ActivityFeedService = Depends(get_activity_feed),
) -> List[Activity]:
    """The caller's most recent activities, newest first."""
    return await feed.recent(user_id, limit=limit)


@router.post("", response_model=Activity, status_code=201)
async def record_activity(
    body: ActivityCreate,
    user_id: int = Depends(get_current_user_id),
    feed: ActivityFeedService = Depends(get_activity_feed),
) -> Activity:
    return await feed.record(
        user_id,
        body.type,
        property_id=body.property_id,
        details=body.details,
    )
