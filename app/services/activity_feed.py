import logging
from typing import Any, Dict, List, Optional

from app.core.config import settings
from app.models.activity import Activity
from app.repositories.activity_repository import ActivityRepository
from app.schemas.common import ActivityType

logger = logging.getLogger(__name__)


class ActivityFeedService:
    """Append-only per-user event log with a bounded, newest-first view."""

    def __init__(
        self,
        activity_repo: ActivityRepository,
        default_limit: Optional[int] = None,
    ) -> None:
        self._repo = activity_repo
        self._default_limit = (
            default_limit
            if default_limit is not None
            else settings.DEFAULT_ACTIVITY_LIMIT
        )

    async def record(
        self,
        user_id: int,
        type: ActivityType,
        property_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> Activity:
        activity = await self._repo.create(
            user_id=user_id,
            type=type,
            property_id=property_id,
            details=details,
        )
        logger.info(
            "Recorded %s activity %d for user %d",
            activity.type.value,
            activity.id,
            user_id,
        )
        return activity

    async def recent(self, user_id: int, limit: Optional[int] = None) -> List[Activity]:
        """Return up to *limit* of the user's activities, newest first.

        Activities stamped with the same instant are ordered by id,
        later insertions first.
        """
        if limit is None:
            limit = self._default_limit
        if limit <= 0:
            return []

        activities = await self._repo.list_for_user(user_id)
        activities.sort(key=lambda a: (a.created_at, a.id), reverse=True)
        return activities[:limit]
