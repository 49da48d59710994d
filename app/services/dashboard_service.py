from app.repositories.alert_repository import AlertRepository
from app.repositories.favorite_repository import FavoriteRepository
from app.repositories.saved_search_repository import SavedSearchRepository
from app.schemas.dashboard import DashboardSummary
from app.services.activity_feed import ActivityFeedService


class DashboardService:
    """Per-user home page summary."""

    def __init__(
        self,
        favorite_repo: FavoriteRepository,
        saved_search_repo: SavedSearchRepository,
        alert_repo: AlertRepository,
        activity_feed: ActivityFeedService,
    ) -> None:
        self._favorite_repo = favorite_repo
        self._saved_search_repo = saved_search_repo
        self._alert_repo = alert_repo
        self._activity_feed = activity_feed

    async def summary(self, user_id: int) -> DashboardSummary:
        # Favorite rows are counted, not resolved against properties.
        return DashboardSummary(
            favorites_count=await self._favorite_repo.count_for_user(user_id),
            saved_searches_count=len(
                await self._saved_search_repo.list_for_user(user_id)
            ),
            enabled_alerts_count=await self._alert_repo.count_enabled_for_user(
                user_id
            ),
            recent_activities=await self._activity_feed.recent(user_id),
        )
