from typing import Any, List, Optional, Union

from app.models.property import Property
from app.models.saved_search import SavedSearch
from app.repositories.saved_search_repository import SavedSearchRepository
from app.schemas.common import ActivityType, SortOption
from app.services.activity_feed import ActivityFeedService
from app.services.property_search_service import PropertySearchService


class SavedSearchService:
    """Ownership-checked saved searches.

    Every per-record operation takes the caller's user id; a record the
    caller does not own is reported exactly like a missing one.
    """

    def __init__(
        self,
        saved_search_repo: SavedSearchRepository,
        activity_feed: ActivityFeedService,
        search_service: PropertySearchService,
    ) -> None:
        self._repo = saved_search_repo
        self._activity_feed = activity_feed
        self._search_service = search_service

    async def list_for_user(self, user_id: int) -> List[SavedSearch]:
        return await self._repo.list_for_user(user_id)

    async def get(self, search_id: int, user_id: int) -> Optional[SavedSearch]:
        return await self._repo.get_owned(search_id, user_id)

    async def create(self, user_id: int, **kwargs: Any) -> SavedSearch:
        search = await self._repo.create(user_id=user_id, **kwargs)
        await self._activity_feed.record(
            user_id, ActivityType.search, details={"name": search.name}
        )
        return search

    async def delete(self, search_id: int, user_id: int) -> bool:
        return await self._repo.delete_owned(search_id, user_id)

    async def results(
        self,
        search_id: int,
        user_id: int,
        sort: Optional[Union[str, SortOption]] = None,
    ) -> Optional[List[Property]]:
        """Properties currently matching the search; ``None`` if not found."""
        search = await self._repo.get_owned(search_id, user_id)
        if search is None:
            return None
        return await self._search_service.run_saved_criteria(search, sort=sort)
