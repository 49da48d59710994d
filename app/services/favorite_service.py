import logging
from typing import List, Optional, Union

from app.core.config import settings
from app.core.constants import FAVORITES_JOIN_POLICIES
from app.core.exceptions import ReferentialIntegrityError
from app.models.favorite import Favorite
from app.models.property import Property
from app.repositories.favorite_repository import FavoriteRepository
from app.repositories.property_repository import PropertyRepository
from app.schemas.common import ActivityType, SortOption
from app.services.activity_feed import ActivityFeedService
from app.services.property_ranking import PropertyRanker

logger = logging.getLogger(__name__)


class FavoriteService:
    """Favorites plus the favorites → properties join.

    The join policy decides what happens when a favorite points at a
    property that has since been deleted:

        - ``strict``   the whole listing fails with
          ``ReferentialIntegrityError``
        - ``lenient``  the orphaned favorite is skipped and logged
    """

    def __init__(
        self,
        favorite_repo: FavoriteRepository,
        property_repo: PropertyRepository,
        activity_feed: ActivityFeedService,
        ranker: Optional[PropertyRanker] = None,
        join_policy: Optional[str] = None,
    ) -> None:
        self._favorite_repo = favorite_repo
        self._property_repo = property_repo
        self._activity_feed = activity_feed
        self._ranker = ranker or PropertyRanker()
        self._join_policy = join_policy or settings.FAVORITES_JOIN_POLICY
        if self._join_policy not in FAVORITES_JOIN_POLICIES:
            raise ValueError(f"Unknown favorites join policy: {self._join_policy!r}")

    async def add(self, user_id: int, property_id: int) -> Favorite:
        """Favorite a property and log it to the user's feed.

        Raises:
            DuplicateFavoriteError: If the pair is already favorited.
            UserNotFoundError / PropertyNotFoundError: On a bad reference.
        """
        favorite = await self._favorite_repo.add(user_id, property_id)
        await self._activity_feed.record(
            user_id,
            ActivityType.favorite,
            property_id=property_id,
            details={"action": "added"},
        )
        return favorite

    async def remove(self, user_id: int, property_id: int) -> bool:
        removed = await self._favorite_repo.remove(user_id, property_id)
        if removed:
            await self._activity_feed.record(
                user_id,
                ActivityType.favorite,
                property_id=property_id,
                details={"action": "removed"},
            )
        return removed

    async def is_favorite(self, user_id: int, property_id: int) -> bool:
        return await self._favorite_repo.exists(user_id, property_id)

    async def favorites_for_user(
        self,
        user_id: int,
        sort: Optional[Union[str, SortOption]] = None,
    ) -> List[Property]:
        """Resolve the user's favorites to properties.

        Without *sort* the properties come back in the order they were
        favorited.
        """
        properties = []
        for favorite in await self._favorite_repo.list_for_user(user_id):
            prop = await self._property_repo.get_by_id(favorite.property_id)
            if prop is None:
                if self._join_policy == "strict":
                    raise ReferentialIntegrityError(
                        f"Favorite {favorite.id} references missing "
                        f"property {favorite.property_id}"
                    )
                logger.warning(
                    "Skipping favorite %d: property %d no longer exists",
                    favorite.id,
                    favorite.property_id,
                )
                continue
            properties.append(prop)

        if sort is not None:
            properties = self._ranker.sort(properties, sort)
        return properties
