import logging
from typing import Any, List, Mapping, Optional, Union

from app.core.config import settings
from app.models.property import Property
from app.models.saved_search import SavedSearch
from app.repositories.property_repository import PropertyRepository
from app.schemas.common import PropertyStatus, SortOption
from app.schemas.search import NearbyProperty, PropertyFilter
from app.services.geo_proximity import (
    Coordinate,
    GeoProximityFilter,
    PlaceholderLocator,
)
from app.services.property_filter import PropertyFilterEngine
from app.services.property_ranking import PropertyRanker

logger = logging.getLogger(__name__)


class PropertySearchService:
    """Combines the filter engine, ranking and geo filter over the store.

    Collaborators are injected; defaults are the in-process engines and
    the placeholder geocoder.
    """

    def __init__(
        self,
        property_repo: PropertyRepository,
        filter_engine: Optional[PropertyFilterEngine] = None,
        ranker: Optional[PropertyRanker] = None,
        geo_filter: Optional[GeoProximityFilter] = None,
    ) -> None:
        self._property_repo = property_repo
        self._filter_engine = filter_engine or PropertyFilterEngine()
        self._ranker = ranker or PropertyRanker()
        self._geo_filter = geo_filter or GeoProximityFilter(PlaceholderLocator())

    async def get(self, property_id: int) -> Optional[Property]:
        return await self._property_repo.get_by_id(property_id)

    async def create(self, **kwargs: Any) -> Property:
        prop = await self._property_repo.create(**kwargs)
        logger.info("Created property %d (%s)", prop.id, prop.title)
        return prop

    async def update(
        self, property_id: int, fields: Mapping[str, Any]
    ) -> Optional[Property]:
        return await self._property_repo.update(property_id, fields)

    async def search(
        self,
        criteria: Optional[PropertyFilter] = None,
        sort: Optional[Union[str, SortOption]] = None,
        status: Optional[PropertyStatus] = None,
    ) -> List[Property]:
        """Filter then rank.

        *status* is an exact-match narrowing applied in the store before
        the composite filter runs.
        """
        if status is not None:
            properties = await self._property_repo.list(status=status)
        else:
            properties = await self._property_repo.list()

        if criteria is not None:
            properties = self._filter_engine.apply(properties, criteria)
        return self._ranker.sort(properties, sort)

    async def nearby(
        self,
        lat: float,
        lon: float,
        radius_miles: Optional[float] = None,
        criteria: Optional[PropertyFilter] = None,
    ) -> List[NearbyProperty]:
        if radius_miles is None:
            radius_miles = settings.DEFAULT_SEARCH_RADIUS_MILES

        properties = await self._property_repo.list()
        if criteria is not None:
            properties = self._filter_engine.apply(properties, criteria)
        return self._geo_filter.within_radius(
            properties, Coordinate(lat, lon), radius_miles
        )

    async def similar(
        self,
        prop: Property,
        limit: Optional[int] = None,
        tolerance: Optional[float] = None,
    ) -> List[Property]:
        """Other properties with the same bed count and a nearby price."""
        if limit is None:
            limit = settings.SIMILAR_PROPERTIES_LIMIT
        if tolerance is None:
            tolerance = settings.SIMILAR_PRICE_TOLERANCE

        low = prop.price * (1 - tolerance)
        high = prop.price * (1 + tolerance)
        candidates = [
            p
            for p in await self._property_repo.list(beds=prop.beds)
            if p.id != prop.id and low <= p.price <= high
        ]
        return candidates[:limit]

    async def run_saved_criteria(
        self,
        search: SavedSearch,
        sort: Optional[Union[str, SortOption]] = None,
    ) -> List[Property]:
        """Re-run the criteria stored on a saved search or alert."""
        criteria = self._filter_engine.criteria_for(search)
        return await self.search(criteria, sort=sort)
