import logging
from typing import Iterable, List, Union

from app.core.constants import (
    FILTER_FLAG_IN_UNIT_LAUNDRY,
    FILTER_FLAG_PET_FRIENDLY,
    LAUNDRY_KEYWORDS,
)
from app.models.alert import Alert
from app.models.property import Property
from app.models.saved_search import SavedSearch
from app.schemas.search import PropertyFilter

logger = logging.getLogger(__name__)


class PropertyFilterEngine:
    """Evaluate a composite ``PropertyFilter`` over a property collection.

    Active sub-filters are ANDed together:
        - ``location_text``  case-insensitive substring of address, city,
          state or zip code (any one is enough)
        - ``min_beds`` / ``min_baths``  inclusive lower bounds
        - ``min_price`` / ``max_price``  inclusive price range
        - ``pet_friendly``  property must allow pets
        - ``require_laundry``  some amenity mentions laundry or a washer

    Output preserves the relative order of the input.
    """

    @staticmethod
    def matches_location(prop: Property, text: str) -> bool:
        needle = text.lower()
        return any(
            needle in field.lower()
            for field in (prop.address, prop.city, prop.state, prop.zip_code)
        )

    @staticmethod
    def has_laundry(prop: Property) -> bool:
        return any(
            keyword in amenity.lower()
            for amenity in prop.amenities
            for keyword in LAUNDRY_KEYWORDS
        )

    def matches(self, prop: Property, criteria: PropertyFilter) -> bool:
        if criteria.location_text and not self.matches_location(
            prop, criteria.location_text
        ):
            return False
        if criteria.min_beds is not None and prop.beds < criteria.min_beds:
            return False
        if criteria.min_baths is not None and prop.baths < criteria.min_baths:
            return False
        if criteria.min_price is not None and prop.price < criteria.min_price:
            return False
        if criteria.max_price is not None and prop.price > criteria.max_price:
            return False
        if criteria.pet_friendly and not prop.pet_friendly:
            return False
        if criteria.require_laundry and not self.has_laundry(prop):
            return False
        return True

    def apply(
        self, properties: Iterable[Property], criteria: PropertyFilter
    ) -> List[Property]:
        """Return the properties satisfying *criteria*, in input order."""
        properties = list(properties)
        result = [p for p in properties if self.matches(p, criteria)]
        logger.debug("Filter kept %d of %d properties", len(result), len(properties))
        return result

    @staticmethod
    def criteria_for(search: Union[SavedSearch, Alert]) -> PropertyFilter:
        """Translate stored saved-search/alert criteria into a filter.

        Unknown keys in ``filters`` are carried in the store but ignored
        here.
        """
        flags = search.filters or {}
        return PropertyFilter(
            location_text=search.location,
            min_beds=search.beds,
            min_baths=search.baths,
            min_price=search.min_price,
            max_price=search.max_price,
            pet_friendly=bool(flags.get(FILTER_FLAG_PET_FRIENDLY, False)),
            require_laundry=bool(flags.get(FILTER_FLAG_IN_UNIT_LAUNDRY, False)),
        )
