from typing import Dict, FrozenSet, Tuple

from app.schemas.common import ActivityType, PropertyStatus, SortOption

PROPERTY_STATUSES: FrozenSet[str] = frozenset(s.value for s in PropertyStatus)
ACTIVITY_TYPES: FrozenSet[str] = frozenset(a.value for a in ActivityType)

DEFAULT_SORT_OPTION: SortOption = SortOption.recommended

# Names used by older clients for the same orderings
SORT_OPTION_ALIASES: Dict[str, SortOption] = {
    "price-low-high": SortOption.price_asc,
    "price-high-low": SortOption.price_desc,
    "date-newest": SortOption.newest,
    "date-oldest": SortOption.oldest,
}

# Recommended-score thresholds (one point each)
RECOMMENDED_MIN_AMENITIES: int = 3
RECOMMENDED_MIN_SQFT: int = 900

# Amenity substrings that satisfy the laundry filter
LAUNDRY_KEYWORDS: Tuple[str, ...] = ("laundry", "washer")

# Keys of SavedSearch / Alert ``filters`` understood by the filter engine
FILTER_FLAG_PET_FRIENDLY: str = "petFriendly"
FILTER_FLAG_IN_UNIT_LAUNDRY: str = "inUnitLaundry"

EARTH_RADIUS_MILES: float = 3958.8

# Placeholder geocoding: base point plus an id-derived offset
PLACEHOLDER_BASE_LAT: float = 37.7749
PLACEHOLDER_BASE_LON: float = -122.4194
PLACEHOLDER_LAT_STEP: float = 0.01
PLACEHOLDER_LAT_SPAN: float = 0.2
PLACEHOLDER_LON_STEP: float = 0.015
PLACEHOLDER_LON_SPAN: float = 0.3

FAVORITES_JOIN_POLICIES: FrozenSet[str] = frozenset({"strict", "lenient"})
