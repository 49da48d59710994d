import logging
from typing import Iterable, List, Optional, Union

from app.core.constants import (
    DEFAULT_SORT_OPTION,
    RECOMMENDED_MIN_AMENITIES,
    RECOMMENDED_MIN_SQFT,
    SORT_OPTION_ALIASES,
)
from app.models.property import Property
from app.schemas.common import SortOption

logger = logging.getLogger(__name__)


def resolve_sort_option(value: Optional[Union[str, SortOption]]) -> SortOption:
    """Map a sort name (including legacy aliases) to a ``SortOption``.

    ``None`` and unknown names fall back to ``recommended``.
    """
    if value is None:
        return DEFAULT_SORT_OPTION
    if isinstance(value, SortOption):
        return value
    if value in SORT_OPTION_ALIASES:
        return SORT_OPTION_ALIASES[value]
    try:
        return SortOption(value)
    except ValueError:
        logger.debug("Unknown sort option %r; using %s", value, DEFAULT_SORT_OPTION.value)
        return DEFAULT_SORT_OPTION


class PropertyRanker:
    """Order properties by one of the ``SortOption`` strategies.

    Every ordering is a stable sort, so properties with equal keys keep
    their input order.
    """

    @staticmethod
    def recommended_score(prop: Property) -> int:
        """Heuristic 0–3 score: one point each for pets, amenities, size."""
        score = 0
        if prop.pet_friendly:
            score += 1
        if len(prop.amenities) > RECOMMENDED_MIN_AMENITIES:
            score += 1
        if prop.sqft > RECOMMENDED_MIN_SQFT:
            score += 1
        return score

    def sort(
        self,
        properties: Iterable[Property],
        option: Optional[Union[str, SortOption]] = None,
    ) -> List[Property]:
        option = resolve_sort_option(option)

        if option is SortOption.price_asc:
            return sorted(properties, key=lambda p: p.price)
        if option is SortOption.price_desc:
            return sorted(properties, key=lambda p: p.price, reverse=True)
        if option is SortOption.newest:
            return sorted(properties, key=lambda p: p.created_at, reverse=True)
        if option is SortOption.oldest:
            return sorted(properties, key=lambda p: p.created_at)
        return sorted(properties, key=self.recommended_score, reverse=True)
