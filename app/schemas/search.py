"""Search-side schemas: the composite property filter and geo results."""

from typing import Optional

from pydantic import Field

from app.models.property import Property
from app.schemas.common import ApiModel


class PropertyFilter(ApiModel):
    """Composite property filter.

    Every field is optional.  Fields left as ``None`` (or ``False`` for
    the two flags) impose no constraint, so an empty filter matches
    every property.  The price bounds are independent inclusive checks:
    an inverted range is accepted here and simply matches nothing.
    """

    location_text: Optional[str] = None
    min_beds: Optional[int] = Field(None, ge=0)
    min_baths: Optional[float] = Field(None, ge=0)
    min_price: Optional[int] = Field(None, ge=0)
    max_price: Optional[int] = Field(None, ge=0)
    pet_friendly: bool = False
    require_laundry: bool = False


class NearbyProperty(ApiModel):
    """A property annotated with its distance (miles) from the search point."""

    property: Property
    distance: float = Field(..., ge=0)
