from datetime import date
from typing import Optional, Tuple

from app.models.base import Record
from app.schemas.common import PropertyStatus


class Property(Record):
    title: str
    address: str
    city: str
    state: str
    zip_code: str
    price: int
    beds: int
    baths: float
    sqft: int
    description: str
    images: Tuple[str, ...] = ()
    amenities: Tuple[str, ...] = ()
    pet_friendly: bool = False
    available_from: Optional[date] = None
    lease_length: Optional[int] = None
    status: PropertyStatus = PropertyStatus.active
