from typing import Dict, Optional

from pydantic import Field

from app.models.base import Record


class SavedSearch(Record):
    """A named, reusable set of property filter criteria."""

    user_id: int
    name: str
    location: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    beds: Optional[int] = None
    baths: Optional[float] = None
    filters: Dict[str, bool] = Field(default_factory=dict)
