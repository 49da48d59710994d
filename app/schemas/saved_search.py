from typing import Dict, Optional

from pydantic import Field, model_validator
from typing_extensions import Self

from app.schemas.common import ApiModel


def check_price_range(min_price: Optional[int], max_price: Optional[int]) -> None:
    if min_price is not None and max_price is not None and min_price > max_price:
        raise ValueError(
            f"min_price ({min_price}) must not exceed max_price ({max_price})"
        )


class SearchCriteria(ApiModel):
    """Criteria shared by saved searches and alerts."""

    name: str = Field(..., min_length=1)
    location: Optional[str] = None
    min_price: Optional[int] = Field(None, ge=0)
    max_price: Optional[int] = Field(None, ge=0)
    beds: Optional[int] = Field(None, ge=0)
    baths: Optional[float] = Field(None, ge=0)
    filters: Dict[str, bool] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_price_range(self) -> Self:
        check_price_range(self.min_price, self.max_price)
        return self


class SavedSearchCreate(SearchCriteria):
    pass
