from typing import Any, Dict, Optional

from pydantic import Field, ValidationInfo, field_validator, model_validator
from typing_extensions import Self

from app.schemas.common import ApiModel
from app.schemas.saved_search import SearchCriteria, check_price_range


class AlertCreate(SearchCriteria):
    enabled: bool = True


class AlertUpdate(ApiModel):
    """Partial alert update.

    ``filters`` is replaced as a whole when sent; it is never merged
    with the stored map.  ``location`` and the numeric bounds may be
    cleared with ``null``; the other fields may not.
    """

    name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    min_price: Optional[int] = Field(None, ge=0)
    max_price: Optional[int] = Field(None, ge=0)
    beds: Optional[int] = Field(None, ge=0)
    baths: Optional[float] = Field(None, ge=0)
    filters: Optional[Dict[str, bool]] = None
    enabled: Optional[bool] = None

    @field_validator("name", "filters", "enabled")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @model_validator(mode="after")
    def validate_price_range(self) -> Self:
        check_price_range(self.min_price, self.max_price)
        return self
