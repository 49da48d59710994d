"""Property request schemas (create, partial update)."""

from datetime import date
from typing import Any, List, Optional

from pydantic import Field, ValidationInfo, field_validator

from app.schemas.common import ApiModel, PropertyStatus


class PropertyCreate(ApiModel):
    title: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    beds: int = Field(..., ge=0)
    baths: float = Field(..., ge=0)
    sqft: int = Field(..., ge=0)
    description: str = ""
    images: List[str] = Field(default_factory=list)
    amenities: List[str] = Field(default_factory=list)
    pet_friendly: bool = False
    available_from: Optional[date] = None
    lease_length: Optional[int] = Field(None, gt=0)
    status: PropertyStatus = PropertyStatus.active


class PropertyUpdate(ApiModel):
    """Partial update: only fields the client actually sent are applied.

    ``available_from`` and ``lease_length`` may be cleared with ``null``.
    """

    title: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    state: Optional[str] = Field(None, min_length=1)
    zip_code: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, ge=0)
    beds: Optional[int] = Field(None, ge=0)
    baths: Optional[float] = Field(None, ge=0)
    sqft: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    images: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    pet_friendly: Optional[bool] = None
    available_from: Optional[date] = None
    lease_length: Optional[int] = Field(None, gt=0)
    status: Optional[PropertyStatus] = None

    @field_validator(
        "title",
        "address",
        "city",
        "state",
        "zip_code",
        "price",
        "beds",
        "baths",
        "sqft",
        "description",
        "images",
        "amenities",
        "pet_friendly",
        "status",
    )
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value
