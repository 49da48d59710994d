from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PropertyStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    rented = "rented"


class ActivityType(str, Enum):
    favorite = "favorite"
    search = "search"
    view = "view"
    alert = "alert"


class SortOption(str, Enum):
    price_asc = "price-asc"
    price_desc = "price-desc"
    newest = "newest"
    oldest = "oldest"
    recommended = "recommended"


class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(ApiModel):
    """Generic success response base."""

    success: bool = True
