"""Pydantic schemas package.

Only the shared enums are re-exported here; request/response schemas
are imported from their own modules because several of them embed the
stored record models.
"""

from app.schemas.common import (
    PropertyStatus as PropertyStatus,
    ActivityType as ActivityType,
    SortOption as SortOption,
    ApiModel as ApiModel,
    SuccessResponse as SuccessResponse,
)
