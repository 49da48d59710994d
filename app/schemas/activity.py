from typing import Any, Dict, Optional

from app.schemas.common import ActivityType, ApiModel


class ActivityCreate(ApiModel):
    """Payload for recording an activity; the owner comes from auth."""

    type: ActivityType
    property_id: Optional[int] = None
    details: Optional[Dict[str, Any]] = None
