from typing import Any, Dict, Optional

from app.models.base import Record
from app.schemas.common import ActivityType


class Activity(Record):
    user_id: int
    type: ActivityType
    property_id: Optional[int] = None
    details: Optional[Dict[str, Any]] = None
