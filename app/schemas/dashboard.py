from typing import List

from app.models.activity import Activity
from app.schemas.common import ApiModel


class DashboardSummary(ApiModel):
    """Counts and recent feed shown on a user's home page."""

    favorites_count: int
    saved_searches_count: int
    enabled_alerts_count: int
    recent_activities: List[Activity]
