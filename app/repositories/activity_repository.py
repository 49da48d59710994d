from typing import Any, Dict, List, Optional

from app.models.activity import Activity
from app.repositories.base import BaseRepository
from app.schemas.common import ActivityType


class ActivityRepository(BaseRepository):
    """Encapsulates access to the append-only ``activities`` table.

    There is deliberately no update or delete here.
    """

    async def create(
        self,
        user_id: int,
        type: ActivityType,
        property_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> Activity:
        """Append a new activity for an existing user (and property, if given)."""
        self._require_user(user_id)
        if property_id is not None:
            self._require_property(property_id)
        return self._store.activities.create(
            user_id=user_id,
            type=type,
            property_id=property_id,
            details=details,
        )

    async def list_for_user(self, user_id: int) -> List[Activity]:
        """Return the user's activities in insertion order."""
        return self._store.activities.list(user_id=user_id)
