import logging
from typing import Any, List, Mapping, Optional, Union

from app.models.alert import Alert
from app.models.property import Property
from app.repositories.alert_repository import AlertRepository
from app.schemas.common import ActivityType, SortOption
from app.services.activity_feed import ActivityFeedService
from app.services.property_search_service import PropertySearchService

logger = logging.getLogger(__name__)


class AlertService:
    """Ownership-checked alerts.

    The only state an alert carries is its ``enabled`` flag, toggled by
    a plain partial update.  Dispatching notifications for enabled
    alerts happens elsewhere; ``matches`` is what such a dispatcher
    would call.
    """

    def __init__(
        self,
        alert_repo: AlertRepository,
        activity_feed: ActivityFeedService,
        search_service: PropertySearchService,
    ) -> None:
        self._repo = alert_repo
        self._activity_feed = activity_feed
        self._search_service = search_service

    async def list_for_user(self, user_id: int) -> List[Alert]:
        return await self._repo.list_for_user(user_id)

    async def get(self, alert_id: int, user_id: int) -> Optional[Alert]:
        return await self._repo.get_owned(alert_id, user_id)

    async def create(self, user_id: int, **kwargs: Any) -> Alert:
        alert = await self._repo.create(user_id=user_id, **kwargs)
        await self._activity_feed.record(
            user_id, ActivityType.alert, details={"name": alert.name}
        )
        return alert

    async def update(
        self, alert_id: int, user_id: int, fields: Mapping[str, Any]
    ) -> Optional[Alert]:
        alert = await self._repo.update_owned(alert_id, user_id, fields)
        if alert is not None and "enabled" in fields:
            logger.info(
                "Alert %d %s", alert_id, "enabled" if alert.enabled else "disabled"
            )
        return alert

    async def delete(self, alert_id: int, user_id: int) -> bool:
        return await self._repo.delete_owned(alert_id, user_id)

    async def matches(
        self,
        alert_id: int,
        user_id: int,
        sort: Optional[Union[str, SortOption]] = None,
    ) -> Optional[List[Property]]:
        """Properties the alert currently matches.

        Returns ``None`` if the alert is not found, and an empty list
        while the alert is disabled.
        """
        alert = await self._repo.get_owned(alert_id, user_id)
        if alert is None:
            return None
        if not alert.enabled:
            return []
        return await self._search_service.run_saved_criteria(alert, sort=sort)
