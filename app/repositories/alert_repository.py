from typing import Any, List, Mapping, Optional

from app.models.alert import Alert
from app.repositories.base import BaseRepository


class AlertRepository(BaseRepository):
    """Encapsulates access to the ``alerts`` table."""

    async def get_by_id(self, alert_id: int) -> Optional[Alert]:
        return self._store.alerts.get(alert_id)

    def _owned(self, alert_id: int, user_id: int) -> Optional[Alert]:
        alert = self._store.alerts.get(alert_id)
        if alert is None or alert.user_id != user_id:
            return None
        return alert

    async def get_owned(self, alert_id: int, user_id: int) -> Optional[Alert]:
        """Return the alert only if *user_id* owns it, else ``None``."""
        return self._owned(alert_id, user_id)

    async def list_for_user(self, user_id: int) -> List[Alert]:
        return self._store.alerts.list(user_id=user_id)

    async def count_enabled_for_user(self, user_id: int) -> int:
        return len(self._store.alerts.list(user_id=user_id, enabled=True))

    async def create(self, user_id: int, **kwargs: Any) -> Alert:
        self._require_user(user_id)
        return self._store.alerts.create(user_id=user_id, **kwargs)

    async def update_owned(
        self, alert_id: int, user_id: int, fields: Mapping[str, Any]
    ) -> Optional[Alert]:
        """Partially update an alert the caller owns.

        The merge is shallow (see ``EntityTable.update_partial``): to flip
        one flag inside ``filters`` the caller resends the whole map.
        ``user_id`` cannot be reassigned through this path.
        """
        changes = {k: v for k, v in fields.items() if k != "user_id"}
        alerts = self._store.alerts
        with alerts.lock:
            if self._owned(alert_id, user_id) is None:
                return None
            return alerts.update_partial(alert_id, changes)

    async def delete_owned(self, alert_id: int, user_id: int) -> bool:
        alerts = self._store.alerts
        with alerts.lock:
            if self._owned(alert_id, user_id) is None:
                return False
            return alerts.delete(alert_id)
