from app.core.exceptions import PropertyNotFoundError, UserNotFoundError
from app.core.store import EntityStore


class BaseRepository:
    """Thin base class that holds the entity store.

    Every concrete repository receives the same ``EntityStore`` at
    construction time so that repositories can check each other's
    tables (foreign keys) within a single operation.
    """

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def _require_user(self, user_id: int) -> None:
        """Foreign-key check: the referenced user must exist right now."""
        if self._store.users.get(user_id) is None:
            raise UserNotFoundError(f"User {user_id} not found")

    def _require_property(self, property_id: int) -> None:
        """Foreign-key check: the referenced property must exist right now."""
        if self._store.properties.get(property_id) is None:
            raise PropertyNotFoundError(f"Property {property_id} not found")
