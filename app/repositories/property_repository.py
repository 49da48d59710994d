from typing import Any, List, Mapping, Optional

from app.models.property import Property
from app.repositories.base import BaseRepository


class PropertyRepository(BaseRepository):
    """Encapsulates access to the ``properties`` table."""

    async def get_by_id(self, property_id: int) -> Optional[Property]:
        """Return a single property by id, or ``None``."""
        return self._store.properties.get(property_id)

    async def list(self, **criteria: Any) -> List[Property]:
        """Return all properties, optionally narrowed by exact field matches."""
        return self._store.properties.list(**criteria)

    async def create(self, **kwargs: Any) -> Property:
        return self._store.properties.create(**kwargs)

    async def update(
        self, property_id: int, fields: Mapping[str, Any]
    ) -> Optional[Property]:
        """Apply a shallow partial update; ``None`` if the id is unknown."""
        return self._store.properties.update_partial(property_id, fields)

    async def delete(self, property_id: int) -> bool:
        """Remove a property.

        Favorites and activities pointing at it are left in place; joins
        that later meet them apply the favorites join policy.
        """
        return self._store.properties.delete(property_id)

    async def exists(self, property_id: int) -> bool:
        return self._store.properties.get(property_id) is not None
