from typing import List, Optional

from app.core.exceptions import DuplicateFavoriteError
from app.models.favorite import Favorite
from app.repositories.base import BaseRepository


class FavoriteRepository(BaseRepository):
    """Encapsulates access to the ``favorites`` table.

    At most one favorite exists per (user, property) pair.  The
    duplicate check and the insert run under the table lock so two
    concurrent adds cannot both succeed.
    """

    def _find(self, user_id: int, property_id: int) -> Optional[Favorite]:
        return self._store.favorites.find_first(
            lambda f: f.user_id == user_id and f.property_id == property_id
        )

    async def add(self, user_id: int, property_id: int) -> Favorite:
        """Create the favorite for a (user, property) pair.

        Raises:
            UserNotFoundError: If the user does not exist.
            PropertyNotFoundError: If the property does not exist.
            DuplicateFavoriteError: If the pair is already favorited.
        """
        self._require_user(user_id)
        self._require_property(property_id)
        favorites = self._store.favorites
        with favorites.lock:
            if self._find(user_id, property_id) is not None:
                raise DuplicateFavoriteError(
                    f"Property {property_id} is already in favorites"
                )
            return favorites.create(user_id=user_id, property_id=property_id)

    async def remove(self, user_id: int, property_id: int) -> bool:
        """Delete the matching favorite; ``False`` if there was none."""
        favorites = self._store.favorites
        with favorites.lock:
            favorite = self._find(user_id, property_id)
            if favorite is None:
                return False
            return favorites.delete(favorite.id)

    async def exists(self, user_id: int, property_id: int) -> bool:
        return self._find(user_id, property_id) is not None

    async def list_for_user(self, user_id: int) -> List[Favorite]:
        """Return the user's favorites in the order they were added."""
        return self._store.favorites.list(user_id=user_id)

    async def count_for_user(self, user_id: int) -> int:
        return len(await self.list_for_user(user_id))
