from typing import Any, List, Optional

from app.models.saved_search import SavedSearch
from app.repositories.base import BaseRepository


class SavedSearchRepository(BaseRepository):
    """Encapsulates access to the ``saved_searches`` table.

    Names carry no uniqueness constraint; a user may keep several
    searches with the same name.
    """

    async def get_by_id(self, search_id: int) -> Optional[SavedSearch]:
        return self._store.saved_searches.get(search_id)

    def _owned(self, search_id: int, user_id: int) -> Optional[SavedSearch]:
        search = self._store.saved_searches.get(search_id)
        if search is None or search.user_id != user_id:
            return None
        return search

    async def get_owned(self, search_id: int, user_id: int) -> Optional[SavedSearch]:
        """Return the search only if *user_id* owns it.

        A missing record and someone else's record look the same.
        """
        return self._owned(search_id, user_id)

    async def list_for_user(self, user_id: int) -> List[SavedSearch]:
        return self._store.saved_searches.list(user_id=user_id)

    async def create(self, user_id: int, **kwargs: Any) -> SavedSearch:
        self._require_user(user_id)
        return self._store.saved_searches.create(user_id=user_id, **kwargs)

    async def delete_owned(self, search_id: int, user_id: int) -> bool:
        """Delete the search if *user_id* owns it; ``False`` otherwise."""
        searches = self._store.saved_searches
        with searches.lock:
            if self._owned(search_id, user_id) is None:
                return False
            return searches.delete(search_id)
