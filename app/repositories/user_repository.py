from typing import Any, Optional

from app.core.exceptions import DuplicateUserError
from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    """Encapsulates access to the ``users`` table."""

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self._store.users.get(user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._store.users.find_first(lambda u: u.username == username)

    async def get_by_email(self, email: str) -> Optional[User]:
        return self._store.users.find_first(lambda u: u.email == email)

    async def create(self, **kwargs: Any) -> User:
        """Insert a new user, enforcing global username/email uniqueness.

        Raises:
            DuplicateUserError: If the username or email is already taken.
        """
        users = self._store.users
        username, email = kwargs["username"], kwargs["email"]
        with users.lock:
            if users.find_first(lambda u: u.username == username) is not None:
                raise DuplicateUserError(f"Username '{username}' is already registered")
            if users.find_first(lambda u: u.email == email) is not None:
                raise DuplicateUserError(f"Email '{email}' is already registered")
            return users.create(**kwargs)

    async def exists(self, user_id: int) -> bool:
        return self._store.users.get(user_id) is not None
