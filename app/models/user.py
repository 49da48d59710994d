from typing import Optional

from app.models.base import Record


class User(Record):
    username: str
    email: str
    # Opaque credential owned by the auth collaborator; stored as given.
    password: str
    name: str
    phone: Optional[str] = None
