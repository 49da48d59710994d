"""Repository layer – all store access goes through here.

Repositories own the referential rules between entity types (foreign
key checks at creation, uniqueness, ownership) so that the service
layer only contains business logic.
"""

from app.repositories.user_repository import UserRepository
from app.repositories.property_repository import PropertyRepository
from app.repositories.favorite_repository import FavoriteRepository
from app.repositories.saved_search_repository import SavedSearchRepository
from app.repositories.alert_repository import AlertRepository
from app.repositories.activity_repository import ActivityRepository

__all__ = [
    "UserRepository",
    "PropertyRepository",
    "FavoriteRepository",
    "SavedSearchRepository",
    "AlertRepository",
    "ActivityRepository",
]
