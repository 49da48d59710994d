from app.models.base import Record
from app.models.user import User
from app.models.property import Property
from app.models.favorite import Favorite
from app.models.saved_search import SavedSearch
from app.models.alert import Alert
from app.models.activity import Activity

__all__ = [
    "Record",
    "User",
    "Property",
    "Favorite",
    "SavedSearch",
    "Alert",
    "Activity",
]
