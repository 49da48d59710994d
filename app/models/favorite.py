from app.models.base import Record


class Favorite(Record):
    user_id: int
    property_id: int
