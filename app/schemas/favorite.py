from app.schemas.common import ApiModel


class FavoriteCreate(ApiModel):
    property_id: int


class FavoriteStatus(ApiModel):
    property_id: int
    is_favorite: bool
