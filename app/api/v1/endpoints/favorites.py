from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from app.api.deps import get_current_user_id, get_favorite_service
from app.core.exceptions import FavoriteNotFoundError
from app.models.favorite import Favorite
from app.models.property import Property
from app.schemas.favorite import FavoriteCreate, FavoriteStatus
from app.services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=List[Property])
async def list_favorites(
    sort: Optional[str] = Query(None),
    user_id: int = Depends(get_current_user_id),
    service: FavoriteService = Depends(get_favorite_service),
) -> List[Property]:
    """The caller's favorited properties, oldest favorite first unless sorted."""
    return await service.favorites_for_user(user_id, sort=sort)


@router.post("", response_model=Favorite, status_code=201)
async def add_favorite(
    body: FavoriteCreate,
    user_id: int = Depends(get_current_user_id),
    service: FavoriteService = Depends(get_favorite_service),
) -> Favorite:
    return await service.add(user_id, body.property_id)


@router.get("/{property_id}", response_model=FavoriteStatus)
async def favorite_status(
    property_id: int,
    user_id: int = Depends(get_current_user_id),
    service: FavoriteService = Depends(get_favorite_service),
) -> FavoriteStatus:
    return FavoriteStatus(
        property_id=property_id,
        is_favorite=await service.is_favorite(user_id, property_id),
    )


@router.delete("/{property_id}", status_code=204)
async def remove_favorite(
    property_id: int,
    user_id: int = Depends(get_current_user_id),
    service: FavoriteService = Depends(get_favorite_service),
) -> Response:
    if not await service.remove(user_id, property_id):
        raise FavoriteNotFoundError()
    return Response(status_code=204)
