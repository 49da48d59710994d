from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from app.api.deps import get_current_user_id, get_saved_search_service
from app.core.exceptions import SavedSearchNotFoundError
from app.models.property import Property
from app.models.saved_search import SavedSearch
from app.schemas.saved_search import SavedSearchCreate
from app.services.saved_search_service import SavedSearchService

router = APIRouter(prefix="/saved-searches", tags=["Saved searches"])


@router.get("", response_model=List[SavedSearch])
async def list_saved_searches(
    user_id: int = Depends(get_current_user_id),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> List[SavedSearch]:
    return await service.list_for_user(user_id)


@router.post("", response_model=SavedSearch, status_code=201)
async def create_saved_search(
    body: SavedSearchCreate,
    user_id: int = Depends(get_current_user_id),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> SavedSearch:
    return await service.create(user_id, **body.model_dump())


@router.get("/{search_id}", response_model=SavedSearch)
async def get_saved_search(
    search_id: int,
    user_id: int = Depends(get_current_user_id),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> SavedSearch:
    search = await service.get(search_id, user_id)
    if search is None:
        raise SavedSearchNotFoundError()
    return search


@router.get("/{search_id}/results", response_model=List[Property])
async def run_saved_search(
    search_id: int,
    sort: Optional[str] = Query(None),
    user_id: int = Depends(get_current_user_id),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> List[Property]:
    results = await service.results(search_id, user_id, sort=sort)
    if results is None:
        raise SavedSearchNotFoundError()
    return results


@router.delete("/{search_id}", status_code=204)
async def delete_saved_search(
    search_id: int,
    user_id: int = Depends(get_current_user_id),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> Response:
    if not await service.delete(search_id, user_id):
        raise SavedSearchNotFoundError()
    return Response(status_code=204)
