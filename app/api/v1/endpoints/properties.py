from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError

from app.api.deps import get_property_search_service
from app.core.exceptions import PropertyNotFoundError
from app.models.property import Property
from app.schemas.common import PropertyStatus
from app.schemas.property import PropertyCreate, PropertyUpdate
from app.schemas.saved_search import check_price_range
from app.schemas.search import NearbyProperty, PropertyFilter
from app.services.property_search_service import PropertySearchService

router = APIRouter(prefix="/properties", tags=["Properties"])


async def get_property_filter(
    location: Optional[str] = Query(None, description="Address, city, state or zip"),
    min_beds: Optional[int] = Query(None, ge=0),
    min_baths: Optional[float] = Query(None, ge=0),
    min_price: Optional[int] = Query(None, ge=0),
    max_price: Optional[int] = Query(None, ge=0),
    pet_friendly: bool = Query(False),
    laundry: bool = Query(False, description="Require in-unit laundry/washer"),
) -> PropertyFilter:
    try:
        check_price_range(min_price, max_price)
    except ValueError as exc:
        raise RequestValidationError(
            [
                {
                    "type": "value_error",
                    "loc": ("query", "min_price"),
                    "msg": str(exc),
                    "input": min_price,
                }
            ]
        )
    return PropertyFilter(
        location_text=location,
        min_beds=min_beds,
        min_baths=min_baths,
        min_price=min_price,
        max_price=max_price,
        pet_friendly=pet_friendly,
        require_laundry=laundry,
    )


@router.get("", response_model=List[Property])
async def list_properties(
    criteria: PropertyFilter = Depends(get_property_filter),
    status: Optional[PropertyStatus] = Query(None),
    sort: Optional[str] = Query(
        None, description="price-asc, price-desc, newest, oldest or recommended"
    ),
    service: PropertySearchService = Depends(get_property_search_service),
) -> List[Property]:
    """Filter and rank properties. Without parameters every property is returned."""
    return await service.search(criteria, sort=sort, status=status)


@router.get("/nearby", response_model=List[NearbyProperty])
async def nearby_properties(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    radius: Optional[float] = Query(None, ge=0, description="Miles"),
    criteria: PropertyFilter = Depends(get_property_filter),
    service: PropertySearchService = Depends(get_property_search_service),
) -> List[NearbyProperty]:
    """Properties within *radius* miles of (lat, lon), nearest first."""
    return await service.nearby(lat, lon, radius_miles=radius, criteria=criteria)


@router.get("/{property_id}", response_model=Property)
async def get_property(
    property_id: int,
    service: PropertySearchService = Depends(get_property_search_service),
) -> Property:
    prop = await service.get(property_id)
    if prop is None:
        raise PropertyNotFoundError()
    return prop


@router.get("/{property_id}/similar", response_model=List[Property])
async def similar_properties(
    property_id: int,
    service: PropertySearchService = Depends(get_property_search_service),
) -> List[Property]:
    prop = await service.get(property_id)
    if prop is None:
        raise PropertyNotFoundError()
    return await service.similar(prop)


@router.post("", response_model=Property, status_code=201)
async def create_property(
    body: PropertyCreate,
    service: PropertySearchService = Depends(get_property_search_service),
) -> Property:
    return await service.create(**body.model_dump())


@router.patch("/{property_id}", response_model=Property)
async def update_property(
    property_id: int,
    body: PropertyUpdate,
    service: PropertySearchService = Depends(get_property_search_service),
) -> Property:
    """Apply only the fields present in the request body."""
    prop = await service.update(property_id, body.model_dump(exclude_unset=True))
    if prop is None:
        raise PropertyNotFoundError()
    return prop
