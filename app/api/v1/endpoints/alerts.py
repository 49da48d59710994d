from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from app.api.deps import get_alert_service, get_current_user_id
from app.core.exceptions import AlertNotFoundError
from app.models.alert import Alert
from app.models.property import Property
from app.schemas.alert import AlertCreate, AlertUpdate
from app.services.alert_service import AlertService

router = APIRouter(prefix="/alerts", tags=["Alerts"])


@router.get("", response_model=List[Alert])
async def list_alerts(
    user_id: int = Depends(get_current_user_id),
    service: AlertService = Depends(get_alert_service),
) -> List[Alert]:
    return await service.list_for_user(user_id)


@router.post("", response_model=Alert, status_code=201)
async def create_alert(
    body: AlertCreate,
    user_id: int = Depends(get_current_user_id),
    service: AlertService = Depends(get_alert_service),
) -> Alert:
    return await service.create(user_id, **body.model_dump())


@router.get("/{alert_id}", response_model=Alert)
async def get_alert(
    alert_id: int,
    user_id: int = Depends(get_current_user_id),
    service: AlertService = Depends(get_alert_service),
) -> Alert:
    alert = await service.get(alert_id, user_id)
    if alert is None:
        raise AlertNotFoundError()
    return alert


@router.patch("/{alert_id}", response_model=Alert)
async def update_alert(
    alert_id: int,
    body: AlertUpdate,
    user_id: int = Depends(get_current_user_id),
    service: AlertService = Depends(get_alert_service),
) -> Alert:
    """Partially update an alert.

    ``filters`` is replaced as a whole: resend every flag to change one.
    """
    alert = await service.update(
        alert_id, user_id, body.model_dump(exclude_unset=True)
    )
    if alert is None:
        raise AlertNotFoundError()
    return alert


@router.get("/{alert_id}/matches", response_model=List[Property])
async def alert_matches(
    alert_id: int,
    sort: Optional[str] = Query(None),
    user_id: int = Depends(get_current_user_id),
    service: AlertService = Depends(get_alert_service),
) -> List[Property]:
    matches = await service.matches(alert_id, user_id, sort=sort)
    if matches is None:
        raise AlertNotFoundError()
    return matches


@router.delete("/{alert_id}", status_code=204)
async def delete_alert(
    alert_id: int,
    user_id: int = Depends(get_current_user_id),
    service: AlertService = Depends(get_alert_service),
) -> Response:
    if not await service.delete(alert_id, user_id):
        raise AlertNotFoundError()
    return Response(status_code=204)
