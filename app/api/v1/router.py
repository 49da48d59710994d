from fastapi import APIRouter

from app.api.v1.endpoints import (
    activities,
    alerts,
    dashboard,
    favorites,
    health,
    properties,
    saved_searches,
    users,
)

router = APIRouter(prefix="/api/v1")

router.include_router(health.router)
router.include_router(users.router)
router.include_router(properties.router)
router.include_router(favorites.router)
router.include_router(saved_searches.router)
router.include_router(alerts.router)
router.include_router(activities.router)
router.include_router(dashboard.router)
