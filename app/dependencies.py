from typing import Optional

from fastapi import Depends, Header, Request

from app.core.exceptions import NotAuthenticatedError
from app.core.store import EntityStore


# ---------------------------------------------------------------------------
# Store and caller identity
# ---------------------------------------------------------------------------


def get_store(request: Request) -> EntityStore:
    """Return the store owned by the running application instance."""
    return request.app.state.store


async def get_current_user_id(
    x_user_id: Optional[int] = Header(None),
) -> int:
    """Resolve the authenticated user id.

    Authentication itself happens upstream; by the time a request
    reaches this app the gateway has put the user id in ``X-User-Id``.
    """
    if x_user_id is None:
        raise NotAuthenticatedError()
    return x_user_id


# ---------------------------------------------------------------------------
# Repository factory functions (one per repository, each gets the shared store)
# ---------------------------------------------------------------------------


async def get_user_repo(store: EntityStore = Depends(get_store)):
    from app.repositories.user_repository import UserRepository

    return UserRepository(store)


async def get_property_repo(store: EntityStore = Depends(get_store)):
    from app.repositories.property_repository import PropertyRepository

    return PropertyRepository(store)


async def get_favorite_repo(store: EntityStore = Depends(get_store)):
    from app.repositories.favorite_repository import FavoriteRepository

    return FavoriteRepository(store)


async def get_saved_search_repo(store: EntityStore = Depends(get_store)):
    from app.repositories.saved_search_repository import SavedSearchRepository

    return SavedSearchRepository(store)


async def get_alert_repo(store: EntityStore = Depends(get_store)):
    from app.repositories.alert_repository import AlertRepository

    return AlertRepository(store)


async def get_activity_repo(store: EntityStore = Depends(get_store)):
    from app.repositories.activity_repository import ActivityRepository

    return ActivityRepository(store)


# ---------------------------------------------------------------------------
# Service factory functions
# ---------------------------------------------------------------------------


async def get_activity_feed(activity_repo=Depends(get_activity_repo)):
    """Build an :class:`ActivityFeedService` with injected repository."""
    from app.services.activity_feed import ActivityFeedService

    return ActivityFeedService(activity_repo=activity_repo)


async def get_property_search_service(property_repo=Depends(get_property_repo)):
    """Build a :class:`PropertySearchService` with the default engines."""
    from app.services.property_search_service import PropertySearchService

    return PropertySearchService(property_repo=property_repo)


async def get_favorite_service(
    favorite_repo=Depends(get_favorite_repo),
    property_repo=Depends(get_property_repo),
    activity_feed=Depends(get_activity_feed),
):
    from app.services.favorite_service import FavoriteService

    return FavoriteService(
        favorite_repo=favorite_repo,
        property_repo=property_repo,
        activity_feed=activity_feed,
    )


async def get_saved_search_service(
    saved_search_repo=Depends(get_saved_search_repo),
    activity_feed=Depends(get_activity_feed),
    search_service=Depends(get_property_search_service),
):
    from app.services.saved_search_service import SavedSearchService

    return SavedSearchService(
        saved_search_repo=saved_search_repo,
        activity_feed=activity_feed,
        search_service=search_service,
    )


async def get_alert_service(
    alert_repo=Depends(get_alert_repo),
    activity_feed=Depends(get_activity_feed),
    search_service=Depends(get_property_search_service),
):
    from app.services.alert_service import AlertService

    return AlertService(
        alert_repo=alert_repo,
        activity_feed=activity_feed,
        search_service=search_service,
    )


async def get_dashboard_service(
    favorite_repo=Depends(get_favorite_repo),
    saved_search_repo=Depends(get_saved_search_repo),
    alert_repo=Depends(get_alert_repo),
    activity_feed=Depends(get_activity_feed),
):
    from app.services.dashboard_service import DashboardService

    return DashboardService(
        favorite_repo=favorite_repo,
        saved_search_repo=saved_search_repo,
        alert_repo=alert_repo,
        activity_feed=activity_feed,
    )
