"""API-layer dependency functions.

Re-exports all dependency factories from ``app.dependencies`` so that
endpoint modules only need to import from ``app.api.deps``.
"""

from app.dependencies import (
    # Store and identity
    get_store,
    get_current_user_id,
    # Repository factories
    get_user_repo,
    get_property_repo,
    get_favorite_repo,
    get_saved_search_repo,
    get_alert_repo,
    get_activity_repo,
    # Service factories
    get_activity_feed,
    get_property_search_service,
    get_favorite_service,
    get_saved_search_service,
    get_alert_service,
    get_dashboard_service,
)

__all__ = [
    "get_store",
    "get_current_user_id",
    "get_user_repo",
    "get_property_repo",
    "get_favorite_repo",
    "get_saved_search_repo",
    "get_alert_repo",
    "get_activity_repo",
    "get_activity_feed",
    "get_property_search_service",
    "get_favorite_service",
    "get_saved_search_service",
    "get_alert_service",
    "get_dashboard_service",
]
