from app.models.saved_search import SavedSearch


class Alert(SavedSearch):
    """Saved-search criteria that can be switched on and off."""

    enabled: bool = True
