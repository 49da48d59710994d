class RentalDirectoryError(Exception):
    """Base class for all rental directory domain exceptions.

    Every custom exception in this module inherits from here so that a
    single ``except RentalDirectoryError`` clause can catch any domain
    error.
    """

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(detail)


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------


class NotFoundError(RentalDirectoryError):
    """Raised when a record does not exist or is not owned by the caller.

    Ownership failures deliberately use the same signal so callers
    cannot probe for other users' records.
    """

    def __init__(self, detail: str = "Record not found"):
        super().__init__(detail)


class UserNotFoundError(NotFoundError):
    def __init__(self, detail: str = "User not found"):
        super().__init__(detail)


class PropertyNotFoundError(NotFoundError):
    def __init__(self, detail: str = "Property not found"):
        super().__init__(detail)


class FavoriteNotFoundError(NotFoundError):
    def __init__(self, detail: str = "Favorite not found"):
        super().__init__(detail)


class SavedSearchNotFoundError(NotFoundError):
    def __init__(self, detail: str = "Saved search not found"):
        super().__init__(detail)


class AlertNotFoundError(NotFoundError):
    def __init__(self, detail: str = "Alert not found"):
        super().__init__(detail)


# ---------------------------------------------------------------------------
# Uniqueness
# ---------------------------------------------------------------------------


class DuplicateError(RentalDirectoryError):
    """Raised when a create would violate a uniqueness invariant."""

    def __init__(self, detail: str = "Duplicate record"):
        super().__init__(detail)


class DuplicateFavoriteError(DuplicateError):
    """Raised when a (user, property) favorite already exists."""

    def __init__(self, detail: str = "Property already in favorites"):
        super().__init__(detail)


class DuplicateUserError(DuplicateError):
    """Raised when a username or email is already registered."""

    def __init__(self, detail: str = "Username or email already registered"):
        super().__init__(detail)


# ---------------------------------------------------------------------------
# Referential integrity
# ---------------------------------------------------------------------------


class IntegrityError(RentalDirectoryError):
    """Raised when the store itself is found to be inconsistent."""

    def __init__(self, detail: str = "Store integrity violation"):
        super().__init__(detail)


class ReferentialIntegrityError(IntegrityError):
    """Raised when a join meets a foreign key whose target was deleted."""

    def __init__(self, detail: str = "Dangling reference"):
        super().__init__(detail)


# ---------------------------------------------------------------------------
# Authentication boundary
# ---------------------------------------------------------------------------


class NotAuthenticatedError(RentalDirectoryError):
    """Raised when a per-user operation arrives without a resolved user id."""

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(detail)
