"""
Domain errors raised by the service layer.

Routers translate these into HTTP responses. The ``detail`` of each error is
safe to return to clients.
"""


class DiaryError(Exception):
    """Base class for all diary API errors."""

    detail = "Request failed"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class DuplicateUsernameError(DiaryError):
    detail = "Username already exists"


class InvalidUserError(DiaryError):
    detail = "Invalid User"


class InvalidPasswordError(DiaryError):
    detail = "Invalid Password"


class MissingTokenError(DiaryError):
    detail = "Missing JWT token"


class InvalidTokenError(DiaryError):
    detail = "Invalid JWT token"


class NotFoundError(DiaryError):
    detail = "Not found"


class PermissionDeniedError(DiaryError):
    detail = "Not allowed to access another user's resources"


class StorageError(DiaryError):
    """Unexpected database failure. The detail never includes driver output."""

    detail = "Internal server error"
