"""
Dependencies for dependency injection in routes.
"""
from diary_api.dependencies.auth import AuthenticatedUser, require_token

__all__ = [
    "AuthenticatedUser",
    "require_token",
]
