"""
Request and response schemas for API endpoints.
"""
from diary_api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenPayload,
)
from diary_api.schemas.user import ProfileUpdate, UserResponse
from diary_api.schemas.entry import EntryCreate, EntryDeleted, EntryResponse, EntryUpdate

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "TokenPayload",
    # User
    "ProfileUpdate",
    "UserResponse",
    # Entry
    "EntryCreate",
    "EntryDeleted",
    "EntryResponse",
    "EntryUpdate",
]
