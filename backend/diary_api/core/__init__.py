"""
Core module - Security, request gate, and domain errors.
"""
from diary_api.core.exceptions import (
    DiaryError,
    DuplicateUsernameError,
    InvalidPasswordError,
    InvalidTokenError,
    InvalidUserError,
    MissingTokenError,
    NotFoundError,
    PermissionDeniedError,
    StorageError,
)
from diary_api.core.gate import GateResult, extract_bearer_token, verify_request
from diary_api.core.security import (
    PasswordHasher,
    TokenCodec,
    get_password_hasher,
    get_token_codec,
)

__all__ = [
    "DiaryError",
    "DuplicateUsernameError",
    "InvalidPasswordError",
    "InvalidTokenError",
    "InvalidUserError",
    "MissingTokenError",
    "NotFoundError",
    "PermissionDeniedError",
    "StorageError",
    "GateResult",
    "extract_bearer_token",
    "verify_request",
    "PasswordHasher",
    "TokenCodec",
    "get_password_hasher",
    "get_token_codec",
]
