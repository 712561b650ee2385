"""
Security utilities for password hashing and JWT token management.
"""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from diary_api.config import get_settings
from diary_api.core.exceptions import InvalidTokenError
from diary_api.schemas.auth import MAX_PASSWORD_BYTES, TokenPayload


class PasswordHasher:
    """Salted one-way password hashing backed by bcrypt."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string (a fresh salt is used on every call)

        Raises:
            ValueError: If the password is longer than 72 bytes or contains NUL
        """
        return self._context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password.

        The comparison is constant-time. A malformed or unknown hash is
        treated as a mismatch. So is a password longer than bcrypt
        reads, which would otherwise match on its first 72 bytes.

        Returns:
            True if password matches, False otherwise
        """
        if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return False
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False


class TokenCodec:
    """
    Issues and verifies signed access tokens.

    The signing secret is handed in at construction and never read from
    module state.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes
        # Fail at startup rather than on the first login if the key/algorithm pair is unusable.
        self.decode_token(self.create_access_token("startup-check", 0))

    @property
    def expires_in_seconds(self) -> int:
        return self.expire_minutes * 60

    def create_access_token(
        self,
        username: str,
        user_id: int,
        expires_delta: timedelta | None = None,
    ) -> str:
        """
        Create a JWT access token.

        Args:
            username: Username the bearer authenticated as
            user_id: Numeric id of the same user
            expires_delta: Optional custom lifetime (defaults to the configured one)

        Returns:
            Encoded JWT token string
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expire_minutes)

        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "sub": username,
            "uid": user_id,
            "iat": now,
            "exp": now + expires_delta,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """
        Decode and validate a JWT token.

        Raises:
            InvalidTokenError: If the signature does not match, the token is
                malformed or expired, or required claims are missing
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_iat": True, "require_sub": True},
            )
            return TokenPayload(**claims)
        except (JWTError, ValidationError) as e:
            raise InvalidTokenError() from e


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher."""
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache
def get_token_codec() -> TokenCodec:
    """Get the process-wide token codec built from settings."""
    settings = get_settings()
    return TokenCodec(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_access_token_expire_minutes,
    )
