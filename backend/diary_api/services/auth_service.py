"""
Authentication service for registration, login and profile updates.
"""
import logging

from fastapi.concurrency import run_in_threadpool

from diary_api.core.exceptions import (
    InvalidPasswordError,
    InvalidUserError,
    NotFoundError,
    PermissionDeniedError,
)
from diary_api.core.security import PasswordHasher, TokenCodec
from diary_api.models.user import User
from diary_api.schemas.auth import LoginResponse, RegisterRequest, RegisterResponse
from diary_api.schemas.user import ProfileUpdate, UserResponse
from diary_api.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, store: CredentialStore, hasher: PasswordHasher, codec: TokenCodec):
        """Initialize with the credential store and the hashing/signing primitives."""
        self.store = store
        self.hasher = hasher
        self.codec = codec

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        Args:
            request: Registration request with username, password and email

        Returns:
            RegisterResponse with created user ID

        Raises:
            DuplicateUsernameError: If the username is taken
        """
        # bcrypt is CPU bound, keep it off the event loop
        hashed_password = await run_in_threadpool(self.hasher.hash, request.password)

        user_id = await self.store.create_user(
            username=request.username,
            password_hash=hashed_password,
            email=request.email,
        )
        logger.info("Registered user %s (id=%s)", request.username, user_id)

        return RegisterResponse(
            user_id=user_id,
            username=request.username,
            message=f"Created new user with id {user_id}",
        )

    async def issue_token(self, username: str, password: str) -> LoginResponse:
        """
        Authenticate a user and return a signed JWT token.

        Raises:
            InvalidUserError: If no user has this username
            InvalidPasswordError: If the password does not match
        """
        user = await self.store.find_by_username(username)
        if user is None:
            logger.info("Login rejected: unknown user %s", username)
            raise InvalidUserError()

        matched = await run_in_threadpool(self.hasher.verify, password, user.hashed_password)
        if not matched:
            logger.info("Login rejected: wrong password for %s", username)
            raise InvalidPasswordError()

        access_token = self.codec.create_access_token(username=user.username, user_id=user.id)
        logger.info("Login: %s (id=%s)", user.username, user.id)

        return LoginResponse(
            jwt_token=access_token,
            token_type="bearer",
            expires_in=self.codec.expires_in_seconds,
        )

    async def update_profile(
        self, user_id: int, requester_id: int, request: ProfileUpdate
    ) -> UserResponse:
        """
        Rewrite the username, password and email of ``user_id`` on behalf of
        ``requester_id``.

        The new password is hashed like on registration.

        Raises:
            PermissionDeniedError: If the requester is not that user
            NotFoundError: If the user does not exist
            DuplicateUsernameError: If the new username is taken
        """
        if user_id != requester_id:
            logger.warning("User %s tried to update profile of user %s", requester_id, user_id)
            raise PermissionDeniedError()

        hashed_password = await run_in_threadpool(self.hasher.hash, request.password)

        user = await self.store.update_user(
            user_id=user_id,
            username=request.username,
            password_hash=hashed_password,
            email=request.email,
        )
        logger.info("Updated profile of user id=%s", user_id)

        return self._user_to_response(user)

    async def get_user(self, user_id: int) -> UserResponse:
        """Get the public view of a user."""
        user = await self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return self._user_to_response(user)

    @staticmethod
    def _user_to_response(user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
