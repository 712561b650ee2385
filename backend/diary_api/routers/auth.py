"""
Authentication router for registration, login, and profile management.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from diary_api.core.exceptions import (
    DuplicateUsernameError,
    InvalidPasswordError,
    InvalidUserError,
    NotFoundError,
    PermissionDeniedError,
)
from diary_api.core.security import PasswordHasher, TokenCodec, get_password_hasher, get_token_codec
from diary_api.database.connections import get_database
from diary_api.database.databases import auth_db
from diary_api.dependencies.auth import AuthenticatedUser
from diary_api.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from diary_api.schemas.user import ProfileUpdate, UserResponse
from diary_api.services.auth_service import AuthService
from diary_api.services.credential_store import CredentialStore

router = APIRouter(tags=["Authentication"])


async def get_auth_service(
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    db = await get_database(auth_db.DB_NAME)
    return AuthService(CredentialStore(db), hasher, codec)


@router.post(
    "/users/",
    response_model=RegisterResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **username**: Must be unique
    - **password**: Stored only as a salted bcrypt hash
    - **email**: Contact address
    """
    try:
        return await auth_service.register_user(body)
    except DuplicateUsernameError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.detail,
        )


@router.post(
    "/login/",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    Send the token to protected endpoints as `Authorization: Bearer <jwtToken>`.
    """
    try:
        return await auth_service.issue_token(body.username, body.password)
    except (InvalidUserError, InvalidPasswordError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.detail,
        )


@router.get(
    "/users/me",
    response_model=UserResponse,
    summary="Get current user info",
)
async def get_current_user_info(
    current_user: AuthenticatedUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Get information about the currently authenticated user."""
    try:
        return await auth_service.get_user(current_user.uid)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )


@router.put(
    "/update_profile/{user_id}",
    response_model=UserResponse,
    summary="Update profile",
)
async def update_profile(
    user_id: int,
    body: ProfileUpdate,
    current_user: AuthenticatedUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Rewrite username, password and email of the authenticated user.

    Only the authenticated user's own ID is accepted. Tokens issued before a
    username change keep working until they expire.
    """
    try:
        return await auth_service.update_profile(user_id, current_user.uid, body)
    except PermissionDeniedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.detail,
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )
    except DuplicateUsernameError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.detail,
        )
