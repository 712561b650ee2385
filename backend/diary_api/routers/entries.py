"""
Entries router for diary entry management.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from diary_api.core.exceptions import NotFoundError, PermissionDeniedError
from diary_api.database.connections import get_database
from diary_api.database.databases import diary_db
from diary_api.dependencies.auth import AuthenticatedUser
from diary_api.schemas.entry import EntryCreate, EntryDeleted, EntryResponse, EntryUpdate
from diary_api.services.entry_service import EntryService

router = APIRouter(tags=["Entries"])


async def get_entry_service() -> EntryService:
    """Dependency to get EntryService instance."""
    return EntryService(await get_database(diary_db.DB_NAME))


@router.get(
    "/entries/",
    response_model=list[EntryResponse],
    summary="List entries",
)
async def list_entries(
    current_user: AuthenticatedUser,
    entry_service: EntryService = Depends(get_entry_service),
):
    """List all entries of the current user, ordered by ID."""
    return await entry_service.list_entries(current_user.uid)


@router.get(
    "/entries/{entry_id}",
    response_model=EntryResponse,
    summary="Get entry",
)
async def get_entry(
    entry_id: int,
    current_user: AuthenticatedUser,
    entry_service: EntryService = Depends(get_entry_service),
):
    """Get one entry of the current user."""
    try:
        return await entry_service.get_entry(entry_id, current_user.uid)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )


@router.get(
    "/entries_by_user/{user_id}",
    response_model=list[EntryResponse],
    summary="List entries of a user",
)
async def list_entries_by_user(
    user_id: int,
    current_user: AuthenticatedUser,
    entry_service: EntryService = Depends(get_entry_service),
):
    """
    List the entries of `user_id`.

    Only the authenticated user's own ID is accepted.
    """
    try:
        return await entry_service.list_entries_by_user(user_id, current_user.uid)
    except PermissionDeniedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.detail,
        )


@router.post(
    "/diary_entries/",
    response_model=EntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create entry",
)
async def create_entry(
    body: EntryCreate,
    current_user: AuthenticatedUser,
    entry_service: EntryService = Depends(get_entry_service),
):
    """
    Create a diary entry for the current user.

    - **title**: Entry title (required)
    - **content**: Entry text
    - **date**: Day the entry is about (`YYYY-MM-DD`)
    - **location**: Optional place
    """
    return await entry_service.create_entry(current_user.uid, body)


@router.put(
    "/update_entry/{entry_id}",
    response_model=EntryResponse,
    summary="Update entry",
)
async def update_entry(
    entry_id: int,
    body: EntryUpdate,
    current_user: AuthenticatedUser,
    entry_service: EntryService = Depends(get_entry_service),
):
    """Rewrite one of the current user's entries."""
    try:
        return await entry_service.update_entry(entry_id, current_user.uid, body)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )


@router.delete(
    "/delete_entry/{entry_id}",
    response_model=EntryDeleted,
    summary="Delete entry",
)
async def delete_entry(
    entry_id: int,
    current_user: AuthenticatedUser,
    entry_service: EntryService = Depends(get_entry_service),
):
    """
    Delete one of the current user's entries.

    **Warning**: This action cannot be undone.
    """
    try:
        return await entry_service.delete_entry(entry_id, current_user.uid)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )
