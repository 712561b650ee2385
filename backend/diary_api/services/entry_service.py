"""
Entry service for diary entry management.

Every operation is scoped to the authenticated user's ID.
"""
import logging
from datetime import date, datetime, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from diary_api.core.exceptions import NotFoundError, PermissionDeniedError, StorageError
from diary_api.database.databases import diary_db
from diary_api.database.sequences import next_sequence
from diary_api.models.entry import Entry
from diary_api.schemas.entry import EntryCreate, EntryDeleted, EntryResponse, EntryUpdate

logger = logging.getLogger(__name__)

ENTRY_LIST_LIMIT = 1000


class EntryService:
    """Service for diary entry operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with diary database."""
        self.db = db
        self.entries = db[diary_db.Collections.ENTRIES]
        self.counters = db[diary_db.Collections.COUNTERS]

    async def create_entry(self, user_id: int, request: EntryCreate) -> EntryResponse:
        """Create a new entry owned by ``user_id``."""
        try:
            entry_id = await next_sequence(self.counters, diary_db.ENTRY_ID_SEQUENCE)
            entry_doc = {
                "_id": entry_id,
                "user_id": user_id,
                "title": request.title,
                "content": request.content,
                "date": request.date.isoformat(),
                "location": request.location,
                "created_at": datetime.now(timezone.utc),
                "updated_at": None,
            }
            await self.entries.insert_one(entry_doc)
        except PyMongoError as e:
            logger.exception("Entry insert failed")
            raise StorageError() from e

        logger.info("Created entry %s for user %s", entry_id, user_id)
        return self._entry_to_response(entry_doc)

    async def list_entries(self, user_id: int) -> list[EntryResponse]:
        """List all entries of a user ordered by ID."""
        try:
            cursor = self.entries.find({"user_id": user_id}, sort=[("_id", 1)])
            entry_docs = await cursor.to_list(length=ENTRY_LIST_LIMIT)
        except PyMongoError as e:
            logger.exception("Entry listing failed")
            raise StorageError() from e

        return [self._entry_to_response(doc) for doc in entry_docs]

    async def list_entries_by_user(self, owner_id: int, requester_id: int) -> list[EntryResponse]:
        """
        List the entries of ``owner_id`` on behalf of ``requester_id``.

        Raises:
            PermissionDeniedError: If the requester is not the owner
        """
        if owner_id != requester_id:
            logger.warning("User %s tried to read entries of user %s", requester_id, owner_id)
            raise PermissionDeniedError()
        return await self.list_entries(owner_id)

    async def get_entry(self, entry_id: int, user_id: int) -> EntryResponse:
        """
        Get an entry by ID (must belong to user).

        Raises:
            NotFoundError: If the entry does not exist or belongs to someone else
        """
        try:
            entry_doc = await self.entries.find_one({"_id": entry_id, "user_id": user_id})
        except PyMongoError as e:
            logger.exception("Entry lookup failed")
            raise StorageError() from e

        if not entry_doc:
            raise NotFoundError("Entry not found")
        return self._entry_to_response(entry_doc)

    async def update_entry(self, entry_id: int, user_id: int, request: EntryUpdate) -> EntryResponse:
        """
        Rewrite an entry's title, content, date and location.

        Raises:
            NotFoundError: If the entry does not exist or belongs to someone else
        """
        try:
            entry_doc = await self.entries.find_one_and_update(
                {"_id": entry_id, "user_id": user_id},
                {"$set": {
                    "title": request.title,
                    "content": request.content,
                    "date": request.date.isoformat(),
                    "location": request.location,
                    "updated_at": datetime.now(timezone.utc),
                }},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.exception("Entry update failed")
            raise StorageError() from e

        if not entry_doc:
            raise NotFoundError("Entry not found")
        return self._entry_to_response(entry_doc)

    async def delete_entry(self, entry_id: int, user_id: int) -> EntryDeleted:
        """
        Delete an entry.

        Raises:
            NotFoundError: If the entry does not exist or belongs to someone else
        """
        try:
            result = await self.entries.delete_one({"_id": entry_id, "user_id": user_id})
        except PyMongoError as e:
            logger.exception("Entry delete failed")
            raise StorageError() from e

        if result.deleted_count == 0:
            raise NotFoundError("Entry not found")

        logger.info("Deleted entry %s of user %s", entry_id, user_id)
        return EntryDeleted(id=entry_id)

    @staticmethod
    def _entry_to_response(entry_doc: dict) -> EntryResponse:
        entry = Entry(**entry_doc)
        return EntryResponse(
            id=entry.id,
            user_id=entry.user_id,
            title=entry.title,
            content=entry.content,
            date=date.fromisoformat(entry.date),
            location=entry.location,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
