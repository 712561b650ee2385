"""
Credential store: user records keyed by a unique username.

Password material always arrives here already hashed.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from diary_api.core.exceptions import DuplicateUsernameError, NotFoundError, StorageError
from diary_api.database.databases import auth_db
from diary_api.database.sequences import next_sequence
from diary_api.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Storage operations on auth_db.users."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]
        self.counters = db[auth_db.Collections.COUNTERS]

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            username: Exact username to look up

        Returns:
            User model or None if not found
        """
        try:
            user_doc = await self.users_collection.find_one({"username": {"$eq": username}})
        except PyMongoError as e:
            logger.exception("User lookup by username failed")
            raise StorageError() from e

        if not user_doc:
            return None
        return User(**user_doc)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by numeric ID, or None if not found."""
        try:
            user_doc = await self.users_collection.find_one({"_id": user_id})
        except PyMongoError as e:
            logger.exception("User lookup by id failed")
            raise StorageError() from e

        if not user_doc:
            return None
        return User(**user_doc)

    async def create_user(self, username: str, password_hash: str, email: str) -> int:
        """
        Insert a new user.

        Uniqueness is enforced by the unique index on ``username``: the insert
        either succeeds or fails as a whole, so two concurrent registrations
        for one name cannot both pass.

        Returns:
            The new user's ID

        Raises:
            DuplicateUsernameError: If the username is already taken
            StorageError: On any other database failure
        """
        try:
            user_id = await next_sequence(self.counters, auth_db.USER_ID_SEQUENCE)
            await self.users_collection.insert_one({
                "_id": user_id,
                "username": username,
                "hashed_password": password_hash,
                "email": email,
                "created_at": datetime.now(timezone.utc),
                "updated_at": None,
            })
        except DuplicateKeyError as e:
            raise DuplicateUsernameError() from e
        except PyMongoError as e:
            logger.exception("User insert failed")
            raise StorageError() from e

        return user_id

    async def update_user(
        self,
        user_id: int,
        username: str,
        password_hash: str,
        email: str,
    ) -> User:
        """
        Rewrite username, password hash and email of an existing user.

        Raises:
            NotFoundError: If no user has this ID
            DuplicateUsernameError: If the new username belongs to someone else
            StorageError: On any other database failure
        """
        try:
            user_doc = await self.users_collection.find_one_and_update(
                {"_id": user_id},
                {"$set": {
                    "username": username,
                    "hashed_password": password_hash,
                    "email": email,
                    "updated_at": datetime.now(timezone.utc),
                }},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateUsernameError() from e
        except PyMongoError as e:
            logger.exception("User update failed")
            raise StorageError() from e

        if not user_doc:
            raise NotFoundError("User not found")
        return User(**user_doc)
