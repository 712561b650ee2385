"""
Database registry management.
Ensures all databases and collections are registered on startup.
"""
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorClient

from diary_api.database.databases import auth_db, diary_db, system_db

# All database manifests
ALL_DB_MANIFESTS = [
    auth_db.DB_MANIFEST,
    diary_db.DB_MANIFEST,
    system_db.DB_MANIFEST,
]

# Database name -> index definitions per collection
ALL_DB_INDEXES = {
    auth_db.DB_NAME: auth_db.Collections.INDEXES,
    diary_db.DB_NAME: diary_db.Collections.INDEXES,
}


async def sync_registry(client: AsyncIOMotorClient) -> None:
    """
    Synchronize the database registry on application startup.
    Ensures all databases are registered in system_db.db_registry.
    """
    sys_db = client[system_db.DB_NAME]
    registry_collection = sys_db[system_db.Collections.DB_REGISTRY]
    now = datetime.now(timezone.utc)

    for manifest in ALL_DB_MANIFESTS:
        db_name = manifest["db_name"]

        await registry_collection.update_one(
            {"_id": db_name},
            {
                "$set": {
                    "purpose": manifest["purpose"],
                    "collections": manifest["collections"],
                    "access_level": manifest["access_level"],
                    "schema_version": system_db.REGISTRY_SCHEMA_VERSION,
                    "updated_at": now,
                },
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )

        metadata_collection = client[db_name][system_db.Collections.METADATA]
        await metadata_collection.update_one(
            {"_id": system_db.METADATA_DOC_ID},
            {
                "$set": {"db_name": db_name, "last_updated_at": now},
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create the indexes declared by each database module."""
    for db_name, collections in ALL_DB_INDEXES.items():
        db = client[db_name]
        for collection_name, indexes in collections.items():
            for index in indexes:
                await db[collection_name].create_index(
                    index["keys"],
                    unique=index.get("unique", False),
                )
