"""
Database connection management for MongoDB.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from typing import Optional

from diary_api.config import get_settings

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """
    Get or create MongoDB client.

    Every timeout is bounded by ``db_timeout_ms`` so a hung server cannot
    stall a request indefinitely.
    """
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.db_timeout_ms,
            connectTimeoutMS=settings.db_timeout_ms,
            socketTimeoutMS=settings.db_timeout_ms,
        )
    return _mongo_client


async def close_connections():
    """Close the MongoDB connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


async def get_database(db_name: str) -> AsyncIOMotorDatabase:
    """Get a specific MongoDB database by name."""
    client = await get_mongo_client()
    return client[db_name]
