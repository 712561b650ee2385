"""
Database module - MongoDB connection and database definitions.
"""
from diary_api.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from diary_api.database.databases import auth_db, diary_db, system_db
from diary_api.database.sequences import next_sequence

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "next_sequence",
    "auth_db",
    "diary_db",
    "system_db",
]
