"""
Database definitions and collection constants.
"""
from diary_api.database.databases import auth_db, diary_db, system_db

__all__ = ["auth_db", "diary_db", "system_db"]
