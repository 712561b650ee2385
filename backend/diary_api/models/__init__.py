"""
Pydantic models for database documents.
"""
from diary_api.models.user import User
from diary_api.models.entry import Entry

__all__ = [
    "User",
    "Entry",
]
