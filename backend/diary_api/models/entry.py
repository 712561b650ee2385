"""
Diary entry model for diary database.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Entry(BaseModel):
    """
    Entry document model for MongoDB diary_db.entries collection.

    ``date`` is stored as an ISO ``YYYY-MM-DD`` string since BSON has no
    plain date type.
    """
    id: int = Field(..., alias="_id", description="Numeric entry ID")
    user_id: int = Field(..., description="Owner user ID")
    title: str = Field(..., description="Entry title")
    content: str = Field(default="", description="Entry text")
    date: str = Field(..., description="ISO date of the entry")
    location: Optional[str] = Field(None, description="Where it happened")
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Entry creation timestamp"
    )
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    class Config:
        populate_by_name = True
