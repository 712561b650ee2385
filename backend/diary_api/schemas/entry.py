"""
Diary entry request/response schemas.
"""
from datetime import date as Date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class EntryCreate(BaseModel):
    """Create entry request. The owner is taken from the token, never the body."""
    title: str = Field(..., min_length=1, max_length=200, description="Entry title")
    content: str = Field(default="", description="Entry text")
    date: Date = Field(..., description="Day the entry is about")
    location: Optional[str] = Field(None, max_length=200, description="Where it happened")


class EntryUpdate(BaseModel):
    """Update entry request."""
    title: str = Field(..., min_length=1, max_length=200, description="Entry title")
    content: str = Field(default="", description="Entry text")
    date: Date = Field(..., description="Day the entry is about")
    location: Optional[str] = Field(None, max_length=200, description="Where it happened")


class EntryResponse(BaseModel):
    """Entry response."""
    id: int = Field(..., description="Entry ID")
    user_id: int = Field(..., description="Owner user ID")
    title: str = Field(..., description="Entry title")
    content: str = Field(..., description="Entry text")
    date: Date = Field(..., description="Day the entry is about")
    location: Optional[str] = Field(None, description="Where it happened")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class EntryDeleted(BaseModel):
    """Delete entry response."""
    id: int = Field(..., description="Deleted entry ID")
    message: str = Field(default="Entry deleted successfully", description="Result message")
