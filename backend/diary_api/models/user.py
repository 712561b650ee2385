"""
User model for authentication database.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    User document model for MongoDB auth_db.users collection.
    """
    id: int = Field(..., alias="_id", description="Numeric user ID")
    username: str = Field(..., description="Unique username")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    email: str = Field(..., description="Contact email address")
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Account creation timestamp"
    )
    updated_at: Optional[datetime] = Field(
        None,
        description="Last profile update timestamp"
    )

    class Config:
        populate_by_name = True
