"""
User request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from diary_api.schemas.auth import validate_password


class UserResponse(BaseModel):
    """User information response (excludes the password hash)."""
    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User email")
    created_at: datetime = Field(..., description="Account creation date")
    updated_at: Optional[datetime] = Field(None, description="Last profile update")


class ProfileUpdate(BaseModel):
    """Profile update request. All three fields are rewritten."""
    username: str = Field(..., min_length=1, max_length=64, description="New username")
    password: str = Field(..., min_length=1, description="New password (at most 72 bytes)")
    email: str = Field(..., max_length=255, description="New email")

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return validate_password(value)
