"""
Authentication request/response schemas.
"""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def validate_password(value: str) -> str:
    """
    Validate a password that is about to be hashed.

    Length is measured in UTF-8 bytes, not characters. NUL characters are
    refused because bcrypt cannot hash them.
    """
    if "\x00" in value:
        raise ValueError("Password must not contain NUL characters")
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8")
    return value


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(..., min_length=1, max_length=64, description="Unique username")
    password: str = Field(..., min_length=1, description="User password (at most 72 bytes)")
    email: str = Field(..., max_length=255, description="Contact email (not validated)")

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return validate_password(value)


class RegisterResponse(BaseModel):
    """Registration response."""
    user_id: int = Field(..., description="Created user ID")
    username: str = Field(..., description="Registered username")
    message: str = Field(..., description="Success message")


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="User password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    jwt_token: str = Field(..., alias="jwtToken", description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")

    class Config:
        populate_by_name = True


class TokenPayload(BaseModel):
    """Decoded JWT token payload."""
    sub: str = Field(..., description="Subject (username at issuance)")
    uid: int = Field(..., description="User ID")
    exp: datetime = Field(..., description="Expiration time")
    iat: datetime = Field(..., description="Issued at time")

    @property
    def username(self) -> str:
        return self.sub
