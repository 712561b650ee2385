"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

SUPPORTED_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    db_timeout_ms: int = Field(default=5000, gt=0)

    # JWT Configuration (secret has no default, it must come from the environment)
    jwt_secret_key: str = Field(..., min_length=32)
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = Field(default=60, gt=0)

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        extra = "ignore"

    @field_validator("jwt_algorithm")
    @classmethod
    def check_algorithm(cls, value: str) -> str:
        value = value.upper()
        if value not in SUPPORTED_JWT_ALGORITHMS:
            raise ValueError(
                f"jwt_algorithm must be one of {', '.join(SUPPORTED_JWT_ALGORITHMS)}"
            )
        return value

    @field_validator("jwt_secret_key")
    @classmethod
    def check_secret(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("jwt_secret_key must not be blank")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
