"""georegion configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Buffering
    BUFFER_SEGMENTS: int = Field(default=32, ge=8)  # vertices per buffered circle

    # Numeric policy
    GEOMETRY_TOLERANCE_M: float = Field(default=1e-6, gt=0.0)
    ROUNDTRIP_TOLERANCE_DEG: float = Field(default=1e-6, gt=0.0)
    CHECK_ROUNDTRIP: bool = False  # inverse-check every forward projection

    # Serialization
    COORDINATE_PRECISION: int = Field(default=6, ge=0, le=15)


# Singleton instance for import convenience
settings = Settings()
