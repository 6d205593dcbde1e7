"""Application configuration and settings helpers."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Centralized application configuration."""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)
    node_count: int = Field(default=5, description="Number of simulated nodes")
    update_interval: float = Field(default=5.0, description="Seconds between background updates")
    debug_mode: bool = Field(default=False)

    @field_validator("node_count", "update_interval")
    @classmethod
    def _ensure_positive(cls, value, info):
        if value <= 0:
            raise ValueError(f"{info.field_name} must be greater than zero")
        return value


@lru_cache()
def get_settings() -> Settings:
    """Load settings from environment variables."""

    import os
    from dotenv import load_dotenv

    load_dotenv()

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=os.getenv("PORT", "8080"),
        node_count=os.getenv("NODE_COUNT", "5"),
        update_interval=os.getenv("UPDATE_INTERVAL", "5"),
        debug_mode=os.getenv("DEBUG_MODE", "false").lower() == "true",
    )
