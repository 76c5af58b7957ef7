"""Search configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    """Search engine settings loaded from environment variables.

    Every field can be overridden with an ``OFKT_`` prefixed variable,
    e.g. ``OFKT_MAX_RESULTS=50``.
    """

    model_config = SettingsConfigDict(
        env_prefix="OFKT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Search
    cache_size: int = Field(default=100, ge=0, description="Cached queries kept before a full clear")
    max_results: int = Field(default=100, ge=0, description="Maximum results returned per query")

    # Logging
    debug: bool = False
    log_level: str = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Strip quotes and upper-case the level name."""
        if isinstance(v, str):
            v = v.strip().strip('"').strip("'").upper()
            if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
                raise ValueError(f"Unknown log level: {v}")
        return v

    @field_validator("debug", mode="before")
    @classmethod
    def normalize_debug(cls, v) -> bool:
        """Normalize debug value, handling quoted strings."""
        if isinstance(v, str):
            v = v.strip().strip('"').strip("'").lower()
            return v in ("true", "1", "yes", "on")
        return bool(v)

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> SearchSettings:
    """Get cached settings instance."""
    return SearchSettings()
