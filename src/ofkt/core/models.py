"""Alias record model."""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FileAlias(BaseModel):
    """A user-named shortcut pointing to a filesystem path."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique identifier")
    name: str = Field(..., description="Display name the user searches by")
    path: str = Field(..., description="Target file or directory, kept as given")
    tags: list[str] = Field(default_factory=list, description="Free-text labels")
    color: str | None = Field(None, description="Display color")
    created_at: datetime = Field(default_factory=_utc_now, description="Creation time")
    last_accessed: datetime = Field(default_factory=_utc_now, description="Last time the alias was opened")
    is_favorite: bool = Field(False, description="Pinned by the user")

    @field_validator("created_at", "last_accessed")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def path_text(self) -> str:
        """The path as matchable text."""
        return self.path
