"""Configuration models for chdkpkg."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chdkpkg.core.hashing import DEFAULT_CHUNK_SIZE
from chdkpkg.core.providers.models import ProviderConfig


class ValidationSettings(BaseModel):
    """Settings shared by all validators in one validator graph."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        gt=0,
        le=64 * 1024 * 1024,
        description="Read size in bytes when streaming files through the digest",
    )

    earliest_created: datetime = Field(
        default=datetime(2000, 1, 1, tzinfo=UTC),
        description="Oldest accepted creation timestamp",
    )

    providers: ProviderConfig = Field(
        default_factory=ProviderConfig,
        description="Boot and modules provider lookup tables",
    )

    @field_validator("earliest_created")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
