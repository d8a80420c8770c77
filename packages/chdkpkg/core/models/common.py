"""Records shared by software and module manifests."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class SoftwareVersion(BaseModel):
    """Dotted ``major.minor[.revision]`` version.

    Accepts either a mapping or a dotted string on input:

        >>> SoftwareVersion.model_validate("1.2")
        SoftwareVersion(major=1, minor=2, revision=None)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int
    minor: int
    revision: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _parse_dotted(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        parts = data.strip().split(".")
        if len(parts) not in (2, 3):
            raise ValueError(f"Expected major.minor[.revision], got {data!r}")
        try:
            numbers = [int(part) for part in parts]
        except ValueError as e:
            raise ValueError(f"Non-numeric version component in {data!r}") from e
        return {
            "major": numbers[0],
            "minor": numbers[1],
            "revision": numbers[2] if len(numbers) == 3 else None,
        }

    def __str__(self) -> str:
        if self.revision is None:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.revision}"


class HashInfo(BaseModel):
    """Digest algorithm plus relative file path -> expected hex digest."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    values: dict[str, str] | None = None
