"""Manifest models for add-on module sets."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from chdkpkg.core.models.common import HashInfo, SoftwareVersion


class ModuleInfo(BaseModel):
    """Metadata and digests for a single module.

    Each module carries its own hash block; the set validator pools them all
    for the orphan-file check.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    created: datetime | None = None
    changeset: str | None = None
    hash: HashInfo | None = None


class ModuleSet(BaseModel):
    """Modules shipped for one product, keyed by module name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: SoftwareVersion | None = None
    product_name: str | None = None
    modules: dict[str, ModuleInfo | None] | None = None

    def declared_file_count(self) -> int:
        """Count the digest entries across all modules that declare any."""
        if not self.modules:
            return 0
        return sum(
            len(module.hash.values)
            for module in self.modules.values()
            if module is not None and module.hash is not None and module.hash.values
        )
