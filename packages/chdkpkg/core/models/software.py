"""Manifest models for a downloaded software package.

These records are produced by the manifest parsing layer and are read-only
inputs to validation. Fields the validators check are declared optional so an
incomplete manifest can still be represented and rejected with a precise
reason instead of failing at construction time.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from chdkpkg.core.models.common import HashInfo, SoftwareVersion
from chdkpkg.core.models.modules import ModuleSet


class ProductInfo(BaseModel):
    """Product identity; ``category`` selects the boot provider."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    category: str | None = None
    version: SoftwareVersion | None = None
    created: datetime | None = None
    language: str | None = None


class CameraInfo(BaseModel):
    """Target camera platform and firmware revision."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    platform: str | None = None
    revision: str | None = None


class BuildInfo(BaseModel):
    """Build provenance.

    ``name`` is empty for update builds and ``status`` is empty for final
    builds, but neither may be null.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    status: str | None = None
    changeset: str | None = None


class CompilerInfo(BaseModel):
    """Toolchain used for the build. Absent for downloaded builds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    version: SoftwareVersion | None = None


class SourceInfo(BaseModel):
    """Distribution source. Absent for manual builds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    channel: str | None = None
    url: str | None = None


class EncodingInfo(BaseModel):
    """Boot file encoding. Absent when the encoding was not detected.

    An empty ``name`` means the file is not encoded and no ``data`` is expected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    data: int | None = None


class PackageManifest(BaseModel):
    """Manifest of one software package.

    A non-null ``modules`` block marks the modules-bearing variant, whose
    module files are validated together with the boot file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: SoftwareVersion | None = None
    product: ProductInfo | None = None
    camera: CameraInfo | None = None
    build: BuildInfo | None = None
    compiler: CompilerInfo | None = None
    source: SourceInfo | None = None
    encoding: EncodingInfo | None = None
    hash: HashInfo | None = None
    modules: ModuleSet | None = None
