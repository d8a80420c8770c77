"""Manifest records consumed by the validation engine."""

from chdkpkg.core.models.common import HashInfo, SoftwareVersion
from chdkpkg.core.models.modules import ModuleInfo, ModuleSet
from chdkpkg.core.models.software import (
    BuildInfo,
    CameraInfo,
    CompilerInfo,
    EncodingInfo,
    PackageManifest,
    ProductInfo,
    SourceInfo,
)

__all__ = [
    "BuildInfo",
    "CameraInfo",
    "CompilerInfo",
    "EncodingInfo",
    "HashInfo",
    "ModuleInfo",
    "ModuleSet",
    "PackageManifest",
    "ProductInfo",
    "SoftwareVersion",
    "SourceInfo",
]
