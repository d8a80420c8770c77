"""Shared pytest fixtures for chdkpkg tests."""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from chdkpkg.core.config import ValidationSettings
from chdkpkg.core.models import ModuleSet, PackageManifest
from chdkpkg.core.providers import BootProvider, ModulesProvider, ProviderConfig
from tests.fixtures.packages import NOW, manifest_data, module_set_data, write_package_tree


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock pinned to NOW so creation-time checks are deterministic."""
    return lambda: NOW


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """Materialized package: boot file plus two modules under CHDK/MODULES."""
    write_package_tree(tmp_path)
    return tmp_path


@pytest.fixture
def settings() -> ValidationSettings:
    """Settings with the CHDK providers plus category 'A'."""
    return ValidationSettings(
        providers=ProviderConfig(
            boot={
                "PS": BootProvider(file_name="DISKBOOT.BIN"),
                "A": BootProvider(file_name="DISKBOOT.BIN"),
            },
            modules={
                "CHDK": ModulesProvider(path="CHDK/MODULES", extension=".FLT"),
            },
        )
    )


@pytest.fixture
def make_manifest() -> Callable[..., PackageManifest]:
    """Factory for manifests; keyword overrides replace top-level sections."""

    def _make(**overrides: Any) -> PackageManifest:
        return PackageManifest.model_validate(manifest_data(**overrides))

    return _make


@pytest.fixture
def make_module_set() -> Callable[..., ModuleSet]:
    """Factory for module sets; keyword overrides replace top-level fields."""

    def _make(**overrides: Any) -> ModuleSet:
        return ModuleSet.model_validate(module_set_data(**overrides))

    return _make
