"""Test fixtures for package validation: on-disk trees and manifest data."""

from datetime import UTC, datetime
import hashlib
from pathlib import Path
from typing import Any

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)
CREATED = datetime(2023, 11, 5, 9, 30, tzinfo=UTC)

BOOT_BYTES = b"\x7fBOOT" + bytes(range(256)) * 8
MODULE_BYTES = {
    "A.FLT": b"FLT module a" * 64,
    "B.FLT": b"FLT module b" * 64,
}


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def write_package_tree(root: Path) -> Path:
    """Write DISKBOOT.BIN plus CHDK/MODULES/{A,B}.FLT under root.

    Returns:
        The modules directory
    """
    (root / "DISKBOOT.BIN").write_bytes(BOOT_BYTES)
    modules_dir = root / "CHDK" / "MODULES"
    modules_dir.mkdir(parents=True)
    for name, data in MODULE_BYTES.items():
        (modules_dir / name).write_bytes(data)
    return modules_dir


def manifest_data(**overrides: Any) -> dict[str, Any]:
    """Raw data for a well-formed manifest matching write_package_tree."""
    data: dict[str, Any] = {
        "version": "1.2",
        "product": {
            "name": "CHDK",
            "category": "PS",
            "version": "1.4.1",
            "created": CREATED,
            "language": "en",
        },
        "camera": {"platform": "a540", "revision": "100b"},
        "build": {"name": "", "status": "", "changeset": "5312"},
        "compiler": {"name": "gcc", "version": "4.3.6"},
        "source": {"name": "CHDK", "channel": "stable", "url": "https://mighty-hoernsche.de/"},
        "encoding": {"name": "", "data": None},
        "hash": {"name": "sha256", "values": {"DISKBOOT.BIN": sha256_hex(BOOT_BYTES)}},
    }
    data.update(overrides)
    return data


def module_data(file_name: str, content: bytes) -> dict[str, Any]:
    """Raw data for one module declaring a single file under chdk/modules."""
    return {
        "created": CREATED,
        "changeset": "3c9f2e1",
        "hash": {
            "name": "sha256",
            "values": {f"chdk/modules/{file_name.lower()}": sha256_hex(content)},
        },
    }


def module_set_data(**overrides: Any) -> dict[str, Any]:
    """Raw data for a well-formed module set matching write_package_tree."""
    data: dict[str, Any] = {
        "version": "1.0",
        "product_name": "CHDK",
        "modules": {
            name.split(".")[0].lower(): module_data(name, content)
            for name, content in MODULE_BYTES.items()
        },
    }
    data.update(overrides)
    return data


__all__ = [
    "BOOT_BYTES",
    "CREATED",
    "MODULE_BYTES",
    "NOW",
    "manifest_data",
    "module_data",
    "module_set_data",
    "sha256_hex",
    "write_package_tree",
]
