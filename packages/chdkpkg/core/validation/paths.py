"""Case-insensitive resolution of manifest paths against a package tree.

Camera cards are FAT-formatted, so manifests may name ``DISKBOOT.BIN`` while
the extracted tree holds ``diskboot.bin``. Paths are resolved component by
component, preferring an exact match and falling back to a case-insensitive
directory scan.
"""

from __future__ import annotations

from pathlib import Path


class UnsafePathError(ValueError):
    """Declared path is absolute or escapes the package root."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Unsafe path {path!r}: {reason}")


def split_relative(relative: str) -> list[str]:
    """Split a manifest path into components.

    Accepts both ``/`` and ``\\`` separators; drops empty and ``.`` parts.

    Raises:
        UnsafePathError: If the path is absolute or contains ``..``
    """
    norm = relative.replace("\\", "/")
    if norm.startswith("/") or (len(norm) > 1 and norm[1] == ":"):
        raise UnsafePathError(relative, "absolute path")

    parts = [part for part in norm.split("/") if part and part != "."]
    if any(part == ".." for part in parts):
        raise UnsafePathError(relative, "path escapes package root")
    if not parts:
        raise UnsafePathError(relative, "empty path")
    return parts


def normalize_key(relative: str) -> str:
    """Canonical lookup key for a manifest path: ``/``-separated, lower-case."""
    return "/".join(split_relative(relative)).lower()


def _match_entry(directory: Path, name: str) -> Path | None:
    exact = directory / name
    if exact.exists():
        return exact

    folded = name.casefold()
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except (FileNotFoundError, NotADirectoryError):
        return None
    for entry in entries:
        if entry.name.casefold() == folded:
            return entry
    return None


def resolve_case_insensitive(base: Path, relative: str) -> Path | None:
    """Resolve ``relative`` under ``base`` ignoring case.

    Args:
        base: Package root directory
        relative: Manifest path

    Returns:
        Existing path, or None if any component is missing

    Raises:
        UnsafePathError: If the path is absolute or escapes base
    """
    current = base
    for part in split_relative(relative):
        match = _match_entry(current, part)
        if match is None:
            return None
        current = match
    return current


def list_files_with_extension(directory: Path, extension: str) -> list[Path]:
    """Files directly in ``directory`` whose name ends with ``extension`` (any case)."""
    suffix = extension.casefold()
    files = [
        entry
        for entry in directory.iterdir()
        if entry.is_file() and entry.name.casefold().endswith(suffix)
    ]
    return sorted(files, key=lambda p: p.name)
