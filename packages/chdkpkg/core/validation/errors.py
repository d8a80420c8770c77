"""Validation failure values.

A failure is a frozen ValidationError value, not a raised exception. Each
checkpoint returns ``ValidationError | None`` and callers stop at the first
non-None value. ValidationFailed wraps an error for callers that prefer to
raise.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Kind of validation failure."""

    MISSING_FIELD = "missing_field"
    INVALID_FIELD = "invalid_field"
    UNKNOWN_PROVIDER = "unknown_provider"
    MISSING_FILE = "missing_file"
    HASH_MISMATCH = "hash_mismatch"
    ORPHAN_FILE = "orphan_file"
    MISSING_BOOT_FILE = "missing_boot_file"
    CANCELLED = "cancelled"


class ValidationError(BaseModel):
    """Structured reason for rejecting a package.

    Attributes:
        kind: Failure kind
        message: Human-readable reason
        field: Offending manifest field (dotted), if applicable
        path: Offending file path or provider/module name, if applicable
        expected: Declared digest for hash mismatches
        actual: Computed digest for hash mismatches
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ErrorKind
    message: str = Field(min_length=1)
    field: str | None = None
    path: str | None = None
    expected: str | None = None
    actual: str | None = None

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


class ValidationFailed(Exception):
    """Raised by ValidationResult.raise_if_invalid().

    Attributes:
        error: The ValidationError that rejected the package
    """

    def __init__(self, error: ValidationError) -> None:
        self.error = error
        super().__init__(str(error))


# Helper functions to create errors (avoids Pydantic classmethod issues)


def missing_field(field: str, message: str) -> ValidationError:
    """Required field or substructure is absent."""
    return ValidationError(kind=ErrorKind.MISSING_FIELD, message=message, field=field)


def invalid_field(field: str, message: str, path: str | None = None) -> ValidationError:
    """Field is present but out of range or malformed."""
    return ValidationError(kind=ErrorKind.INVALID_FIELD, message=message, field=field, path=path)


def unknown_provider(name: str, what: str = "boot") -> ValidationError:
    """No provider registered for a category or product name."""
    return ValidationError(
        kind=ErrorKind.UNKNOWN_PROVIDER,
        message=f"Missing {name} {what} provider",
        path=name,
    )


def missing_file(path: str, detail: str | None = None) -> ValidationError:
    """Declared file (or provider directory) is absent or unreadable."""
    message = f"Missing {path}" if detail is None else f"Missing {path}: {detail}"
    return ValidationError(kind=ErrorKind.MISSING_FILE, message=message, path=path)


def hash_mismatch(path: str, expected: str, actual: str) -> ValidationError:
    """Re-computed digest differs from the declared digest."""
    return ValidationError(
        kind=ErrorKind.HASH_MISMATCH,
        message=f"Mismatching hash for {path}: expected {expected}, got {actual}",
        path=path,
        expected=expected,
        actual=actual,
    )


def orphan_file(file_name: str) -> ValidationError:
    """File present in the modules directory but declared by no module."""
    return ValidationError(
        kind=ErrorKind.ORPHAN_FILE,
        message=f"Undeclared module file {file_name}",
        path=file_name,
    )


def missing_boot_file(file_name: str) -> ValidationError:
    """Boot file for the category is not among the declared hashes."""
    return ValidationError(
        kind=ErrorKind.MISSING_BOOT_FILE,
        message=f"Missing {file_name} hash",
        path=file_name,
        field="hash.values",
    )


def cancelled(reason: str = "Validation cancelled") -> ValidationError:
    """Cancellation token was observed set."""
    return ValidationError(kind=ErrorKind.CANCELLED, message=reason)
