"""Result type for validation entry points."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chdkpkg.core.validation.errors import ErrorKind, ValidationError, ValidationFailed


class ValidationResult(BaseModel):
    """Verdict for one validation call.

    Never raises - the first failure is captured in ``error``.

    Example:
        >>> result = validator.validate(manifest, base_path)
        >>> if not result.valid:
        ...     print(f"Rejected: {result.error}")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    valid: bool = Field(description="Whether the package passed every checkpoint")
    error: ValidationError | None = Field(default=None, description="First failure, if any")

    @model_validator(mode="after")
    def _error_iff_invalid(self) -> ValidationResult:
        if self.valid == (self.error is not None):
            raise ValueError("error must be set exactly when valid is False")
        return self

    @property
    def cancelled(self) -> bool:
        return self.error is not None and self.error.kind is ErrorKind.CANCELLED

    def raise_if_invalid(self) -> None:
        """Raise ValidationFailed carrying the error when invalid."""
        if self.error is not None:
            raise ValidationFailed(self.error)


def valid_result() -> ValidationResult:
    """Create a passing result."""
    return ValidationResult(valid=True)


def invalid_result(error: ValidationError) -> ValidationResult:
    """Create a failing result."""
    return ValidationResult(valid=False, error=error)


def to_result(error: ValidationError | None) -> ValidationResult:
    """Convert a checkpoint outcome to a result."""
    return valid_result() if error is None else invalid_result(error)
