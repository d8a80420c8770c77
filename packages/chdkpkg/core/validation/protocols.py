"""Validator capability protocol."""

from pathlib import Path
from typing import Protocol, TypeVar

from .context import CancelToken, ProgressCallback
from .result import ValidationResult

T_contra = TypeVar("T_contra", contravariant=True)


class Validator(Protocol[T_contra]):
    """
    Protocol for manifest validators.

    Implementations are stateless between calls and may be shared across
    threads validating distinct packages.
    """

    def validate(
        self,
        value: T_contra,
        base_path: Path | str,
        progress: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> ValidationResult:
        """
        Validate a manifest value against the package tree.

        Args:
            value: Manifest record to validate
            base_path: Package root directory
            progress: Optional callback receiving completion fractions in [0, 1]
            cancel_token: Optional cancellation signal, checked before each file

        Returns:
            ValidationResult carrying the first failure, if any
        """
        ...
