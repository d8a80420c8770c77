"""Hash lookup verification: re-compute declared digests from disk.

Every declared file is checked; the walk stops only at the first missing
file, mismatching digest or observed cancellation.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from pathlib import Path

from chdkpkg.core.config.models import ValidationSettings
from chdkpkg.core.hashing import SECURE_HASH_ALGORITHMS, file_digest, is_secure_algorithm
from chdkpkg.core.utils.logging import get_logger
from chdkpkg.core.validation.context import (
    CancelToken,
    ProgressCallback,
    ValidationContext,
    new_context,
)
from chdkpkg.core.validation.errors import (
    ValidationError,
    cancelled,
    hash_mismatch,
    invalid_field,
    missing_file,
)
from chdkpkg.core.validation.paths import UnsafePathError, resolve_case_insensitive
from chdkpkg.core.validation.result import ValidationResult, to_result

logger = get_logger(__name__)


def verify_hash_values(
    values: Mapping[str, str] | None,
    algorithm: str | None,
    context: ValidationContext,
    field: str = "hash",
) -> ValidationError | None:
    """Verify each declared ``path -> digest`` pair against the package tree.

    Cancellation is checked before each file. Progress advances on the
    context's shared tracker after each file that matches.

    Args:
        values: Declared relative path -> expected lowercase hex digest
        algorithm: Digest algorithm name
        context: Per-call context (base path, tracker, cancel token)
        field: Field path used in errors

    Returns:
        None when every file exists and matches, otherwise the first failure
    """
    if not is_secure_algorithm(algorithm):
        return invalid_field(
            f"{field}.name",
            f"Invalid {field} name {algorithm!r}; "
            f"expected one of {', '.join(SECURE_HASH_ALGORITHMS)}",
        )

    if not values:
        return invalid_field(f"{field}.values", f"Empty {field} values")

    for rel_path, expected in values.items():
        if context.is_cancelled():
            logger.warning(f"Hash verification cancelled before {rel_path}")
            return cancelled()

        try:
            file_path = resolve_case_insensitive(context.base_path, rel_path)
        except UnsafePathError as e:
            return invalid_field(f"{field}.values", str(e), path=rel_path)
        except OSError as e:
            return missing_file(rel_path, detail=e.strerror or str(e))

        if file_path is None or not file_path.is_file():
            return missing_file(rel_path)

        try:
            actual = file_digest(file_path, algorithm, context.chunk_size)
        except OSError as e:
            return missing_file(rel_path, detail=e.strerror or str(e))

        if actual != expected:
            return hash_mismatch(rel_path, expected, actual)

        logger.debug(f"{algorithm} ok: {rel_path}")
        context.tracker.advance()

    return None


def verify_hashes(
    values: Mapping[str, str] | None,
    algorithm: str | None,
    base_path: Path | str,
    progress: ProgressCallback | None = None,
    cancel_token: CancelToken | None = None,
    settings: ValidationSettings | None = None,
    now: datetime | None = None,
) -> ValidationResult:
    """Standalone hash lookup verification with its own progress total.

    Example:
        >>> result = verify_hashes({"DISKBOOT.BIN": digest}, "sha256", "/mnt/card")
        >>> result.valid
        True
    """
    context = new_context(
        base_path,
        settings or ValidationSettings(),
        total=len(values or {}),
        progress=progress,
        cancel_token=cancel_token,
        now=now,
    )
    return to_result(verify_hash_values(values, algorithm, context))
