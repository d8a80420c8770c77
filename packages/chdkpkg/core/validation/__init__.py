"""Hierarchical package validation engine.

Validates a parsed manifest against the materialized package tree:
- Field validators per manifest substructure, in a fixed order
- Hash lookup verification, re-computing each declared digest from disk
- Module set validation with orphan-file detection
- Progress reporting and cooperative cancellation across all files

Failures are returned as values (ValidationResult / ValidationError); the
first violated checkpoint ends the call.
"""

from chdkpkg.core.validation.checks import validate_changeset, validate_created, validate_version
from chdkpkg.core.validation.context import (
    CancelToken,
    ProgressCallback,
    ProgressTracker,
    ValidationContext,
    new_context,
)
from chdkpkg.core.validation.errors import ErrorKind, ValidationError, ValidationFailed
from chdkpkg.core.validation.fields import FIELD_CHECK_ORDER
from chdkpkg.core.validation.hashes import verify_hash_values, verify_hashes
from chdkpkg.core.validation.modules import ModuleSetValidator
from chdkpkg.core.validation.package import (
    PackageValidator,
    build_package_validator,
    validate_module_set,
    validate_package,
)
from chdkpkg.core.validation.protocols import Validator
from chdkpkg.core.validation.result import ValidationResult

__all__ = [
    # Entry points
    "validate_package",
    "validate_module_set",
    "verify_hashes",
    "build_package_validator",
    # Validators
    "Validator",
    "PackageValidator",
    "ModuleSetValidator",
    "verify_hash_values",
    "validate_changeset",
    "validate_created",
    "validate_version",
    "FIELD_CHECK_ORDER",
    # Results
    "ErrorKind",
    "ValidationError",
    "ValidationFailed",
    "ValidationResult",
    # Context
    "CancelToken",
    "ProgressCallback",
    "ProgressTracker",
    "ValidationContext",
    "new_context",
]
