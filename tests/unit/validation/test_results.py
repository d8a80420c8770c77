"""Tests for validation errors, results and the per-call context."""

from pathlib import Path

from pydantic import ValidationError as PydanticValidationError
import pytest

from chdkpkg.core.config import ValidationSettings
from chdkpkg.core.validation import (
    ErrorKind,
    ProgressTracker,
    ValidationError,
    ValidationFailed,
    ValidationResult,
    new_context,
)
from chdkpkg.core.validation.errors import (
    cancelled,
    hash_mismatch,
    invalid_field,
    missing_boot_file,
    missing_field,
    missing_file,
    orphan_file,
    unknown_provider,
)
from chdkpkg.core.validation.result import invalid_result, to_result, valid_result


class TestErrorHelpers:
    """Test suite for error constructor helpers."""

    def test_every_kind_has_a_helper(self):
        """Test each helper produces its own kind."""
        errors = [
            missing_field("product", "Null product"),
            invalid_field("version", "Invalid version: 0.1"),
            unknown_provider("Q"),
            missing_file("DISKBOOT.BIN"),
            hash_mismatch("DISKBOOT.BIN", "aa", "bb"),
            orphan_file("C.FLT"),
            missing_boot_file("DISKBOOT.BIN"),
            cancelled(),
        ]

        assert [e.kind for e in errors] == list(ErrorKind)

    def test_unknown_provider_message(self):
        """Test provider errors name the provider kind."""
        error = unknown_provider("SDM", "modules")

        assert error.message == "Missing SDM modules provider"
        assert error.path == "SDM"

    def test_missing_file_detail(self):
        """Test OS detail is appended to the message."""
        error = missing_file("A.FLT", detail="Permission denied")

        assert error.message == "Missing A.FLT: Permission denied"
        assert error.path == "A.FLT"

    def test_hash_mismatch_carries_digests(self):
        """Test both digests are kept for reporting."""
        error = hash_mismatch("A.FLT", "aa", "bb")

        assert (error.expected, error.actual) == ("aa", "bb")

    def test_str(self):
        """Test the string form includes the kind."""
        assert str(orphan_file("C.FLT")) == "[orphan_file] Undeclared module file C.FLT"

    def test_errors_are_frozen(self):
        """Test errors cannot be mutated."""
        error = cancelled()

        with pytest.raises(PydanticValidationError):
            error.message = "changed"

    def test_empty_message_rejected(self):
        """Test an error must explain itself."""
        with pytest.raises(PydanticValidationError):
            ValidationError(kind=ErrorKind.CANCELLED, message="")


class TestValidationResult:
    """Test suite for ValidationResult."""

    def test_valid_result(self):
        """Test a passing result has no error."""
        result = valid_result()

        assert result.valid is True
        assert result.error is None
        assert result.cancelled is False
        result.raise_if_invalid()

    def test_invalid_result(self):
        """Test a failing result carries its error."""
        error = missing_file("DISKBOOT.BIN")
        result = invalid_result(error)

        assert result.valid is False
        assert result.error == error

    def test_to_result(self):
        """Test conversion from a checkpoint outcome."""
        assert to_result(None).valid is True
        assert to_result(cancelled()).cancelled is True

    def test_raise_if_invalid(self):
        """Test failures convert to ValidationFailed."""
        error = orphan_file("C.FLT")

        with pytest.raises(ValidationFailed, match="orphan_file") as exc_info:
            invalid_result(error).raise_if_invalid()

        assert exc_info.value.error is error

    @pytest.mark.parametrize(
        ("valid", "error"),
        [(True, cancelled()), (False, None)],
    )
    def test_inconsistent_result_rejected(self, valid, error):
        """Test error is set exactly when the result is invalid."""
        with pytest.raises(PydanticValidationError):
            ValidationResult(valid=valid, error=error)


class TestProgressTracker:
    """Test suite for ProgressTracker."""

    def test_reports_fractions(self):
        """Test each advance reports completed / total."""
        seen: list[float] = []
        tracker = ProgressTracker(total=4, callback=seen.append)

        for _ in range(4):
            tracker.advance()

        assert seen == [0.25, 0.5, 0.75, 1.0]

    def test_never_exceeds_total(self):
        """Test over-advancing clamps at 1.0."""
        seen: list[float] = []
        tracker = ProgressTracker(total=1, callback=seen.append)

        tracker.advance()
        tracker.advance()

        assert seen == [1.0, 1.0]
        assert tracker.completed == 1

    def test_zero_total_is_silent(self):
        """Test nothing is reported when there is nothing to verify."""
        seen: list[float] = []

        ProgressTracker(total=0, callback=seen.append).advance()

        assert seen == []


class TestNewContext:
    """Test suite for new_context."""

    def test_uses_settings(self, tmp_path):
        """Test chunk size and earliest timestamp come from settings."""
        settings = ValidationSettings(chunk_size=4096)

        context = new_context(str(tmp_path), settings, total=3)

        assert context.base_path == Path(tmp_path)
        assert context.chunk_size == 4096
        assert context.earliest_created == settings.earliest_created
        assert context.tracker.total == 3
        assert context.is_cancelled() is False
