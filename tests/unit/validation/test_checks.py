"""Tests for shared checkpoints: created, changeset and version."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from chdkpkg.core.models import SoftwareVersion
from chdkpkg.core.validation import (
    ErrorKind,
    validate_changeset,
    validate_created,
    validate_version,
)

EARLIEST = datetime(2000, 1, 1, tzinfo=UTC)
NOW = datetime(2024, 6, 1, tzinfo=UTC)


class TestValidateCreated:
    """Test suite for validate_created."""

    def test_within_range(self):
        """Test a timestamp between earliest and now."""
        created = datetime(2015, 3, 1, tzinfo=UTC)

        assert validate_created(created, "product.created", "product", EARLIEST, NOW) is None

    def test_bounds_are_inclusive(self):
        """Test both earliest and now themselves are accepted."""
        assert validate_created(EARLIEST, "f", "product", EARLIEST, NOW) is None
        assert validate_created(NOW, "f", "product", EARLIEST, NOW) is None

    def test_null(self):
        """Test a missing timestamp."""
        error = validate_created(None, "product.created", "product", EARLIEST, NOW)

        assert error.kind is ErrorKind.MISSING_FIELD
        assert error.message == "Null product created"

    def test_before_earliest(self):
        """Test a timestamp before 2000."""
        created = datetime(1999, 12, 31, 23, 59, tzinfo=UTC)

        error = validate_created(created, "product.created", "product", EARLIEST, NOW)

        assert error.kind is ErrorKind.INVALID_FIELD
        assert error.field == "product.created"

    def test_after_now(self):
        """Test a timestamp in the future."""
        error = validate_created(
            NOW + timedelta(seconds=1), "modules.ui.created", "module ui", EARLIEST, NOW
        )

        assert error.kind is ErrorKind.INVALID_FIELD
        assert error.message.startswith("Invalid module ui created")

    def test_naive_timestamp_treated_as_utc(self):
        """Test naive timestamps compare as UTC."""
        assert validate_created(datetime(2010, 1, 1), "f", "product", EARLIEST, NOW) is None

    def test_other_timezone_converted(self):
        """Test an offset timestamp equal to now in UTC is accepted."""
        plus_two = timezone(timedelta(hours=2))
        created = NOW.astimezone(plus_two)

        assert validate_created(created, "f", "product", EARLIEST, NOW) is None


class TestValidateChangeset:
    """Test suite for validate_changeset."""

    @pytest.mark.parametrize("changeset", ["5312", "0", "3c9f2e1", "ABCDEF", "a" * 40])
    def test_valid(self, changeset):
        """Test revision numbers and commit ids."""
        assert validate_changeset(changeset, "build.changeset", "build") is None

    def test_null(self):
        """Test a missing changeset."""
        error = validate_changeset(None, "build.changeset", "build")

        assert error.kind is ErrorKind.MISSING_FIELD
        assert error.message == "Null build changeset"

    @pytest.mark.parametrize("changeset", ["", "r5312", "not-a-rev", "a" * 41, "12 34", "5312\n"])
    def test_invalid(self, changeset):
        """Test malformed changesets."""
        error = validate_changeset(changeset, "build.changeset", "build")

        assert error.kind is ErrorKind.INVALID_FIELD


class TestValidateVersion:
    """Test suite for validate_version."""

    def test_null(self):
        """Test a missing version."""
        error = validate_version(None, "modules.version", "modules version")

        assert error.kind is ErrorKind.MISSING_FIELD
        assert error.message == "Null modules version"

    def test_min_major(self):
        """Test the configurable lower bound on major."""
        version = SoftwareVersion(major=0, minor=3)

        assert validate_version(version, "f", "v", min_major=0) is None
        assert validate_version(version, "f", "v", min_major=1).kind is ErrorKind.INVALID_FIELD

    def test_negative_revision(self):
        """Test a negative revision is rejected."""
        version = SoftwareVersion(major=1, minor=0, revision=-2)

        assert validate_version(version, "f", "v").kind is ErrorKind.INVALID_FIELD
