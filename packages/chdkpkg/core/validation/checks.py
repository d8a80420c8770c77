"""Checkpoints shared by several substructure validators.

Each function returns None when the value passes, or the ValidationError for
the first violated rule.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from chdkpkg.core.models import SoftwareVersion
from chdkpkg.core.validation.errors import ValidationError, invalid_field, missing_field

# Decimal svn revision, or a short/full git commit id
_CHANGESET_RE = re.compile(r"[0-9]+|[0-9a-fA-F]{1,40}")


def as_utc(value: datetime) -> datetime:
    """Interpret naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def validate_created(
    created: datetime | None,
    field: str,
    subject: str,
    earliest: datetime,
    now: datetime,
) -> ValidationError | None:
    """Creation timestamp must exist and lie within ``[earliest, now]``.

    Args:
        created: Timestamp to check
        field: Field path used in errors (e.g. "product.created")
        subject: Owner used in messages (e.g. "product", "module ui")
        earliest: Oldest accepted timestamp
        now: Validation time
    """
    if created is None:
        return missing_field(field, f"Null {subject} created")

    stamp = as_utc(created)
    if stamp < as_utc(earliest) or stamp > as_utc(now):
        return invalid_field(field, f"Invalid {subject} created: {created.isoformat()}")
    return None


def validate_changeset(
    changeset: str | None,
    field: str,
    subject: str,
) -> ValidationError | None:
    """Changeset must exist and look like a revision number or commit id."""
    if changeset is None:
        return missing_field(field, f"Null {subject} changeset")
    if not _CHANGESET_RE.fullmatch(changeset):
        return invalid_field(field, f"Invalid {subject} changeset: {changeset!r}")
    return None


def validate_version(
    version: SoftwareVersion | None,
    field: str,
    subject: str,
    min_major: int = 1,
) -> ValidationError | None:
    """Version must exist with ``major >= min_major`` and non-negative parts."""
    if version is None:
        return missing_field(field, f"Null {subject}")
    if version.major < min_major or version.minor < 0:
        return invalid_field(field, f"Invalid {subject}: {version}")
    if version.revision is not None and version.revision < 0:
        return invalid_field(field, f"Invalid {subject}: {version}")
    return None

