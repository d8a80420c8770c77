"""Per-call validation context: base path, clock, progress and cancellation.

A context is created at the start of each public validation call and
discarded at the end. Validators themselves hold no per-call state.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol

from chdkpkg.core.config.models import ValidationSettings

ProgressCallback = Callable[[float], None]


class CancelToken(Protocol):
    """Anything with ``is_set()``; threading.Event and asyncio.Event both fit."""

    def is_set(self) -> bool: ...


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class ProgressTracker:
    """Reports ``completed / total`` after each verified file.

    The total is fixed before the first file is read so that reported
    fractions never decrease, even when several hash blocks share a tracker.

    Attributes:
        total: Number of file checks in the whole call
        callback: Optional progress sink
        completed: File checks finished so far
    """

    total: int
    callback: ProgressCallback | None = None
    completed: int = 0

    def advance(self, units: int = 1) -> None:
        """Record finished units and notify the callback."""
        self.completed = min(self.completed + units, self.total)
        if self.callback is not None and self.total > 0:
            self.callback(self.completed / self.total)


@dataclass
class ValidationContext:
    """State threaded through one validation call.

    Attributes:
        base_path: Package root directory
        now: Validation time; creation timestamps may not exceed it
        earliest_created: Oldest accepted creation timestamp
        chunk_size: Read size for digest streaming
        cancel_token: Optional cancellation signal
        tracker: Progress tracker shared by all hash blocks in the call
    """

    base_path: Path
    now: datetime
    earliest_created: datetime
    chunk_size: int
    cancel_token: CancelToken | None = None
    tracker: ProgressTracker = field(default_factory=lambda: ProgressTracker(total=0))

    def is_cancelled(self) -> bool:
        """Check if the call has been cancelled.

        Returns:
            True if cancel_token is set and signaled
        """
        return self.cancel_token is not None and self.cancel_token.is_set()


def new_context(
    base_path: Path | str,
    settings: ValidationSettings,
    total: int,
    progress: ProgressCallback | None = None,
    cancel_token: CancelToken | None = None,
    now: datetime | None = None,
) -> ValidationContext:
    """Create the context for one validation call.

    Args:
        base_path: Package root directory
        settings: Validator settings (chunk size, earliest timestamp)
        total: Number of file checks in the whole call, counted up front
        progress: Optional progress sink receiving fractions in [0, 1]
        cancel_token: Optional cancellation signal
        now: Validation time (defaults to current UTC time)
    """
    return ValidationContext(
        base_path=Path(base_path),
        now=now or utc_now(),
        earliest_created=settings.earliest_created,
        chunk_size=settings.chunk_size,
        cancel_token=cancel_token,
        tracker=ProgressTracker(total=total, callback=progress),
    )
