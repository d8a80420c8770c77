"""Streaming digest computation for package files."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO

# Allow-list of digest algorithms accepted in manifest hash blocks
SECURE_HASH_ALGORITHMS: tuple[str, ...] = ("sha256", "sha384", "sha512")

DEFAULT_CHUNK_SIZE = 1024 * 1024


class UnsupportedAlgorithmError(ValueError):
    """Raised when a digest algorithm is not on the secure allow-list."""

    def __init__(self, algorithm: str | None) -> None:
        self.algorithm = algorithm
        super().__init__(
            f"Unsupported hash algorithm {algorithm!r}; "
            f"expected one of {', '.join(SECURE_HASH_ALGORITHMS)}"
        )


def is_secure_algorithm(algorithm: str | None) -> bool:
    """Return True when ``algorithm`` is on the secure allow-list."""
    return algorithm in SECURE_HASH_ALGORITHMS


def compute_digest(
    stream: BinaryIO,
    algorithm: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Return the lowercase hex digest of a binary stream.

    Args:
        stream: Readable binary stream, consumed to EOF
        algorithm: One of SECURE_HASH_ALGORITHMS
        chunk_size: Read size in bytes

    Returns:
        Lowercase hex digest

    Raises:
        UnsupportedAlgorithmError: If algorithm is not allowed
    """
    if not is_secure_algorithm(algorithm):
        raise UnsupportedAlgorithmError(algorithm)

    digest = hashlib.new(algorithm)
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        digest.update(chunk)
    return digest.hexdigest()


def file_digest(path: Path, algorithm: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Return the lowercase hex digest of a file on disk."""
    with path.open("rb") as handle:
        return compute_digest(handle, algorithm, chunk_size)
