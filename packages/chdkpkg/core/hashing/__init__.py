"""Digest primitive used to re-compute declared file hashes."""

from chdkpkg.core.hashing.digest import (
    DEFAULT_CHUNK_SIZE,
    SECURE_HASH_ALGORITHMS,
    UnsupportedAlgorithmError,
    compute_digest,
    file_digest,
    is_secure_algorithm,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "SECURE_HASH_ALGORITHMS",
    "UnsupportedAlgorithmError",
    "compute_digest",
    "file_digest",
    "is_secure_algorithm",
]
