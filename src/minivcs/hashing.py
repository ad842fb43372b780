"""Hashing utilities for content comparison and commit identifiers.

File digests are used by change detection to compare a tracked file with
its stored copy; text digests derive commit identifiers from the commit
count.
"""

from pathlib import Path
import hashlib


def hash_bytes(data: bytes) -> str:
    """Compute SHA256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def hash_text(text: str) -> str:
    """Compute SHA256 hex digest of a UTF-8 encoded string.

    Example:
        >>> hash_text("1")[:12]
        '6b86b273ff34'
    """
    return hash_bytes(text.encode("utf-8"))


def compute_file_digest(path: Path, chunk_size: int = 8192) -> str:
    """Compute SHA256 hash of file contents.

    Simple byte-for-byte hashing - any change invalidates the digest.

    Args:
        path: Path to file to hash
        chunk_size: Number of bytes read per iteration

    Returns:
        64-character SHA256 hex digest
    """
    sha256 = hashlib.sha256()
    with Path(path).open("rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


__all__ = [
    "compute_file_digest",
    "hash_bytes",
    "hash_text",
]
