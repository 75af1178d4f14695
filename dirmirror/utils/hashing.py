# dirmirror Hashing Utilities
# Content hashing for change detection

import hashlib
from pathlib import Path

DEFAULT_ALGORITHM = "sha256"


def content_hash(content: str | bytes, *, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Calculate hash of content.

    Args:
        content: String or bytes content.
        algorithm: Hash algorithm (default sha256).

    Returns:
        Hex digest of hash.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    hasher = hashlib.new(algorithm)
    hasher.update(content)
    return hasher.hexdigest()


def file_hash(path: Path, *, algorithm: str = DEFAULT_ALGORITHM, chunk_size: int = 65536) -> str:
    """
    Calculate hash of file content.

    The file is read in chunks and closed before returning, on success
    or failure.

    Args:
        path: Path to file.
        algorithm: Hash algorithm (default sha256).
        chunk_size: Chunk size for reading large files.

    Returns:
        Hex digest of hash.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    hasher = hashlib.new(algorithm)

    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)

    return hasher.hexdigest()


def is_supported_algorithm(algorithm: str) -> bool:
    """Check whether hashlib can build a digest for this name."""
    try:
        hashlib.new(algorithm)
    except (ValueError, TypeError):
        return False
    return True
