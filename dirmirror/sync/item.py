# dirmirror Sync Item
# Item metadata and directory tree inventory

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dirmirror.logger import SyncLogger
from dirmirror.sync.errors import DirectoryUnavailableError, ScanError
from dirmirror.utils.hashing import DEFAULT_ALGORITHM, file_hash
from dirmirror.utils.paths import to_relative_key


@dataclass(frozen=True)
class Item:
    """
    Metadata for one filesystem entry.

    Directories carry an empty content hash; files carry the hex digest
    of their bytes.
    """

    is_directory: bool
    content_hash: str = ""

    @classmethod
    def directory(cls) -> "Item":
        return cls(is_directory=True)

    @classmethod
    def file(cls, content_hash: str) -> "Item":
        return cls(is_directory=False, content_hash=content_hash)


# Relative path with forward slashes -> Item
Inventory = dict[str, Item]


def scan_directory(
    root: Path,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    logger: Optional[SyncLogger] = None,
) -> Inventory:
    """
    Walk a directory tree and build its inventory.

    Every directory and file below root is recorded under its relative
    path. If two entries map to the same key, the first one wins.
    A dangling symlink is recorded as a file with an empty content hash.

    Args:
        root: Tree root.
        algorithm: Hash algorithm for file contents.
        logger: Optional logger for progress messages.

    Returns:
        Inventory of the tree (root itself is not included).

    Raises:
        DirectoryUnavailableError: If root doesn't exist or isn't a directory.
        ScanError: If any entry can't be listed or read.
    """
    log = logger or SyncLogger.null()
    log.info(f"Scanning directory {root}")

    if not root.is_dir():
        log.warning(f"Directory not found: {root}")
        raise DirectoryUnavailableError(root)

    def _raise_walk_error(error: OSError) -> None:
        entry = Path(error.filename) if error.filename else None
        raise ScanError(f"Error reading directory '{entry or root}': {error}", root=root, entry=entry) from error

    items: Inventory = {}

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        for name in dirnames:
            key = to_relative_key(os.path.join(dirpath, name), root)
            items.setdefault(key, Item.directory())

        for name in filenames:
            path = Path(dirpath, name)
            key = to_relative_key(path, root)
            if key in items:
                continue
            # Dangling link: nothing to hash, inventory it so it gets replaced or pruned
            if path.is_symlink() and not path.exists():
                items[key] = Item.file("")
                continue
            try:
                digest = file_hash(path, algorithm=algorithm)
            except OSError as e:
                raise ScanError(f"Error reading file '{path}': {e}", root=root, entry=path) from e
            items[key] = Item.file(digest)

    log.info(f"Scanning completed: {len(items)} items in {root}")
    return items
