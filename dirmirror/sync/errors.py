# dirmirror Sync Errors
# Exceptions raised while building inventories

from pathlib import Path
from typing import Optional


class ScanError(Exception):
    """Exception raised when a directory tree can't be inventoried."""

    def __init__(self, message: str, root: Path, entry: Optional[Path] = None):
        self.message = message
        self.root = root
        self.entry = entry
        super().__init__(message)


class DirectoryUnavailableError(ScanError):
    """The root of a scan does not exist or is not a directory."""

    def __init__(self, root: Path):
        super().__init__(f"Directory not found: {root}", root=root)
