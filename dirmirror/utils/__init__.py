# dirmirror Utilities Module
# Helper functions for path handling and content hashing

from dirmirror.utils.hashing import (
    DEFAULT_ALGORITHM,
    content_hash,
    file_hash,
    is_supported_algorithm,
)
from dirmirror.utils.paths import (
    copy_file,
    delete_directory,
    delete_file,
    ensure_dir,
    expand_path,
    is_nested,
    to_relative_key,
)

__all__ = [
    # Paths
    "expand_path",
    "ensure_dir",
    "copy_file",
    "delete_file",
    "delete_directory",
    "to_relative_key",
    "is_nested",
    # Hashing
    "DEFAULT_ALGORITHM",
    "content_hash",
    "file_hash",
    "is_supported_algorithm",
]
