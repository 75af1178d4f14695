# dirmirror Path Utilities
# Filesystem primitives used by the executor

import os
import shutil
from pathlib import Path, PurePath


def expand_path(path: str | Path) -> Path:
    """
    Expand ~ and environment variables in path.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded, absolute Path object.
    """
    path_str = str(path)
    path_str = os.path.expanduser(path_str)
    path_str = os.path.expandvars(path_str)
    return Path(path_str).resolve()


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists, creating intermediate segments if necessary.

    Args:
        path: Directory path.

    Returns:
        The path that was ensured.

    Raises:
        FileExistsError: If path exists and is not a directory.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def copy_file(source: Path, dest: Path) -> None:
    """
    Copy file bytes from source to dest, overwriting dest.

    Only content is copied; permission bits and timestamps are not.
    A symlink at dest is replaced by a regular file, never written through.

    Raises:
        OSError: If source can't be read or dest can't be written.
    """
    if dest.is_symlink():
        dest.unlink()
    shutil.copyfile(source, dest)


def delete_file(path: Path) -> None:
    """Remove a single file."""
    path.unlink()


def delete_directory(path: Path, *, recursive: bool = False) -> None:
    """
    Remove a directory.

    Args:
        path: Directory to remove.
        recursive: Remove the whole subtree instead of requiring an empty directory.

    Raises:
        OSError: If the directory is missing, or not empty and recursive is False.
    """
    if recursive:
        shutil.rmtree(path)
    else:
        path.rmdir()


def to_relative_key(path: str | PurePath, base: str | PurePath) -> str:
    """
    Build an inventory key: path relative to base, with forward slashes.

    Args:
        path: Path inside base.
        base: Tree root.

    Returns:
        Relative path string such as "docs/readme.txt".
    """
    return PurePath(os.path.relpath(path, base)).as_posix()


def is_nested(path: Path, other: Path) -> bool:
    """Check whether path equals other or lies inside it."""
    try:
        path.relative_to(other)
    except ValueError:
        return False
    return True
