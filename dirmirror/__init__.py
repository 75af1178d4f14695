"""dirmirror - one-way periodic directory mirroring.

Keeps a replica directory an exact copy of a source directory: files and
directories missing from the replica are created, changed files are
replaced and anything the source doesn't have is removed.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "SyncEngine",
    "CycleResult",
    "SyncTask",
    "ActionType",
    "Item",
    "scan_directory",
    "plan_tasks",
    "execute_tasks",
    "ScanError",
    "DirectoryUnavailableError",
    "SyncLogger",
    "MirrorConfig",
]

_SYNC_NAMES = (
    "SyncEngine",
    "CycleResult",
    "SyncTask",
    "ActionType",
    "Item",
    "scan_directory",
    "plan_tasks",
    "execute_tasks",
    "ScanError",
    "DirectoryUnavailableError",
)


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in _SYNC_NAMES:
        from dirmirror import sync

        return getattr(sync, name)
    if name == "SyncLogger":
        from dirmirror.logger import SyncLogger

        return SyncLogger
    if name == "MirrorConfig":
        from dirmirror.config import MirrorConfig

        return MirrorConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
