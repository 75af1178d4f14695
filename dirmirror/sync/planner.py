# dirmirror Sync Planner
# Turns two inventories into an ordered list of tasks

from pathlib import Path

from dirmirror.sync.actions import ActionType, SyncTask
from dirmirror.sync.item import Inventory, Item


def plan_tasks(
    source_items: Inventory,
    source_root: Path,
    replica_items: Inventory,
    replica_root: Path,
) -> list[SyncTask]:
    """
    Plan the tasks that make the replica an exact copy of the source.

    Tasks come in three phases:

    1. Directories in source: create missing ones, replacing replica files
       that sit at the same path.
    2. Files in source: copy missing ones, update changed ones, replacing
       replica directories that sit at the same path.
    3. Replica-only entries: delete them, files before directories and
       nested directories before their parents.

    Paths identical in type and content on both sides produce no task.
    Neither inventory is modified.

    Args:
        source_items: Inventory of the source tree.
        source_root: Absolute source root.
        replica_items: Inventory of the replica tree.
        replica_root: Absolute replica root.

    Returns:
        Ordered list of SyncTask.
    """
    tasks: list[SyncTask] = []

    def _task(action: ActionType, key: str, *, recursive: bool = False) -> SyncTask:
        return SyncTask(
            action=action,
            source_path=source_root / key,
            destination_path=replica_root / key,
            recursive=recursive,
        )

    source_dirs = sorted(key for key, item in source_items.items() if item.is_directory)
    source_files = sorted(key for key, item in source_items.items() if not item.is_directory)

    # Phase 1: directories
    for key in source_dirs:
        replica_item = replica_items.get(key)
        if replica_item is None:
            tasks.append(_task(ActionType.CREATE_DIRECTORY, key))
        elif not replica_item.is_directory:
            tasks.append(_task(ActionType.DELETE_FILE, key))
            tasks.append(_task(ActionType.CREATE_DIRECTORY, key))

    # Phase 2: files
    replaced_dirs: list[str] = []
    for key in source_files:
        source_item = source_items[key]
        replica_item = replica_items.get(key)
        if replica_item is None:
            tasks.append(_task(ActionType.COPY_FILE, key))
        elif replica_item.is_directory:
            tasks.append(_task(ActionType.DELETE_DIRECTORY, key, recursive=True))
            tasks.append(_task(ActionType.COPY_FILE, key))
            replaced_dirs.append(key)
        elif replica_item.content_hash != source_item.content_hash:
            tasks.append(_task(ActionType.UPDATE_FILE, key))

    # Phase 3: replica-only entries
    stale = [
        (key, item)
        for key, item in replica_items.items()
        if key not in source_items and not _is_below_any(key, replaced_dirs)
    ]
    stale.sort(key=_prune_order)
    for key, item in stale:
        action = ActionType.DELETE_DIRECTORY if item.is_directory else ActionType.DELETE_FILE
        tasks.append(_task(action, key))

    return tasks


def _prune_order(entry: tuple[str, Item]) -> tuple[bool, int, str]:
    """Files first; then directories, deepest first."""
    key, item = entry
    depth = key.count("/")
    return (item.is_directory, -depth if item.is_directory else 0, key)


def _is_below_any(key: str, parents: list[str]) -> bool:
    # removed along with a directory replaced in phase 2
    return any(key.startswith(parent + "/") for parent in parents)
