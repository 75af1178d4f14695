# dirmirror Sync Module
# Inventory scanning, planning, execution and the sync loop

from dirmirror.sync.actions import ActionType, SyncTask, TaskResult, execute_task, execute_tasks
from dirmirror.sync.engine import CycleResult, SyncEngine
from dirmirror.sync.errors import DirectoryUnavailableError, ScanError
from dirmirror.sync.item import Inventory, Item, scan_directory
from dirmirror.sync.planner import plan_tasks

__all__ = [
    # Item
    "Item",
    "Inventory",
    "scan_directory",
    # Errors
    "ScanError",
    "DirectoryUnavailableError",
    # Actions
    "ActionType",
    "SyncTask",
    "TaskResult",
    "execute_task",
    "execute_tasks",
    # Planner
    "plan_tasks",
    # Engine
    "SyncEngine",
    "CycleResult",
]
