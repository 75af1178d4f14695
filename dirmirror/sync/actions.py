# dirmirror Sync Actions
# Task types and execution against the replica tree

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from dirmirror.logger import SyncLogger
from dirmirror.utils.paths import copy_file, delete_directory, delete_file, ensure_dir


class ActionType(str, Enum):
    """Types of filesystem operations applied to the replica."""

    CREATE_DIRECTORY = "create_directory"
    DELETE_DIRECTORY = "delete_directory"
    COPY_FILE = "copy_file"
    UPDATE_FILE = "update_file"
    DELETE_FILE = "delete_file"


@dataclass(frozen=True)
class SyncTask:
    """
    One planned filesystem operation.

    destination_path is the path that gets mutated; source_path is only
    read by copy and update tasks. recursive marks a directory deletion
    that must remove a non-empty subtree.
    """

    action: ActionType
    source_path: Path
    destination_path: Path
    recursive: bool = False

    @property
    def is_copy(self) -> bool:
        """Check if this task writes file content."""
        return self.action in (ActionType.COPY_FILE, ActionType.UPDATE_FILE)

    @property
    def is_delete(self) -> bool:
        """Check if this task removes something."""
        return self.action in (ActionType.DELETE_FILE, ActionType.DELETE_DIRECTORY)

    @property
    def is_directory_action(self) -> bool:
        return self.action in (ActionType.CREATE_DIRECTORY, ActionType.DELETE_DIRECTORY)

    def describe(self) -> str:
        """Human-readable one-line description."""
        if self.action == ActionType.CREATE_DIRECTORY:
            return f"Creating directory: {self.destination_path}"
        if self.action == ActionType.DELETE_DIRECTORY:
            return f"Deleting directory: {self.destination_path}"
        if self.action == ActionType.COPY_FILE:
            return f"Copying file: {self.source_path} to {self.destination_path}"
        if self.action == ActionType.UPDATE_FILE:
            return f"Updating file: {self.source_path} to {self.destination_path}"
        return f"Deleting file: {self.destination_path}"


@dataclass
class TaskResult:
    """Result of executing a task."""

    task: SyncTask
    success: bool
    error: Optional[str] = None


def execute_task(task: SyncTask) -> None:
    """
    Apply a single task to the filesystem.

    Args:
        task: The task to apply.

    Raises:
        OSError: If the filesystem operation fails.
        ValueError: If the action type is unknown.
    """
    if task.action == ActionType.CREATE_DIRECTORY:
        ensure_dir(task.destination_path)
    elif task.action == ActionType.DELETE_DIRECTORY:
        delete_directory(task.destination_path, recursive=task.recursive)
    elif task.is_copy:
        copy_file(task.source_path, task.destination_path)
    elif task.action == ActionType.DELETE_FILE:
        delete_file(task.destination_path)
    else:
        raise ValueError(f"Unknown action type: {task.action}")


def execute_tasks(
    tasks: Optional[Iterable[SyncTask]],
    *,
    logger: Optional[SyncLogger] = None,
) -> list[TaskResult]:
    """
    Execute tasks sequentially, in order.

    A failing task is logged and recorded; the remaining tasks still run.

    Args:
        tasks: Tasks to execute. None or empty is a no-op.
        logger: Optional logger for per-task messages.

    Returns:
        One TaskResult per task.
    """
    if not tasks:
        return []

    tasks = list(tasks)
    log = logger or SyncLogger.null()
    log.info(f"Executing {len(tasks)} synchronization tasks...")

    results: list[TaskResult] = []
    for task in tasks:
        log.info(task.describe())
        try:
            execute_task(task)
        except Exception as e:
            log.error(f"Failed to {task.action.value.replace('_', ' ')} '{task.destination_path}': {e}")
            results.append(TaskResult(task=task, success=False, error=str(e)))
            continue
        results.append(TaskResult(task=task, success=True))

    failed = sum(1 for r in results if not r.success)
    if failed:
        log.warning(f"Synchronization finished with {failed} failed task(s).")
    else:
        log.info("Synchronization finished.")
    return results
