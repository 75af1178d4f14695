# dirmirror Sync Engine
# Scan, plan and execute cycles on a fixed interval

import threading
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from dirmirror.logger import SyncLogger
from dirmirror.sync.actions import SyncTask, TaskResult, execute_tasks
from dirmirror.sync.item import Inventory, scan_directory
from dirmirror.sync.planner import plan_tasks
from dirmirror.utils.hashing import DEFAULT_ALGORITHM, is_supported_algorithm
from dirmirror.utils.paths import ensure_dir, expand_path, is_nested


@dataclass
class CycleResult:
    """Result of one scan, plan and execute cycle."""

    success: bool
    tasks: list[SyncTask] = field(default_factory=list)
    results: list[TaskResult] = field(default_factory=list)
    error: Optional[str] = None
    dry_run: bool = False
    started_at: datetime = field(default_factory=datetime.now)
    finished_at: Optional[datetime] = None

    @property
    def executed(self) -> int:
        """Number of tasks applied successfully."""
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        """Number of tasks that failed."""
        return sum(1 for r in self.results if not r.success)

    @property
    def in_sync(self) -> bool:
        """Check if the replica already matched the source."""
        return self.error is None and not self.tasks


class SyncEngine:
    """
    One-way mirror of a source tree onto a replica tree.

    Each cycle builds fresh inventories of both trees, plans the tasks
    that make the replica match, and executes them. run() repeats cycles
    until the cancel event is set; the wait between cycles is the only
    point where cancellation takes effect.
    """

    def __init__(
        self,
        source: str | Path,
        replica: str | Path,
        interval: float,
        *,
        logger: Optional[SyncLogger] = None,
        cancel_event: Optional[threading.Event] = None,
        algorithm: str = DEFAULT_ALGORITHM,
    ):
        """
        Initialize sync engine.

        Args:
            source: Source directory (never written).
            replica: Replica directory (the only tree that is mutated).
            interval: Seconds to wait between cycles.
            logger: Logger for progress and failures.
            cancel_event: Event that stops run() when set. A new one is created if not provided.
            algorithm: Hash algorithm used for both trees.

        Raises:
            ValueError: If the trees overlap, the interval is negative or the algorithm is unknown.
        """
        self.source = expand_path(source)
        self.replica = expand_path(replica)

        if is_nested(self.replica, self.source) or is_nested(self.source, self.replica):
            raise ValueError(f"Source and replica must not overlap: '{self.source}', '{self.replica}'")
        if interval < 0:
            raise ValueError(f"Interval must not be negative: {interval}")
        if not is_supported_algorithm(algorithm):
            raise ValueError(f"Unsupported hash algorithm: {algorithm}")

        self.interval = interval
        self.algorithm = algorithm
        self.logger = logger or SyncLogger.null()
        self._cancel_event = cancel_event or threading.Event()
        self.last_result: Optional[CycleResult] = None

    @property
    def cancelled(self) -> bool:
        """Check if a stop was requested."""
        return self._cancel_event.is_set()

    def stop(self) -> None:
        """Request the loop to stop at the next wait."""
        self._cancel_event.set()

    def scan(self, root: Path) -> Inventory:
        """Build the inventory of one tree."""
        return scan_directory(root, algorithm=self.algorithm, logger=self.logger)

    def run_once(self, *, dry_run: bool = False) -> CycleResult:
        """
        Run a single synchronization cycle.

        Args:
            dry_run: If True, plan but don't execute.

        Returns:
            CycleResult with planned tasks and execution results.

        Raises:
            ScanError: If a tree can't be inventoried. Nothing is planned or executed then.
        """
        result = CycleResult(success=True, dry_run=dry_run)
        self.logger.info(f"Starting synchronization: {self.source} -> {self.replica}")

        source_items = self.scan(self.source)

        if not self.replica.exists():
            if dry_run:
                replica_items: Inventory = {}
            else:
                self.logger.warning(f"Replica directory not found, creating it: {self.replica}")
                ensure_dir(self.replica)
                replica_items = self.scan(self.replica)
        else:
            replica_items = self.scan(self.replica)

        result.tasks = plan_tasks(source_items, self.source, replica_items, self.replica)
        self.logger.debug(f"Planned {len(result.tasks)} task(s)")

        if not result.tasks:
            self.logger.success("Replica is up to date.")
        elif dry_run:
            self.logger.info(f"Dry run: {len(result.tasks)} task(s) planned, nothing applied.")
        else:
            result.results = execute_tasks(result.tasks, logger=self.logger)
            result.success = result.failed == 0

        result.finished_at = datetime.now()
        elapsed = (result.finished_at - result.started_at).total_seconds()
        self.logger.info(f"Synchronization cycle finished in {elapsed:.2f}s")
        self.last_result = result
        return result

    def run(self, *, max_cycles: Optional[int] = None) -> int:
        """
        Run cycles until cancelled.

        A failing cycle is logged and the loop carries on after the usual
        wait. A stop requested mid-cycle takes effect once the cycle is done.

        Args:
            max_cycles: Stop after this many cycles. None runs until cancelled.

        Returns:
            Number of cycles run.
        """
        cycles = 0

        while not self.cancelled:
            try:
                self.run_once()
            except Exception as e:
                self.logger.error(f"Error during synchronization: {e}")
                self.last_result = CycleResult(success=False, error=str(e), finished_at=datetime.now())

            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break

            if self._cancel_event.wait(self.interval):
                break

        self.logger.info("Stopping synchronization service...")
        return cycles
