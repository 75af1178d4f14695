"""Click-based CLI for dirmirror - one-way periodic directory mirroring."""

from __future__ import annotations

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from dirmirror import __version__
from dirmirror.config import MirrorConfig, load_config_data, merge_overrides, missing_fields
from dirmirror.logger import SyncLogger
from dirmirror.output import Console as OutputConsole
from dirmirror.sync import ScanError, SyncEngine

console = Console()


@click.command()
@click.version_option(version=__version__, prog_name="dirmirror")
@click.argument("source", required=False)
@click.argument("replica", required=False)
@click.argument("log_dir", required=False)
@click.argument("interval", type=int, required=False)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML file with settings; positional arguments take precedence",
)
@click.option("--once", is_flag=True, help="Run a single cycle and exit")
@click.option("--dry-run", "-n", is_flag=True, help="Show planned changes without applying them")
@click.option("--cycles", type=click.IntRange(min=1), default=None, help="Stop after this many cycles")
@click.option("--algorithm", default=None, help="Hash algorithm for file contents (default: sha256)")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.pass_context
def cli(
    ctx: click.Context,
    source: Optional[str],
    replica: Optional[str],
    log_dir: Optional[str],
    interval: Optional[int],
    config_file: Optional[Path],
    once: bool,
    dry_run: bool,
    cycles: Optional[int],
    algorithm: Optional[str],
    verbose: bool,
) -> None:
    """dirmirror - keep REPLICA an exact copy of SOURCE.

    Every INTERVAL seconds the replica is brought in line with the source:
    missing files and directories are copied, changed files are replaced
    and anything not in the source is deleted. Logs go to the console and
    to LOG_DIR/log.txt, rotated daily. Press Ctrl+C to stop.

    \b
    Example:
      dirmirror ./source ./replica ./logs 60
    """
    data: dict = {}
    if config_file is not None:
        try:
            data = load_config_data(config_file)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            console.print(f"[red]Error:[/red] {e}")
            ctx.exit(1)

    data = merge_overrides(
        data,
        {
            "source": source,
            "replica": replica,
            "log_dir": log_dir,
            "interval": interval,
            "algorithm": algorithm,
            "verbose": True if verbose else None,
        },
    )

    if missing_fields(data):
        click.echo("Invalid arguments...\n")
        click.echo(ctx.get_usage())
        return

    try:
        config = MirrorConfig.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            console.print(f"[red]Error:[/red] {loc}: {error['msg']}")
        ctx.exit(1)

    logger = SyncLogger(
        console,
        log_dir=config.log_path,
        verbose=config.verbose,
        backup_count=config.log_backup_count,
    )
    cancel_event = threading.Event()

    try:
        try:
            engine = SyncEngine(
                config.source_path,
                config.replica_path,
                config.interval,
                logger=logger,
                cancel_event=cancel_event,
                algorithm=config.algorithm,
            )
        except ValueError as e:
            logger.error(str(e))
            ctx.exit(1)

        if once or dry_run:
            _run_single_cycle(ctx, engine, logger, dry_run=dry_run)
            return

        logger.info(f"Mirroring every {config.interval}s. Press Ctrl+C to stop.")
        with cancel_on_signals(cancel_event, logger):
            engine.run(max_cycles=cycles)
    finally:
        logger.close()


def _run_single_cycle(ctx: click.Context, engine: SyncEngine, logger: SyncLogger, *, dry_run: bool) -> None:
    """Run one cycle, render the outcome, exit 1 on failure."""
    output = OutputConsole(console=console)

    try:
        result = engine.run_once(dry_run=dry_run)
    except (ScanError, OSError) as e:
        logger.error(f"Error during synchronization: {e}")
        ctx.exit(1)

    if dry_run:
        output.print_plan(result.tasks, dry_run=True)
    output.print_cycle_result(result)

    if not result.success:
        ctx.exit(1)


@contextmanager
def cancel_on_signals(cancel_event: threading.Event, logger: SyncLogger) -> Iterator[None]:
    """
    Map SIGINT (and SIGTERM where available) to the cancel event.

    Previous handlers are restored on exit.
    """
    signals = [signal.SIGINT]
    if hasattr(signal, "SIGTERM"):
        signals.append(signal.SIGTERM)

    def _handler(signum, frame) -> None:
        if not cancel_event.is_set():
            logger.warning("Cancellation requested, finishing current cycle...")
        cancel_event.set()

    previous = {sig: signal.signal(sig, _handler) for sig in signals}
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)


if __name__ == "__main__":
    cli()
