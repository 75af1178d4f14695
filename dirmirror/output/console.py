# dirmirror Console Output
# Rich-based rendering of planned tasks and cycle results

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dirmirror.sync.actions import ActionType, SyncTask
from dirmirror.sync.engine import CycleResult

_ACTION_STYLES: dict[ActionType, tuple[str, str]] = {
    ActionType.CREATE_DIRECTORY: ("green", "+ dir"),
    ActionType.COPY_FILE: ("green", "+ file"),
    ActionType.UPDATE_FILE: ("yellow", "~ file"),
    ActionType.DELETE_FILE: ("red", "× file"),
    ActionType.DELETE_DIRECTORY: ("red", "× dir"),
}


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for planned tasks and cycle summaries.
    """

    def __init__(self, console: RichConsole | None = None):
        """
        Initialize console.

        Args:
            console: Existing Rich console to write to.
        """
        self._console = console or RichConsole()

    def print_plan(self, tasks: list[SyncTask], *, dry_run: bool = False) -> None:
        """Display planned tasks in a table."""
        if not tasks:
            self._console.print("[green]Replica is up to date[/green]")
            return

        title = "Planned Changes (dry-run)" if dry_run else "Changes to Apply"
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Action")
        table.add_column("Path", style="cyan")

        for index, task in enumerate(tasks, start=1):
            color, label = _ACTION_STYLES[task.action]
            table.add_row(str(index), f"[{color}]{label}[/{color}]", escape(str(task.destination_path)))

        self._console.print()
        self._console.print(table)
        self._console.print()

    def print_cycle_result(self, result: CycleResult) -> None:
        """Display a summary panel for one cycle."""
        if result.error:
            status = "[red]✗ Synchronization failed[/red]"
        elif result.dry_run:
            status = "[blue]Dry run - nothing applied[/blue]"
        elif result.success:
            status = "[green]✓ Synchronization completed successfully[/green]"
        else:
            status = "[red]✗ Synchronization completed with errors[/red]"

        lines = [
            status,
            "",
            "[bold]Summary:[/bold]",
            f"  • Planned: [cyan]{len(result.tasks)}[/cyan]",
            f"  • Applied: [green]{result.executed}[/green]",
            f"  • Failed: [red]{result.failed}[/red]",
        ]

        if result.error:
            lines += ["", f"[red]Error:[/red] {escape(result.error)}"]

        for task_result in result.results:
            if not task_result.success:
                lines.append(f"  • {escape(str(task_result.task.destination_path))}: {escape(task_result.error or '')}")

        border = "red" if result.error or not result.success else "green"
        self._console.print(Panel("\n".join(lines), title="Sync Result", border_style=border))
