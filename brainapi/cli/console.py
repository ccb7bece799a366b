"""Console output for the CLI.

Wraps rich so every command prints errors, tables, and status lines the same way.
"""

from rich.console import Console as RichConsole
from rich.table import Table

from brainapi.domain.dataset.model.aggregate import GroupCount


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)

    def print(self, *args, **kwargs) -> None:
        self._console.print(*args, **kwargs)

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def group_counts(self, field: str, items: list[GroupCount]) -> None:
        """Render grouped counts as a two-column table, largest first."""
        table = Table(title=f"Records by {field}")
        table.add_column(field.capitalize(), style="cyan")
        table.add_column("Count", justify="right")
        for item in sorted(items, key=lambda i: i.count, reverse=True):
            table.add_row(item.label, str(item.count))
        self._console.print(table)


_console: Console | None = None


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console()
    return _console
