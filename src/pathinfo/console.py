"""Console output for the command line."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathinfo.settings import SETTING_KEYS, Settings
from pathinfo.types import PathHandle


class Reporter:
    """Rich console output for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            console: Console to print to. Defaults to a new stdout console.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_handle(self, handle: PathHandle) -> None:
        """Show a resolved handle as a table.

        Args:
            handle: Handle to display.
        """
        table = Table(show_header=True, header_style="bold")
        table.add_column("Type")
        table.add_column("FullName")
        table.add_column("Exists")
        table.add_row(
            type(handle).__name__,
            handle.full_name,
            "[green]True[/green]" if handle.exists else "[dim]False[/dim]",
        )
        self.console.print(table)

    def show_settings(self, settings: Settings, location: str) -> None:
        """Show the effective settings.

        Args:
            settings: Loaded settings.
            location: Settings file path.
        """
        self.console.print("\n[bold]Configuration[/bold]")
        self.console.print(f"  Settings file: {location}")
        for key, field in SETTING_KEYS.items():
            self.console.print(f"  {key}: {str(getattr(settings, field)).lower()}")
