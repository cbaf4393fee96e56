"""
Console output with Rich components.
"""

from typing import IO, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from ..config.settings import Settings
from ..core import RunResult, RunState


class GreenleeksConsole:
    """User-facing output for Greenleeks runs."""

    def __init__(self, file: Optional[IO[str]] = None):
        self.styles = {
            "title": "bold blue",
            "success": "bold green",
            "warning": "bold yellow",
            "error": "bold red",
            "info": "blue",
            "muted": "dim",
            "commit_hash": "dim cyan",
        }
        self.theme = Theme(self.styles)
        self.console = Console(theme=self.theme, file=file)

    def print_success(self, message: str) -> None:
        self.console.print(f"[success]✓[/success] {message}")

    def print_warning(self, message: str) -> None:
        self.console.print(f"[warning]⚠[/warning] {message}")

    def print_error(self, message: str) -> None:
        self.console.print(f"[error]✗[/error] {message}")

    def print_info(self, message: str) -> None:
        self.console.print(f"[info]ℹ[/info] {message}")

    def show_run_summary(self, result: RunResult) -> None:
        """Print a table describing what the run did."""
        outcome = {
            RunState.ALREADY_TRACKED: "[muted]already under git control[/muted]",
            RunState.DONE: "[success]initialized and committed[/success]",
        }.get(result.final_state, result.final_state.value)

        table = Table(title="Greenleeks", box=box.SIMPLE_HEAD, show_header=False)
        table.add_column("Key", style="bold")
        table.add_column("Value")
        table.add_row("Root", escape(str(result.root)))
        table.add_row("Outcome", outcome)
        if result.file_count is not None:
            table.add_row("Files", str(result.file_count))
        if result.author is not None:
            table.add_row("Author", escape(str(result.author)))
        if result.commit_sha:
            table.add_row("Commit", f"[commit_hash]{result.commit_sha[:8]}[/commit_hash]")

        self.console.print(table)

    def show_settings(self, settings: Settings) -> None:
        """Print the resolved settings."""
        table = Table(title="Configuration", box=box.ROUNDED)
        table.add_column("Setting", style="bold")
        table.add_column("Value", style="cyan")

        for key, value in settings.model_dump(mode="json").items():
            table.add_row(key, escape(str(value)))

        self.console.print(table)
