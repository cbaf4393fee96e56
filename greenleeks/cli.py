"""
Command line interface using Typer with Rich output and Loguru logging.
"""

import sys
from pathlib import Path
from typing import Any, List, Optional

import typer
from loguru import logger
from pydantic import ValidationError

from .config.settings import LogFormat, Settings
from .core import Greenleeks
from .errors import GreenleeksError, LogSetupError
from .ui.console import GreenleeksConsole

TEXT_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

# Exception classes of the Click that Typer runs on, which may be its bundled copy.
click_exceptions = sys.modules[typer.BadParameter.__module__]

app = typer.Typer(
    name="greenleeks",
    help="Put a directory under git control with a single initial commit",
    add_completion=False,
    rich_markup_mode="rich",
)

console = GreenleeksConsole()


def verbosity_to_level(verbosity: int) -> str:
    """0 -> WARNING, 1 -> INFO, 2 and above -> DEBUG."""
    if verbosity <= 0:
        return "WARNING"
    if verbosity == 1:
        return "INFO"
    return "DEBUG"


def setup_logging(verbosity: int = 0, log_format: LogFormat = LogFormat.TEXT, sink: Any = None) -> int:
    """Replace Loguru's default handler with one matching the requested format."""
    logger.remove()
    sink = sink if sink is not None else sys.stderr
    level = verbosity_to_level(verbosity)

    try:
        if log_format == LogFormat.JSON:
            return logger.add(sink, level=level, serialize=True)
        return logger.add(sink, level=level, format=TEXT_FORMAT, colorize=None)
    except (TypeError, ValueError, OSError) as e:
        raise LogSetupError(f"failed to set up logging: {e}") from e


def _version_callback(value: bool) -> None:
    if value:
        from . import __version__
        console.console.print(f"[title]Greenleeks[/title] version [success]{__version__}[/success]")
        raise typer.Exit()


@app.command()
def run(
    log_format: Optional[LogFormat] = typer.Option(
        None, "--log-format",
        case_sensitive=False,
        help="Log format (default: text)"
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v",
        count=True,
        help="Show verbose debug information, each -v bumps log level"
    ),
    root_dir: Optional[Path] = typer.Option(
        None, "--root", "-r",
        help="Root directory (default: .)"
    ),
    max_files: Optional[int] = typer.Option(
        None, "--max-files",
        help="Maximum number of files allowed (default: 100)"
    ),
    gitconfig: Optional[str] = typer.Option(
        None, "--gitconfig",
        help="Path to the Git configuration file (default: ~/.gitconfig)"
    ),
    show_config: bool = typer.Option(
        False, "--show-config",
        help="Show the resolved configuration and exit"
    ),
    version: bool = typer.Option(
        False, "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information"
    ),
):
    """
    Initialize a git repository in a directory and commit its files.

    [bold blue]Examples:[/bold blue]

    [green]greenleeks[/green]                          # Current directory
    [green]greenleeks -r ~/notes -v[/green]            # Another directory, info logging
    [green]greenleeks --max-files 500[/green]          # Raise the safety limit
    [green]greenleeks --log-format json -vv[/green]    # Structured debug logs
    """
    try:
        settings = Settings.from_cli(
            root_dir=root_dir,
            max_files=max_files,
            gitconfig=gitconfig,
            log_format=log_format,
            verbosity=verbose or None,
        )
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

    setup_logging(settings.verbosity, settings.log_format)

    if show_config:
        console.show_settings(settings)
        return

    logger.debug(f"Running with {settings!r}")
    try:
        result = Greenleeks(settings).run()
    except GreenleeksError as e:
        logger.error(f"run failed: {e.describe()}")
        raise typer.Exit(1)

    console.show_run_summary(result)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI, returning the process exit code."""
    command = typer.main.get_command(app)
    try:
        exit_code = command.main(args=argv, prog_name="greenleeks", standalone_mode=False)
    except click_exceptions.ClickException as e:
        e.show()
        return 1
    except LogSetupError as e:
        console.print_error(str(e))
        return 1
    except (click_exceptions.Abort, KeyboardInterrupt):
        console.print_warning("Interrupted by user")
        return 130

    return exit_code or 0


if __name__ == "__main__":
    sys.exit(main())
