"""
Arranger - CLI Interface.

A command-line interface for sorting the files of a folder into
per-category subfolders (Documents, Images, Videos, ...).

Usage Examples:
    # Preview how a folder would be organized (read-only)
    arranger preview ~/Downloads

    # Organize ~/Downloads, asking for confirmation first
    arranger organize

    # Organize a folder without prompting and write a run log
    arranger organize /path/to/folder --yes --log-file organize.log

    # List the categories and their extensions
    arranger categories
"""

import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from arranger.orchestration import FileOrganizer, OrganizeOrchestrator
from arranger.ui import OrganizeTUI

__version__ = "1.0.0"

# Initialize Typer app
app = typer.Typer(
    name="arranger",
    help="Arranger - Sort the files of a folder into category subfolders.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"Arranger v{__version__}")
        raise typer.Exit()


def default_folder() -> Path:
    """The folder organized when none is given: the user's Downloads."""
    return Path.home() / "Downloads"


def configure_logging(verbose: bool) -> None:
    """Route library log records through Rich; INFO when verbose.

    Core log messages are echoed by the TUI; their DEBUG mirror stays hidden.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def validate_delay(value: float) -> float:
    """
    Validate the progress delay is not negative.

    Raises:
        typer.BadParameter: If value is negative.
    """
    if value < 0:
        raise typer.BadParameter("Delay must not be negative")
    return value


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Arranger - Sort the files of a folder into category subfolders."""
    pass


@app.command()
def preview(
    folder: Path = typer.Argument(
        ...,
        help="Folder to analyze.",
        exists=False,  # Reported through the preview instead
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
) -> None:
    """
    Show how a folder would be organized without moving anything.
    """
    configure_logging(verbose)

    orchestrator = OrganizeOrchestrator(
        folder_path=folder,
        tui=OrganizeTUI(console=console),
        verbose=verbose,
    )

    try:
        result = orchestrator.run_preview()
    except KeyboardInterrupt:
        console.print("\n[yellow]Preview interrupted by user.[/yellow]")
        raise typer.Exit(130)

    if result.has_error:
        raise typer.Exit(1)


@app.command()
def organize(
    folder: Optional[Path] = typer.Argument(
        None,
        help="Folder to organize. Defaults to ~/Downloads.",
        exists=False,
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Organize without asking for confirmation.",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        "-l",
        help="Path for log file output.",
    ),
    delay: float = typer.Option(
        0.0,
        "--delay",
        help="Seconds to pause after each progress update.",
        callback=validate_delay,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
) -> None:
    """
    Analyze a folder, confirm, and move its files into category folders.

    1. Analyze: Classify every file by extension
    2. Confirm: Review the per-category breakdown
    3. Organize: Move files, renaming duplicates as "name (1).ext"
    4. Summary: Display results
    """
    configure_logging(verbose)

    folder = folder if folder is not None else default_folder()

    if folder.is_dir() and not os.access(folder, os.W_OK):
        console.print(f"[red]Error:[/red] Permission denied - cannot write to: {folder}")
        console.print("[dim]Tip: Use 'arranger preview' to inspect without write access.[/dim]")
        raise typer.Exit(1)

    orchestrator = OrganizeOrchestrator(
        folder_path=folder,
        organizer=FileOrganizer(progress_delay=delay),
        tui=OrganizeTUI(console=console),
        log_file_path=log_file,
        assume_yes=yes,
        verbose=verbose,
    )

    try:
        summary = orchestrator.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Organization interrupted by user.[/yellow]")
        raise typer.Exit(130)

    if log_file:
        console.print(f"\n[dim]Log written to: {log_file}[/dim]")

    if not summary.success:
        raise typer.Exit(1)


@app.command()
def categories() -> None:
    """
    List the categories and the extensions each one handles.
    """
    OrganizeTUI(console=console).display_categories(FileOrganizer().get_categories())


if __name__ == "__main__":
    app()
