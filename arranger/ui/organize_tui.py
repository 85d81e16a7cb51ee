"""Terminal User Interface for the file arranger.

This module provides the OrganizeTUI class, a Rich-based console front end
that shows the analysis preview, asks for confirmation, renders progress
and reports the final result.

Example:
    from arranger.ui import OrganizeTUI

    tui = OrganizeTUI()
    tui.display_preview(preview)
    if tui.confirm_organize():
        ...
    tui.display_result(result, preview)
"""

from typing import Callable, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
)
from rich.prompt import Confirm
from rich.table import Table

from arranger.models import CategoryTable, OrganizationResult, Preview, ProgressEvent

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(size_bytes: int) -> str:
    """Convert bytes to a human-readable size.

    Divides by 1024 until the value is below 1024 or the largest unit is
    reached, printing at most two decimals.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Size string such as "0 B", "512 B", "1.5 KB" or "2.25 GB".
    """
    if size_bytes == 0:
        return "0 B"

    value = float(size_bytes)
    order = 0
    while value >= 1024 and order < len(SIZE_UNITS) - 1:
        order += 1
        value /= 1024

    number = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{number} {SIZE_UNITS[order]}"


class OrganizeTUI:
    """Rich-based console presentation for analyze and organize runs.

    Args:
        console: Optional Rich Console instance for output. Pass a Console
            writing to a StringIO to capture output in tests.

    Attributes:
        console: The Rich Console instance used for all output.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def display_preview(self, preview: Preview) -> None:
        """Show the analysis results: totals and a per-category breakdown.

        Args:
            preview: The Preview produced by the analyze phase.
        """
        if preview.has_error:
            self.display_error(preview.error_message or "")
            return

        header_text = (
            f"Folder: {preview.source_folder}\n"
            f"Total files: {preview.total_files:,}\n"
            f"Total size: {format_size(preview.total_size_bytes)}"
        )
        self.console.print(Panel(header_text, title="Preview Results", border_style="blue"))

        if not preview.category_summaries:
            self.console.print("[yellow]No files found to organize![/yellow]")
            return

        table = Table(title="Categories")
        table.add_column("", no_wrap=True)
        table.add_column("Category", style="cyan")
        table.add_column("Files", justify="right")
        table.add_column("Size", justify="right")

        for summary in preview.category_summaries:
            table.add_row(
                summary.icon,
                summary.category_name,
                f"{summary.file_count:,}",
                format_size(summary.total_size_bytes),
            )

        self.console.print(table)

    def confirm_organize(self) -> bool:
        """Ask whether to proceed; defaults to no."""
        return Confirm.ask("Proceed with organization?", default=False, console=self.console)

    def create_progress_callback(
        self, description: str
    ) -> Tuple[Progress, Callable[[ProgressEvent], None]]:
        """Create a progress bar and a ProgressEvent listener that drives it.

        The caller owns the Progress lifecycle and must use it as a context
        manager around the phase being tracked. The total is taken from each
        event, since it is not known before analysis lists the folder.

        Args:
            description: Label shown before the bar.

        Returns:
            Tuple of (Progress, callback). Register the callback as a progress
            listener on the EventChannel.

        Example:
            progress, callback = tui.create_progress_callback("Organizing")
            organizer.events.add_progress_listener(callback)
            with progress:
                organizer.organize(preview)
            organizer.events.remove_progress_listener(callback)
        """
        progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TextColumn("[dim]{task.fields[current_file]}"),
            console=self.console,
        )
        task_id = progress.add_task(description, total=None, current_file="")

        def callback(event: ProgressEvent) -> None:
            progress.update(
                task_id,
                completed=event.processed_count,
                total=event.total_count,
                current_file=event.current_file,
            )

        return progress, callback

    def display_result(self, result: OrganizationResult, preview: Preview) -> None:
        """Show the outcome of the organize phase.

        Args:
            result: The OrganizationResult to display.
            preview: The Preview that was organized, for the folder listing.
        """
        if not result.success:
            text = f"Error: {result.error_message}"
            if result.total_files_organized:
                text += (
                    f"\n\n{result.total_files_organized:,} files were moved before the error "
                    "and remain in their category folders."
                )
            self.console.print(Panel(text, title="Organization Failed", border_style="red"))
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Files organized", f"{result.total_files_organized:,}")
        table.add_row("Categories", f"{result.categories_created:,}")
        table.add_row("Completed at", result.completed_at.strftime("%H:%M:%S"))

        self.console.print(Panel(table, title="Organization Complete!", border_style="green"))

        self.console.print("Files have been organized into folders:")
        for summary in preview.category_summaries:
            if summary.file_count > 0:
                self.console.print(
                    f"   {summary.icon} {summary.category_name}/ - {summary.file_count} files"
                )

    def display_categories(self, categories: CategoryTable) -> None:
        """Show the active category table in priority order."""
        table = Table(title="Categories")
        table.add_column("#", justify="right", style="cyan", width=3)
        table.add_column("", no_wrap=True)
        table.add_column("Category", style="white")
        table.add_column("Folder", style="magenta")
        table.add_column("Extensions", style="dim")

        for idx, category in enumerate(categories, start=1):
            extensions = " ".join(sorted(category.extensions)) or "(everything else)"
            table.add_row(str(idx), category.icon, category.name, category.folder_name, extensions)

        self.console.print(table)

    def display_log(self, message: str) -> None:
        """Print a log message emitted by the core."""
        self.console.print(f"[dim]{message}[/dim]")

    def display_error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {message}")
