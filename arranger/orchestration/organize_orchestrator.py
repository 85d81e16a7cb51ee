"""OrganizeOrchestrator for the interactive preview-confirm-organize workflow.

This module provides the OrganizeOrchestrator class that coordinates
FileOrganizer, OrganizeTUI and OrganizeLogger. It implements both a
read-only preview workflow and the full interactive organize workflow.

Example:
    from arranger.orchestration import OrganizeOrchestrator
    from pathlib import Path

    orchestrator = OrganizeOrchestrator(folder_path=Path("~/Downloads").expanduser())

    # Preview only
    preview = orchestrator.run_preview()

    # Interactive organize
    summary = orchestrator.run()
"""

import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from arranger.models import OrganizationResult, Preview
from arranger.orchestration.file_organizer import FileOrganizer
from arranger.orchestration.organize_logger import OrganizeLogger
from arranger.ui import OrganizeTUI

logger = logging.getLogger(__name__)


@dataclass
class OrganizeSummary:
    """Outcome of one interactive run returned by OrganizeOrchestrator.run()."""
    preview: Preview                               # Analysis result
    result: Optional[OrganizationResult] = None    # None if organize never ran
    cancelled: bool = False                        # User declined the confirmation
    duration_seconds: float = 0.0

    @property
    def success(self) -> bool:
        """True unless analysis or organization failed."""
        if self.preview.has_error:
            return False
        return self.result is None or self.result.success


class OrganizeOrchestrator:
    """Orchestrates the preview and organize workflows for one folder.

    The orchestrator exposes two primary methods:
    - run_preview(): Read-only analysis that displays the category breakdown
    - run(): Analysis, confirmation, organization with a progress bar,
      result display and an optional run log

    Attributes:
        folder_path: Folder whose files are organized.
        organizer: FileOrganizer performing both phases.
        log_file_path: Optional path for the run log.
        assume_yes: Skip the confirmation prompt.
        verbose: Echo core log messages to the console.
    """

    def __init__(
        self,
        folder_path: Path,
        organizer: Optional[FileOrganizer] = None,
        tui: Optional[OrganizeTUI] = None,
        log_file_path: Optional[Path] = None,
        assume_yes: bool = False,
        verbose: bool = False,
    ) -> None:
        """Initialize the OrganizeOrchestrator.

        Args:
            folder_path: Folder whose direct children are organized.
            organizer: Optional FileOrganizer; defaults to the shipped categories.
            tui: Optional OrganizeTUI; pass one with a captured Console in tests.
            log_file_path: If given, a run log is written to this path.
            assume_yes: If True, organize without asking for confirmation.
            verbose: If True, core log messages are printed as they occur.
        """
        self.folder_path = Path(folder_path)
        self.organizer = organizer if organizer is not None else FileOrganizer()
        self.log_file_path = log_file_path
        self.assume_yes = assume_yes
        self.verbose = verbose
        self._tui = tui if tui is not None else OrganizeTUI()

    @property
    def tui(self) -> OrganizeTUI:
        return self._tui

    def run_preview(self) -> Preview:
        """Analyze the folder and display the preview. Moves nothing.

        Returns:
            The Preview produced by the analyze phase.
        """
        preview = self._execute_analysis()
        self._tui.display_preview(preview)
        return preview

    def run(self) -> OrganizeSummary:
        """Execute the interactive organize workflow.

        1. Analyze - classify files and display the preview
        2. Confirm - ask the user unless assume_yes is set
        3. Organize - move files with progress tracking
        4. Summary - display the result and write the run log

        Returns:
            OrganizeSummary describing what happened.

        Raises:
            KeyboardInterrupt: If the user interrupts the confirmation prompt.
        """
        start_time = time.time()

        run_log = self._open_run_log()
        if run_log is None:
            return self._execute_workflow(None, start_time)

        with run_log:
            return self._execute_workflow(run_log, start_time)

    def _execute_workflow(self, run_log: Optional[OrganizeLogger], start_time: float) -> OrganizeSummary:
        if run_log is not None:
            run_log.log_header(self.folder_path)

        preview = self._execute_analysis()
        self._tui.display_preview(preview)

        if run_log is not None:
            run_log.log_analysis(preview)

        if preview.has_error or preview.total_files == 0:
            return self._finish(OrganizeSummary(preview=preview), run_log, start_time)

        if not self.assume_yes and not self._tui.confirm_organize():
            self._tui.console.print("[yellow]Organization cancelled.[/yellow]")
            if run_log is not None:
                run_log.log_cancelled()
            return self._finish(OrganizeSummary(preview=preview, cancelled=True), run_log, start_time)

        result = self._execute_organize(preview)
        self._tui.display_result(result, preview)

        if run_log is not None:
            run_log.log_organize_phase(result)

        return self._finish(OrganizeSummary(preview=preview, result=result), run_log, start_time)

    def _execute_analysis(self) -> Preview:
        return self._with_progress("Analyzing", lambda: self.organizer.analyze(self.folder_path))

    def _execute_organize(self, preview: Preview) -> OrganizationResult:
        return self._with_progress("Organizing", lambda: self.organizer.organize(preview))

    def _with_progress(self, description: str, phase):
        """Run one phase with a progress bar and optional log echo attached."""
        events = self.organizer.events
        progress, callback = self._tui.create_progress_callback(description)

        events.add_progress_listener(callback)
        if self.verbose:
            events.add_log_listener(self._tui.display_log)
        try:
            with progress:
                return phase()
        finally:
            events.remove_progress_listener(callback)
            if self.verbose:
                events.remove_log_listener(self._tui.display_log)

    def _open_run_log(self) -> Optional[OrganizeLogger]:
        """Create the run log if one was requested; failures only warn."""
        if self.log_file_path is None:
            return None
        try:
            return OrganizeLogger(log_file_path=self.log_file_path)
        except OSError as e:
            logger.warning(f"Could not create log file: {e}")
            print(f"Warning: Could not create log file: {e}", file=sys.stderr)
            return None

    def _finish(
        self,
        summary: OrganizeSummary,
        run_log: Optional[OrganizeLogger],
        start_time: float,
    ) -> OrganizeSummary:
        summary.duration_seconds = time.time() - start_time
        if run_log is not None:
            run_log.log_summary(summary.result, summary.duration_seconds)
            if self.verbose:
                self._tui.console.print(f"[dim]Log file: {run_log.get_log_path()}[/dim]")
        return summary
