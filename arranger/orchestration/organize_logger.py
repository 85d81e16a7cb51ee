"""OrganizeLogger for writing run logs in a sectioned text format.

This module provides the OrganizeLogger class that records one arranger run
(header, analysis phase, organize phase and summary) to a log file.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from arranger.models import OrganizationResult, OrganizedFileRecord, Preview


class OrganizeLogger:
    """Logger for arranger runs with structured output format.

    Usage:
        with OrganizeLogger() as run_log:
            run_log.log_header(source_folder)
            run_log.log_analysis(preview)
            run_log.log_organize_phase(result)
            run_log.log_summary(result, duration)

    Attributes:
        SEPARATOR: The 65-character separator line used between sections.
    """

    SEPARATOR = "=" * 65

    def __init__(self, log_file_path: Optional[Path] = None) -> None:
        """Initialize the OrganizeLogger.

        Args:
            log_file_path: Optional path for the log file. If not provided,
                generates a timestamped filename in the current directory.

        Raises:
            OSError: If the log file path is not writable.
        """
        self._start_timestamp = datetime.now()
        self._file_handle: Optional[TextIO] = None

        if log_file_path is None:
            timestamp_str = self._start_timestamp.strftime("%Y-%m-%d_%H-%M-%S")
            self._log_file_path = Path.cwd() / f"organize_log_{timestamp_str}.log"
        else:
            self._log_file_path = Path(log_file_path)

        self._validate_path()

    def _validate_path(self) -> None:
        """Validate that the log file's parent directory is writable.

        Raises:
            OSError: If the parent directory doesn't exist or is not writable.
        """
        parent = self._log_file_path.parent
        if not parent.exists():
            raise OSError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise OSError(f"Parent path is not a directory: {parent}")
        try:
            test_file = parent / f".arranger_test_{id(self)}"
            test_file.touch()
            test_file.unlink()
        except PermissionError:
            raise OSError(f"Permission denied: cannot write to {parent}")

    def __enter__(self) -> "OrganizeLogger":
        """Open the log file for writing.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        try:
            self._file_handle = open(self._log_file_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open log file for writing: {e}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing log file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    def get_log_path(self) -> Path:
        return self._log_file_path

    def log_header(self, source_folder: Path) -> None:
        """Write the title, timestamp and source folder."""
        self._write_separator()
        self._write_line("Arranger - Organize Log")
        self._write_separator()
        self._write_line(f"Timestamp: {self._format_timestamp(self._start_timestamp)}")
        self._write_line(f"Source Folder: {source_folder}")
        self._write_line("")

    def log_analysis(self, preview: Preview) -> None:
        """Write the analysis phase section.

        Args:
            preview: The Preview produced by the analyze phase.
        """
        self._write_separator()
        self._write_line("ANALYSIS PHASE")
        self._write_separator()

        if preview.has_error:
            self._write_line(f"Error: {preview.error_message}")
            self._write_line("")
            return

        self._write_line(f"Total files: {preview.total_files:,}")
        self._write_line(f"Total size: {preview.total_size_bytes:,} bytes")
        self._write_line("")

        if preview.category_summaries:
            self._write_line("Categories:")
        for summary in preview.category_summaries:
            self._write_line(
                f"- {summary.category_name}: {summary.file_count} files "
                f"({summary.total_size_bytes:,} bytes)",
                indent=2,
            )
        self._write_line("")

    def log_organize_phase(self, result: OrganizationResult) -> None:
        """Write one line per moved file, followed by any error.

        Args:
            result: The OrganizationResult of the organize phase.
        """
        self._write_separator()
        self._write_line("ORGANIZE PHASE")
        self._write_separator()

        for record in result.organized_files:
            self._write_line(self._format_record(record), indent=2)

        if result.error_message:
            self._write_line(f"! Error: {result.error_message}", indent=2)

        self._write_line(f"[{self._format_timestamp(result.completed_at)}] Completed")
        self._write_line("")

    def log_cancelled(self) -> None:
        self._write_line("Organization cancelled by user.")
        self._write_line("")

    def log_summary(self, result: Optional[OrganizationResult], duration_seconds: float) -> None:
        """Write the summary section.

        Args:
            result: The OrganizationResult, or None if organize never ran.
            duration_seconds: Duration of the whole run.
        """
        self._write_separator()
        self._write_line("SUMMARY")
        self._write_separator()

        if result is None:
            self._write_line("Status: NOT RUN")
        else:
            self._write_line(f"Status: {'SUCCESS' if result.success else 'FAILED'}")
            self._write_line(f"Files organized: {result.total_files_organized:,}")
            self._write_line(f"Categories: {result.categories_created}")
            if result.error_message:
                self._write_line(f"Error: {result.error_message}")

        self._write_line(f"Duration: {self._format_duration(duration_seconds)}")
        self._write_line("")
        self._write_line(f"Log file: {self._log_file_path}")
        self._write_separator()

    def _format_record(self, record: OrganizedFileRecord) -> str:
        return f"{record.original_path.name} -> {record.category}/{record.new_path.name}"

    def _format_duration(self, seconds: float) -> str:
        """Format duration like "45s", "5m 23s" or "1h 5m 30s"."""
        total_seconds = int(seconds)

        if total_seconds < 60:
            return f"{total_seconds}s"

        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        secs = total_seconds % 60

        if hours > 0:
            return f"{hours}h {minutes}m {secs}s"
        return f"{minutes}m {secs}s"

    def _format_timestamp(self, dt: datetime) -> str:
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_separator(self) -> None:
        self._write_line(self.SEPARATOR)

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the log file with optional indentation."""
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed log file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)
