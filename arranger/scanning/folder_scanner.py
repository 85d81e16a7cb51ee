"""Folder analysis for the file arranger.

This module provides the FolderScanner class, which lists the direct
children of a folder, classifies each eligible file and builds the Preview
consumed by the organize phase. Scanning never modifies the filesystem.

Example:
    >>> from arranger.scanning import FolderScanner
    >>> scanner = FolderScanner()
    >>> preview = scanner.analyze(Path("/home/me/Downloads"))
    >>> for summary in preview.category_summaries:
    ...     print(f"{summary.category_name}: {summary.file_count} files")
"""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from arranger.classification import Classifier
from arranger.events import EventChannel
from arranger.models import (
    CategorizedFile,
    CategorySummary,
    FailureKind,
    InvalidConfigurationError,
    Preview,
    ProgressEvent,
)

logger = logging.getLogger(__name__)

# Names skipped during analysis, compared case-insensitively
SYSTEM_FILE_NAMES = frozenset({"desktop.ini", "thumbs.db", ".ds_store"})

ANALYZING_STAGE = "Analyzing"


def is_system_file(file_name: str) -> bool:
    """Check whether a file is a system or hidden file that must be skipped.

    Args:
        file_name: Bare file name (no directory).

    Returns:
        True for desktop.ini, thumbs.db, .DS_Store (any case) and any
        name starting with a dot.
    """
    lowered = file_name.lower()
    return lowered in SYSTEM_FILE_NAMES or lowered.startswith(".")


class FolderScanner:
    """Builds a Preview of how a folder's files would be organized.

    Only direct children of the folder are considered; subdirectories are
    ignored and never descended into. Every eligible file produces one
    "Analyzing" progress event on the event channel.

    Attributes:
        classifier: Classifier used to assign categories.
        events: EventChannel receiving progress and log notifications.
        progress_delay: Seconds to pause after each progress event.

    Example:
        >>> scanner = FolderScanner(progress_delay=0.005)
        >>> preview = scanner.analyze(Path("/data/inbox"))
        >>> if preview.has_error:
        ...     print(preview.error_message)
    """

    def __init__(
        self,
        classifier: Optional[Classifier] = None,
        events: Optional[EventChannel] = None,
        progress_delay: float = 0.0,
    ) -> None:
        """Initialize the FolderScanner.

        Args:
            classifier: Optional Classifier. If not provided, one using the
                default category table is created.
            events: Optional EventChannel. If not provided, a private
                channel with no listeners is used.
            progress_delay: Pause in seconds after each progress event.

        Raises:
            InvalidConfigurationError: If progress_delay is negative.
        """
        if progress_delay < 0:
            raise InvalidConfigurationError(
                f"progress_delay must not be negative, got {progress_delay}"
            )
        self.classifier = classifier if classifier is not None else Classifier()
        self.events = events if events is not None else EventChannel()
        self.progress_delay = progress_delay

    def analyze(self, folder_path: Path) -> Preview:
        """Classify every eligible file in a folder without moving anything.

        Failures never raise: a missing folder, an I/O error while listing
        or reading files, or an unrepresentable modification time produces
        a Preview whose error_message is set and whose file list is empty.

        Args:
            folder_path: Folder whose direct children are analyzed.

        Returns:
            Preview with categorized files in directory-listing order and
            category summaries sorted by descending file count.
        """
        folder_path = Path(folder_path)

        try:
            folder_exists = folder_path.is_dir()
        except OSError as e:
            return self._scan_failure(folder_path, e)

        if not folder_exists:
            message = f"Folder not found: {folder_path}"
            logger.warning(message)
            return Preview(
                source_folder=folder_path,
                error_message=message,
                failure_kind=FailureKind.NOT_FOUND,
            )

        self.events.emit_log(f"Analyzing folder: {folder_path}")

        try:
            files = self._list_eligible_files(folder_path)
            categorized_files = self._categorize_files(files)
        except (OSError, ValueError, OverflowError) as e:
            # ValueError/OverflowError: modification time outside datetime range
            return self._scan_failure(folder_path, e)

        preview = Preview(
            source_folder=folder_path,
            total_files=len(categorized_files),
            total_size_bytes=sum(f.size_bytes for f in categorized_files),
            categorized_files=tuple(categorized_files),
            category_summaries=tuple(summarize_categories(categorized_files)),
        )

        self.events.emit_log(f"Analysis complete: {preview.total_files} files found")
        return preview

    def _scan_failure(self, folder_path: Path, error: Exception) -> Preview:
        """Convert a scanning error into an errored Preview with no files."""
        logger.warning(f"Error analyzing folder {folder_path}: {error}")
        self.events.emit_log(f"Error: {error}")
        return Preview(
            source_folder=folder_path,
            error_message=f"Error analyzing folder: {error}",
            failure_kind=FailureKind.SCAN_FAILURE,
        )

    def _list_eligible_files(self, folder_path: Path) -> List[Path]:
        """List regular files directly inside a folder, skipping system files."""
        eligible: List[Path] = []
        for child in folder_path.iterdir():
            if not child.is_file():
                continue
            if is_system_file(child.name):
                logger.info(f"Skipped system file: {child.name}")
                continue
            eligible.append(child)
        return eligible

    def _categorize_files(self, files: List[Path]) -> List[CategorizedFile]:
        """Stat and classify each file, emitting one progress event per file."""
        total = len(files)
        categorized: List[CategorizedFile] = []

        for index, file_path in enumerate(files, start=1):
            stat_result = file_path.stat()
            categorized_file = CategorizedFile(
                original_path=file_path,
                file_name=file_path.name,
                category=self.classifier.classify(file_path),
                size_bytes=stat_result.st_size,
                last_modified=datetime.fromtimestamp(stat_result.st_mtime),
            )
            categorized.append(categorized_file)

            self.events.emit_progress(
                ProgressEvent(
                    current_file=categorized_file.file_name,
                    processed_count=index,
                    total_count=total,
                    stage=ANALYZING_STAGE,
                )
            )
            if self.progress_delay:
                time.sleep(self.progress_delay)

        return categorized


def summarize_categories(files: List[CategorizedFile]) -> List[CategorySummary]:
    """Group files by category name and sort the groups by file count.

    The sort is stable, so groups with equal counts keep the order in which
    their category was first encountered.

    Args:
        files: Categorized files in analysis order.

    Returns:
        One CategorySummary per category present, descending by file count.
    """
    groups: Dict[str, List[CategorizedFile]] = {}
    for categorized_file in files:
        groups.setdefault(categorized_file.category.name, []).append(categorized_file)

    summaries = [
        CategorySummary(
            category_name=name,
            icon=members[0].category.icon,
            file_count=len(members),
            total_size_bytes=sum(f.size_bytes for f in members),
        )
        for name, members in groups.items()
    ]
    summaries.sort(key=lambda summary: summary.file_count, reverse=True)
    return summaries
