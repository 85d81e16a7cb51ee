"""
File operations module for the file arranger.

This module contains the FileOperations class, which consumes a Preview and
moves each file into its category subfolder, and unique_path, the
collision-resolution strategy used when a target name is already taken.
"""

import logging
import time
from pathlib import Path
from typing import Dict, List, Optional

from arranger.events import EventChannel
from arranger.models import (
    CategorizedFile,
    Category,
    FailureKind,
    InvalidConfigurationError,
    OrganizationResult,
    OrganizedFileRecord,
    Preview,
    ProgressEvent,
)

# Configure module logger
logger = logging.getLogger(__name__)

ORGANIZING_STAGE = "Organizing"


def unique_path(path: Path) -> Path:
    """
    Find a free sibling path by inserting " (n)" before the extension.

    Tries n = 1, 2, 3, ... and returns the first candidate that does not exist.
    The check is not atomic; a concurrent writer could take the name between
    this call and the move.

    Parameters:
        path (Path): The taken target path, e.g. ``Images/photo.jpg``.

    Returns:
        Path: e.g. ``Images/photo (1).jpg``.
    """
    counter = 1
    while True:
        candidate = path.with_name(f"{path.stem} ({counter}){path.suffix}")
        if not candidate.exists():
            return candidate
        counter += 1


class FileOperations:
    """
    Moves the files listed in a Preview into per-category subfolders.

    Files are grouped by category in first-seen order. Each group's folder
    is created under the Preview's source folder when missing, then each file
    is renamed into it. There is no rollback: if a move fails, files moved
    before the failure stay where they are.
    """

    def __init__(self, events: Optional[EventChannel] = None, progress_delay: float = 0.0) -> None:
        """
        Create a FileOperations instance.

        Parameters:
            events (EventChannel): Receives "Organizing" progress events and log messages.
            progress_delay (float): Seconds to pause after each progress event.

        Raises:
            InvalidConfigurationError: If progress_delay is negative.
        """
        if progress_delay < 0:
            raise InvalidConfigurationError(
                f"progress_delay must not be negative, got {progress_delay}"
            )
        self.events = events if events is not None else EventChannel()
        self.progress_delay = progress_delay

    def organize(self, preview: Preview) -> OrganizationResult:
        """
        Move every file of a Preview into its category folder.

        An errored Preview short-circuits into a failed result carrying the same
        message, without touching the filesystem. An OSError during the move
        phase stops the run and is reported on the result; it is not raised.

        Parameters:
            preview (Preview): Output of the analyze phase for the same folder.

        Returns:
            OrganizationResult: Success flag, moved-file records in move order and counts.
        """
        if preview.has_error:
            return OrganizationResult(
                success=False,
                error_message=preview.error_message,
                failure_kind=preview.failure_kind,
            )

        self.events.emit_log(f"Starting organization of {preview.total_files} files...")

        records: List[OrganizedFileRecord] = []

        try:
            for category, files in group_by_category(preview.categorized_files).items():
                destination = self._ensure_category_folder(preview.source_folder, category)

                for categorized_file in files:
                    record = self._move_file(categorized_file, destination)
                    records.append(record)

                    self.events.emit_progress(
                        ProgressEvent(
                            current_file=categorized_file.file_name,
                            processed_count=len(records),
                            total_count=preview.total_files,
                            stage=ORGANIZING_STAGE,
                        )
                    )
                    if self.progress_delay:
                        time.sleep(self.progress_delay)

        except OSError as e:
            error_msg = str(e)
            logger.warning(f"Organization stopped after {len(records)} files: {error_msg}")
            self.events.emit_log(f"Error during organization: {error_msg}")
            return OrganizationResult(
                success=False,
                error_message=error_msg,
                failure_kind=FailureKind.ORGANIZE_FAILURE,
                total_files_organized=len(records),
                organized_files=tuple(records),
            )

        categories_created = len(preview.category_summaries)
        self.events.emit_log(
            f"Organization complete! {len(records)} files organized "
            f"into {categories_created} categories"
        )

        return OrganizationResult(
            success=True,
            total_files_organized=len(records),
            categories_created=categories_created,
            organized_files=tuple(records),
        )

    def _ensure_category_folder(self, source_folder: Path, category: Category) -> Path:
        """
        Create the category's subfolder when missing and return its path.

        A pre-existing folder is reused. Only newly created folders are logged.
        """
        destination = source_folder / category.folder_name

        if not destination.is_dir():
            destination.mkdir(exist_ok=True)
            self.events.emit_log(f"Created folder: {category.folder_name}")

        return destination

    def _move_file(self, categorized_file: CategorizedFile, destination: Path) -> OrganizedFileRecord:
        """
        Rename one file into the destination folder, resolving name collisions.

        The move is a rename on the same filesystem, never a copy and delete;
        moving across devices fails with OSError.
        """
        target = destination / categorized_file.file_name

        if target.exists():
            target = unique_path(target)

        categorized_file.original_path.rename(target)
        logger.info(f"Moved: {categorized_file.original_path} -> {target}")

        return OrganizedFileRecord(
            original_path=categorized_file.original_path,
            new_path=target,
            category=categorized_file.category.name,
            size_bytes=categorized_file.size_bytes,
        )


def group_by_category(files) -> Dict[Category, List[CategorizedFile]]:
    """Group categorized files by category, preserving first-seen order."""
    groups: Dict[Category, List[CategorizedFile]] = {}
    for categorized_file in files:
        groups.setdefault(categorized_file.category, []).append(categorized_file)
    return groups
