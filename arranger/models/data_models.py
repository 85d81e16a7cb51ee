"""
Core data models for the file arranger.

This module contains the following dataclasses:
- CategorizedFile: A file inspected during analysis and its assigned category
- CategorySummary: Aggregated file count and size for one category
- Preview: The result of the analyze phase, consumed by the organize phase
- OrganizedFileRecord: One successfully moved file
- OrganizationResult: The result of the organize phase
- ProgressEvent: A progress notification emitted during either phase

All models are frozen; sequences are stored as tuples so a Preview can be
passed safely from the analyze phase to the organize phase.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from .category import Category
from .failure_kind import FailureKind


@dataclass(frozen=True)
class CategorizedFile:
    """Snapshot of a file's metadata taken at analysis time."""
    original_path: Path               # Full path in the source folder
    file_name: str                    # Name including extension
    category: Category                # Assigned category (shared with the table)
    size_bytes: int                   # Size at inspection time
    last_modified: datetime           # Modification time at inspection time


@dataclass(frozen=True)
class CategorySummary:
    """Aggregated view of all files assigned to one category."""
    category_name: str
    icon: str
    file_count: int
    total_size_bytes: int


@dataclass(frozen=True)
class Preview:
    """Result of analyzing a folder; no files are touched to produce it."""
    source_folder: Path
    total_files: int = 0
    total_size_bytes: int = 0
    categorized_files: Tuple[CategorizedFile, ...] = ()
    category_summaries: Tuple[CategorySummary, ...] = ()   # Descending by file count
    error_message: Optional[str] = None
    failure_kind: Optional[FailureKind] = None

    @property
    def has_error(self) -> bool:
        return bool(self.error_message)


@dataclass(frozen=True)
class OrganizedFileRecord:
    """A file moved during the organize phase."""
    original_path: Path
    new_path: Path
    category: str                     # Category name
    size_bytes: int

    def __str__(self) -> str:
        return f"{self.original_path.name} → {self.category}"


@dataclass(frozen=True)
class OrganizationResult:
    """Result of the organize phase."""
    success: bool
    error_message: Optional[str] = None
    failure_kind: Optional[FailureKind] = None
    total_files_organized: int = 0
    categories_created: int = 0       # Categories that had files, not necessarily new folders
    organized_files: Tuple[OrganizedFileRecord, ...] = ()   # In move order
    completed_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class ProgressEvent:
    """Progress notification emitted once per processed file."""
    current_file: str                 # Name of the file just processed
    processed_count: int              # 1-based, cumulative within the phase
    total_count: int
    stage: str                        # "Analyzing" or "Organizing"

    @property
    def progress_percentage(self) -> float:
        if self.total_count <= 0:
            return 0.0
        return self.processed_count / self.total_count * 100

    def __str__(self) -> str:
        return (
            f"{self.stage}: {self.progress_percentage:.1f}% "
            f"({self.processed_count}/{self.total_count})"
        )
