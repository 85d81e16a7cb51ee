"""Arranger - Folder Organization Tool.

A Python application that sorts the files of a single folder into
per-category subfolders by file extension, with a preview phase before
any file is moved.
"""

__version__ = "1.0.0"

from .models import (
    Category,
    CategoryTable,
    CategorizedFile,
    CategorySummary,
    FailureKind,
    InvalidConfigurationError,
    OrganizationResult,
    OrganizedFileRecord,
    Preview,
    ProgressEvent,
)
from .orchestration import FileOrganizer

__all__ = [
    "__version__",
    "Category",
    "CategoryTable",
    "CategorizedFile",
    "CategorySummary",
    "FailureKind",
    "FileOrganizer",
    "InvalidConfigurationError",
    "OrganizationResult",
    "OrganizedFileRecord",
    "Preview",
    "ProgressEvent",
]

