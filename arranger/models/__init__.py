"""
Models package for the file arranger.

This package provides convenient imports for all data models:
- Category, CategoryTable: Category definitions and the validated table
- FailureKind: Enum for phase failure categories
- CategorizedFile, CategorySummary, Preview: Analyze phase output
- OrganizedFileRecord, OrganizationResult: Organize phase output
- ProgressEvent: Progress notification
- ArrangerError, InvalidConfigurationError: Exceptions raised to callers
"""

from .category import DEFAULT_CATEGORIES, Category, CategoryTable
from .data_models import (
    CategorizedFile,
    CategorySummary,
    OrganizationResult,
    OrganizedFileRecord,
    Preview,
    ProgressEvent,
)
from .errors import ArrangerError, InvalidConfigurationError
from .failure_kind import FailureKind

__all__ = [
    "DEFAULT_CATEGORIES",
    "Category",
    "CategoryTable",
    "CategorizedFile",
    "CategorySummary",
    "OrganizationResult",
    "OrganizedFileRecord",
    "Preview",
    "ProgressEvent",
    "ArrangerError",
    "InvalidConfigurationError",
    "FailureKind",
]
