"""File operations package for the file arranger.

This package provides the FileOperations class for the organize phase,
including category folder creation, file moves and duplicate-name
resolution.

Example:
    >>> from arranger.operations import FileOperations
    >>> ops = FileOperations()
    >>> result = ops.organize(preview)
    >>> print(f"Moved: {result.total_files_organized}, Categories: {result.categories_created}")
"""

from .file_operations import FileOperations, group_by_category, unique_path

__all__ = ["FileOperations", "group_by_category", "unique_path"]
