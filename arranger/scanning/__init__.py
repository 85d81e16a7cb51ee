"""Folder scanning package for the file arranger.

This package provides the analyze phase:

- FolderScanner: Lists the direct children of a folder, skips system and
  hidden files, classifies each file and builds a Preview.
- is_system_file: The system/hidden file filter used by the scanner.
- summarize_categories: Aggregates categorized files into CategorySummary rows.

Example:
    >>> from arranger.scanning import FolderScanner
    >>> from pathlib import Path
    >>>
    >>> preview = FolderScanner().analyze(Path("/data/inbox"))
    >>> print(preview.total_files, preview.total_size_bytes)
"""

from .folder_scanner import FolderScanner, is_system_file, summarize_categories

__all__ = ["FolderScanner", "is_system_file", "summarize_categories"]
