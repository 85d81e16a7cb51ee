"""
FailureKind enum for the analyze and organize phases.

A failed Preview or OrganizationResult records which kind of failure
stopped the phase:
1. Not Found - The source folder does not exist (analyze only)
2. Scan Failure - An I/O error while listing or reading files during analyze
3. Organize Failure - An I/O error while creating a folder or moving a file
"""

from enum import Enum


class FailureKind(Enum):
    """Encodes the failure categories reported by each phase."""
    NOT_FOUND = "not_found"                # Source folder missing or not a directory
    SCAN_FAILURE = "scan_failure"          # Listing/stat error during analyze
    ORGANIZE_FAILURE = "organize_failure"  # mkdir/move error during organize
