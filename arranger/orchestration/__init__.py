"""Workflow orchestration package for the file arranger.

This package contains:
- FileOrganizer: The two-phase analyze/organize API over one category table.
- OrganizeLogger: Structured run logs written to timestamped files.
- OrganizeOrchestrator: Interactive preview, confirm and organize workflow.
"""

from arranger.orchestration.file_organizer import FileOrganizer
from arranger.orchestration.organize_logger import OrganizeLogger
from arranger.orchestration.organize_orchestrator import OrganizeOrchestrator, OrganizeSummary

__all__ = ["FileOrganizer", "OrganizeLogger", "OrganizeOrchestrator", "OrganizeSummary"]
