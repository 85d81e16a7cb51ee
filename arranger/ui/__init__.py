"""User interface package for the file arranger."""

from .organize_tui import OrganizeTUI, format_size

__all__ = ["OrganizeTUI", "format_size"]
