"""
Integration tests for the end-to-end analyze and organize workflow.

Tests cover:
- Two-phase round trip on a realistic folder
- Duplicate names across repeated runs
- Errored previews never reaching the filesystem
- Re-running on an already organized folder
"""

from pathlib import Path

import pytest

from arranger import FileOrganizer
from arranger.models import FailureKind


@pytest.mark.integration
class TestOrganizeWorkflow:
    """Full analyze -> organize runs against a temporary folder."""

    def test_round_trip(self, inbox: Path) -> None:
        organizer = FileOrganizer()

        preview = organizer.analyze(inbox)
        result = organizer.organize(preview)

        assert result.success
        assert result.total_files_organized == preview.total_files == 6
        assert result.categories_created == len(preview.category_summaries) == 5

        originals = sorted(r.original_path for r in result.organized_files)
        assert originals == sorted(f.original_path for f in preview.categorized_files)

        assert sorted(p.name for p in (inbox / "Documents").iterdir()) == ["notes.TXT", "report.pdf"]
        assert [p.name for p in (inbox / "Images").iterdir()] == ["photo.jpg"]
        assert [p.name for p in (inbox / "Audio").iterdir()] == ["song.mp3"]
        assert [p.name for p in (inbox / "Code").iterdir()] == ["script.py"]
        assert [p.name for p in (inbox / "Other").iterdir()] == ["README"]
        assert not (inbox / "Videos").exists()

    def test_second_run_with_same_names(self, two_file_folder: Path) -> None:
        organizer = FileOrganizer()
        organizer.organize(organizer.analyze(two_file_folder))

        # New downloads with the same names arrive
        (two_file_folder / "report.pdf").write_bytes(b"new report")
        (two_file_folder / "photo.jpg").write_bytes(b"new photo")
        result = organizer.organize(organizer.analyze(two_file_folder))

        assert result.success
        assert (two_file_folder / "Documents" / "report.pdf").read_bytes() == b"r" * 10
        assert (two_file_folder / "Documents" / "report (1).pdf").read_bytes() == b"new report"
        assert (two_file_folder / "Images" / "photo (1).jpg").read_bytes() == b"new photo"

    def test_already_organized_folder_is_empty(self, two_file_folder: Path) -> None:
        organizer = FileOrganizer()
        organizer.organize(organizer.analyze(two_file_folder))

        preview = organizer.analyze(two_file_folder)

        assert not preview.has_error
        assert preview.total_files == 0
        assert preview.category_summaries == ()

    def test_missing_folder_never_written(self, temp_dir: Path) -> None:
        organizer = FileOrganizer()
        missing = temp_dir / "missing"

        preview = organizer.analyze(missing)
        result = organizer.organize(preview)

        assert preview.has_error
        assert not result.success
        assert result.failure_kind == FailureKind.NOT_FOUND
        assert result.error_message == preview.error_message
        assert not missing.exists()
        assert list(temp_dir.iterdir()) == []

    def test_stale_preview_after_external_change(self, two_file_folder: Path) -> None:
        organizer = FileOrganizer()
        preview = organizer.analyze(two_file_folder)

        (two_file_folder / "photo.jpg").unlink()
        result = organizer.organize(preview)

        assert not result.success
        assert result.failure_kind == FailureKind.ORGANIZE_FAILURE
        # Files moved before the failure stay moved
        for record in result.organized_files:
            assert record.new_path.exists()
