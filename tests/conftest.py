"""Pytest fixtures for Arranger tests."""

import io
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Dict, Generator, List, Tuple

import pytest
from rich.console import Console

from arranger.classification import Classifier
from arranger.events import EventChannel
from arranger.models import (
    CategorizedFile,
    CategoryTable,
    OrganizationResult,
    OrganizedFileRecord,
    Preview,
    ProgressEvent,
)
from arranger.scanning import summarize_categories
from arranger.ui import OrganizeTUI


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests touching the real filesystem end to end")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def inbox(temp_dir: Path) -> Path:
    """Create a folder with files of several categories.

    Creates:
        inbox/
        ├── report.pdf      (10 bytes)  Documents
        ├── notes.TXT       (5 bytes)   Documents
        ├── photo.jpg       (20 bytes)  Images
        ├── song.mp3        (30 bytes)  Audio
        ├── script.py       (7 bytes)   Code
        ├── README          (3 bytes)   Other
        ├── .hidden.pdf     (skipped)
        ├── Thumbs.db       (skipped)
        └── subdir/
            └── nested.pdf  (not scanned)

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the inbox folder.
    """
    folder = temp_dir / "inbox"
    folder.mkdir()

    (folder / "report.pdf").write_bytes(b"r" * 10)
    (folder / "notes.TXT").write_bytes(b"n" * 5)
    (folder / "photo.jpg").write_bytes(b"p" * 20)
    (folder / "song.mp3").write_bytes(b"s" * 30)
    (folder / "script.py").write_bytes(b"c" * 7)
    (folder / "README").write_bytes(b"x" * 3)
    (folder / ".hidden.pdf").write_bytes(b"h" * 100)
    (folder / "Thumbs.db").write_bytes(b"t" * 100)

    subdir = folder / "subdir"
    subdir.mkdir()
    (subdir / "nested.pdf").write_bytes(b"z" * 100)

    return folder


@pytest.fixture
def two_file_folder(temp_dir: Path) -> Path:
    """Create a folder holding report.pdf (10 bytes) and photo.jpg (20 bytes)."""
    folder = temp_dir / "two_files"
    folder.mkdir()
    (folder / "report.pdf").write_bytes(b"r" * 10)
    (folder / "photo.jpg").write_bytes(b"p" * 20)
    return folder


class EventRecorder:
    """Collects everything emitted on an EventChannel."""

    def __init__(self, channel: EventChannel) -> None:
        self.progress: List[ProgressEvent] = []
        self.logs: List[str] = []
        channel.add_progress_listener(self.progress.append)
        channel.add_log_listener(self.logs.append)

    def stages(self) -> List[str]:
        return [event.stage for event in self.progress]


@pytest.fixture
def event_channel() -> EventChannel:
    return EventChannel()


@pytest.fixture
def recorder(event_channel: EventChannel) -> EventRecorder:
    """Record progress events and log messages emitted on event_channel."""
    return EventRecorder(event_channel)


@pytest.fixture
def default_table() -> CategoryTable:
    return CategoryTable.default()


def make_preview(folder: Path, names_and_sizes: Dict[str, int], table: CategoryTable) -> Preview:
    """Build a Preview by hand for files that already exist in folder."""
    classifier = Classifier(table)
    files = [
        CategorizedFile(
            original_path=folder / name,
            file_name=name,
            category=classifier.classify(name),
            size_bytes=size,
            last_modified=datetime(2024, 1, 1),
        )
        for name, size in names_and_sizes.items()
    ]
    return Preview(
        source_folder=folder,
        total_files=len(files),
        total_size_bytes=sum(f.size_bytes for f in files),
        categorized_files=tuple(files),
        category_summaries=tuple(summarize_categories(files)),
    )


@pytest.fixture
def sample_preview(default_table: CategoryTable) -> Preview:
    """A Preview of three files in /data/inbox (not on disk)."""
    return make_preview(
        Path("/data/inbox"),
        {"report.pdf": 1024, "photo.jpg": 2048, "holiday.png": 4096},
        default_table,
    )


@pytest.fixture
def sample_result(sample_preview: Preview) -> OrganizationResult:
    """A successful OrganizationResult matching sample_preview."""
    records = tuple(
        OrganizedFileRecord(
            original_path=f.original_path,
            new_path=f.original_path.parent / f.category.folder_name / f.file_name,
            category=f.category.name,
            size_bytes=f.size_bytes,
        )
        for f in sample_preview.categorized_files
    )
    return OrganizationResult(
        success=True,
        total_files_organized=len(records),
        categories_created=len(sample_preview.category_summaries),
        organized_files=records,
        completed_at=datetime(2024, 5, 1, 14, 30, 15),
    )


@pytest.fixture
def tui_with_output() -> Tuple[OrganizeTUI, io.StringIO]:
    """Create an OrganizeTUI with captured output.

    Returns:
        Tuple of (OrganizeTUI instance, StringIO for reading output).
    """
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=120)
    return OrganizeTUI(console=console), output


@pytest.fixture
def preview_factory():
    """Return make_preview for tests that need a hand-built Preview."""
    return make_preview
