"""FileOrganizer: the two-phase analyze/organize API of the arranger core.

FileOrganizer owns the active category table and wires a Classifier,
FolderScanner and FileOperations to one EventChannel, so callers subscribe
once and receive notifications from both phases.

Example:
    from arranger.orchestration import FileOrganizer
    from pathlib import Path

    organizer = FileOrganizer()
    organizer.events.add_log_listener(print)

    preview = organizer.analyze(Path("/home/me/Downloads"))
    if not preview.has_error:
        result = organizer.organize(preview)
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from arranger.classification import Classifier, as_category_table
from arranger.events import EventChannel
from arranger.models import Category, CategoryTable, OrganizationResult, Preview
from arranger.operations import FileOperations
from arranger.scanning import FolderScanner


class FileOrganizer:
    """Analyze a folder into a Preview, then organize it from that Preview.

    The Preview is the only state passed between the phases; no files are
    touched while analyzing. Runs are single-threaded and not guarded against
    a concurrent run on the same folder.

    Attributes:
        events: EventChannel shared by both phases.
        progress_delay: Pause in seconds after each progress event.
    """

    def __init__(
        self,
        categories: Optional[Union[CategoryTable, Iterable[Category]]] = None,
        events: Optional[EventChannel] = None,
        progress_delay: float = 0.0,
    ) -> None:
        """Initialize the FileOrganizer.

        Args:
            categories: Optional category table; defaults to the shipped table.
            events: Optional EventChannel; a new one is created if omitted.
            progress_delay: Seconds to pause after each progress event.

        Raises:
            InvalidConfigurationError: If categories is given but invalid, or
                progress_delay is negative.
        """
        table = as_category_table(categories) if categories is not None else CategoryTable.default()
        self.events = events if events is not None else EventChannel()
        self.progress_delay = progress_delay

        self._classifier = Classifier(table)
        self._scanner = FolderScanner(self._classifier, self.events, progress_delay)
        self._file_ops = FileOperations(self.events, progress_delay)

    def analyze(self, folder_path: Path) -> Preview:
        """Build a Preview of the folder. See FolderScanner.analyze."""
        return self._scanner.analyze(folder_path)

    def organize(self, preview: Preview) -> OrganizationResult:
        """Move the files of a Preview. See FileOperations.organize."""
        return self._file_ops.organize(preview)

    def classify(self, file_path: Union[Path, str]) -> Category:
        return self._classifier.classify(file_path)

    def set_categories(self, categories: Union[CategoryTable, Iterable[Category]]) -> None:
        """Replace the category table wholesale (no merging).

        Raises:
            InvalidConfigurationError: If categories is None, empty or
                lacks a single trailing catch-all.
        """
        self._classifier.set_categories(categories)

    def get_categories(self) -> CategoryTable:
        return self._classifier.categories
