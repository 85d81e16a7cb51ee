"""Extension-based file classification.

This module provides the Classifier class, which maps a file path to exactly
one Category from a CategoryTable.

Example:
    >>> from arranger.classification import Classifier
    >>> classifier = Classifier()
    >>> classifier.classify(Path("report.PDF")).name
    'Documents'
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from arranger.models import Category, CategoryTable


def file_extension(file_path: Union[Path, str]) -> str:
    """Return the lowercase extension of a file name, including the dot.

    Dot-leading names such as ".py" count as extensions; a trailing dot or
    no dot at all yields "".
    """
    name = Path(file_path).name
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:].lower()


def as_category_table(categories: Union[CategoryTable, Iterable[Category], None]) -> CategoryTable:
    """Coerce a sequence of categories into a validated CategoryTable.

    Raises:
        InvalidConfigurationError: If the categories are absent or invalid.
    """
    if isinstance(categories, CategoryTable):
        return categories
    return CategoryTable(categories)


class Classifier:
    """Assigns categories to files by lower-cased extension.

    Specific categories are checked in table order and the first one that
    handles the extension wins. Files that no specific category handles
    fall through to the table's catch-all.

    Args:
        categories: Optional CategoryTable; defaults to CategoryTable.default().
    """

    def __init__(self, categories: Optional[CategoryTable] = None) -> None:
        self._categories = categories if categories is not None else CategoryTable.default()

    @property
    def categories(self) -> CategoryTable:
        return self._categories

    def set_categories(self, categories: Union[CategoryTable, Iterable[Category]]) -> None:
        """Replace the active category table wholesale.

        Args:
            categories: New table, or a sequence of categories to validate.

        Raises:
            InvalidConfigurationError: If the table is absent, empty, or
                has no trailing catch-all.
        """
        self._categories = as_category_table(categories)

    def classify(self, file_path: Union[Path, str]) -> Category:
        """Return the category for a file based on its extension.

        Args:
            file_path: Path or file name to classify. Only the name is used.

        Returns:
            The first matching specific category, or the catch-all.
        """
        extension = file_extension(file_path)

        for category in self._categories.specific:
            if category.handles_extension(extension):
                return category

        return self._categories.catch_all
