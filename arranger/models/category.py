"""
Category definitions for the file arranger.

This module contains:
- Category: A named bucket of file extensions mapped to a destination subfolder
- CategoryTable: The validated, ordered set of categories used for classification

The table is ordered; the final entry is the catch-all category (empty
extension set), matched only when no earlier category handles an extension.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Optional, Sequence, Tuple

from .errors import InvalidConfigurationError


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


@dataclass(frozen=True)
class Category:
    """A file category with its destination folder and handled extensions."""
    name: str                         # Display name
    folder_name: str                  # Subfolder created under the source folder
    icon: str                         # Glyph shown by the presentation layer
    extensions: FrozenSet[str] = field(default_factory=frozenset)  # Lowercase, dot-prefixed

    def __post_init__(self) -> None:
        if isinstance(self.extensions, str):
            raise InvalidConfigurationError(
                f"Category {self.name!r}: extensions must be a collection, not a str"
            )
        normalized = frozenset(_normalize_extension(ext) for ext in self.extensions)
        object.__setattr__(self, "extensions", normalized)

    @property
    def is_catch_all(self) -> bool:
        """True for the fallback category, which handles no explicit extensions."""
        return not self.extensions

    def handles_extension(self, extension: str) -> bool:
        """Check whether this category handles the given extension (case-insensitive)."""
        return extension.lower() in self.extensions

    def __str__(self) -> str:
        return f"{self.icon} {self.name} ({len(self.extensions)} types)"


def _category(name: str, icon: str, *extensions: str) -> Category:
    return Category(name=name, folder_name=name, icon=icon, extensions=frozenset(extensions))


DEFAULT_CATEGORIES: Tuple[Category, ...] = (
    _category(
        "Documents", "📄",
        ".pdf", ".doc", ".docx", ".txt", ".rtf", ".odt",
        ".xls", ".xlsx", ".ppt", ".pptx", ".csv",
    ),
    _category(
        "Images", "🖼️",
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff",
        ".svg", ".webp", ".ico", ".psd", ".ai",
    ),
    _category(
        "Videos", "🎬",
        ".mp4", ".avi", ".mkv", ".mov", ".wmv", ".flv",
        ".webm", ".m4v", ".3gp", ".mpg", ".mpeg",
    ),
    _category(
        "Audio", "🎵",
        ".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma",
        ".m4a", ".opus", ".aiff",
    ),
    _category(
        "Archives", "📦",
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2",
        ".xz", ".cab", ".iso",
    ),
    _category(
        "Software", "⚙️",
        ".exe", ".msi", ".dmg", ".deb", ".rpm", ".app",
        ".pkg", ".apk", ".ipa",
    ),
    _category(
        "Code", "💻",
        ".cs", ".js", ".py", ".java", ".cpp", ".c", ".h",
        ".html", ".css", ".php", ".rb", ".go", ".rs",
    ),
    _category("Other", "📁"),
)


class CategoryTable(Sequence[Category]):
    """Immutable, validated ordered sequence of categories.

    The table must be non-empty and contain exactly one catch-all category
    in the final position. Table order decides ties: if an extension is
    configured into two categories, the earlier one wins.

    Args:
        categories: Categories in priority order, catch-all last.

    Raises:
        InvalidConfigurationError: If the table is None, empty, or the
            catch-all invariant does not hold.

    Example:
        >>> table = CategoryTable.default()
        >>> table.catch_all.name
        'Other'
    """

    def __init__(self, categories: Optional[Iterable[Category]]) -> None:
        if categories is None:
            raise InvalidConfigurationError("Category table must not be None")

        entries = tuple(categories)
        if not entries:
            raise InvalidConfigurationError("Category table must not be empty")

        for entry in entries:
            if not isinstance(entry, Category):
                raise InvalidConfigurationError(
                    f"Category table entries must be Category instances, got {type(entry).__name__}"
                )

        catch_all_count = sum(1 for entry in entries if entry.is_catch_all)
        if catch_all_count != 1:
            raise InvalidConfigurationError(
                f"Category table must contain exactly one catch-all category, found {catch_all_count}"
            )
        if not entries[-1].is_catch_all:
            raise InvalidConfigurationError(
                "The catch-all category must be the last entry of the table"
            )

        self._categories = entries

    @classmethod
    def default(cls) -> "CategoryTable":
        """Return the shipped category table."""
        return cls(DEFAULT_CATEGORIES)

    @property
    def catch_all(self) -> Category:
        return self._categories[-1]

    @property
    def specific(self) -> Tuple[Category, ...]:
        """All categories except the catch-all, in table order."""
        return self._categories[:-1]

    def __getitem__(self, index):
        return self._categories[index]

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CategoryTable):
            return self._categories == other._categories
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._categories)

    def __repr__(self) -> str:
        names = ", ".join(category.name for category in self._categories)
        return f"CategoryTable([{names}])"
