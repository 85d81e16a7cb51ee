"""
Unit tests for the Classifier.

Tests cover:
- Default category assignment by extension
- Case-insensitive matching
- Catch-all fallback for unknown and missing extensions
- Table order as the tie-break for overlapping extensions
- Wholesale category replacement and rejection of invalid tables
"""

from pathlib import Path

import pytest

from arranger.classification import Classifier, file_extension
from arranger.models import Category, CategoryTable, InvalidConfigurationError


@pytest.mark.unit
class TestClassifyDefaults:
    """Tests for classification with the default table."""

    @pytest.mark.parametrize(
        "file_name, expected",
        [
            ("report.pdf", "Documents"),
            ("photo.jpg", "Images"),
            ("movie.mkv", "Videos"),
            ("song.flac", "Audio"),
            ("backup.7z", "Archives"),
            ("setup.exe", "Software"),
            ("main.rs", "Code"),
            ("data.xyz", "Other"),
        ],
    )
    def test_default_categories(self, file_name: str, expected: str):
        assert Classifier().classify(Path(file_name)).name == expected

    def test_uppercase_extension(self):
        assert Classifier().classify("PHOTO.JPEG").name == "Images"

    def test_no_extension_is_catch_all(self):
        classifier = Classifier()
        assert classifier.classify("Makefile") is classifier.categories.catch_all

    def test_only_last_suffix_is_used(self):
        assert Classifier().classify("archive.tar.gz").name == "Archives"
        assert Classifier().classify("report.pdf.bak").name == "Other"

    def test_dot_leading_name_uses_its_extension(self):
        assert Classifier().classify(".py").name == "Code"
        assert Classifier().classify(Path("/tmp/.PDF")).name == "Documents"

    def test_trailing_dot_is_catch_all(self):
        assert Classifier().classify("report.").name == "Other"

    @pytest.mark.parametrize(
        "file_name, expected",
        [("a.TXT", ".txt"), (".bashrc", ".bashrc"), ("archive.tar.gz", ".gz"), ("README", ""), ("file.", "")],
    )
    def test_file_extension(self, file_name: str, expected: str):
        assert file_extension(file_name) == expected

    def test_directory_part_is_ignored(self):
        assert Classifier().classify(Path("/some/dir.pdf/file.png")).name == "Images"

    def test_classification_is_stable(self):
        classifier = Classifier()
        assert classifier.classify("a.mp3") is classifier.classify("a.mp3")

    def test_catch_all_iff_extension_unknown(self):
        classifier = Classifier()
        known = set()
        for category in classifier.categories.specific:
            known |= category.extensions

        for name in ["a.pdf", "b.unknown", "c.PY", "d", "e.tmp", "f.Zip"]:
            is_catch_all = classifier.classify(name) is classifier.categories.catch_all
            assert is_catch_all == (Path(name).suffix.lower() not in known)


@pytest.mark.unit
class TestCustomCategories:
    """Tests for replacing the category table."""

    def test_earlier_category_wins_on_overlap(self):
        table = CategoryTable([
            Category("First", "First", "1", frozenset({".dat"})),
            Category("Second", "Second", "2", frozenset({".dat", ".bin"})),
            Category("Rest", "Rest", "r"),
        ])
        classifier = Classifier(table)
        assert classifier.classify("x.dat").name == "First"
        assert classifier.classify("x.bin").name == "Second"
        assert classifier.classify("x.txt").name == "Rest"

    def test_set_categories_replaces_wholesale(self):
        classifier = Classifier()
        classifier.set_categories([
            Category("Ebooks", "Books", "📚", frozenset({".epub"})),
            Category("Misc", "Misc", "📁"),
        ])

        assert classifier.classify("novel.epub").name == "Ebooks"
        # Default categories are gone, not merged
        assert classifier.classify("report.pdf").name == "Misc"

    def test_set_categories_rejects_none(self):
        classifier = Classifier()
        with pytest.raises(InvalidConfigurationError):
            classifier.set_categories(None)

    def test_set_categories_rejects_empty(self):
        classifier = Classifier()
        with pytest.raises(InvalidConfigurationError):
            classifier.set_categories([])

    def test_rejected_table_keeps_previous(self):
        classifier = Classifier()
        with pytest.raises(InvalidConfigurationError):
            classifier.set_categories([])
        assert classifier.categories == CategoryTable.default()
