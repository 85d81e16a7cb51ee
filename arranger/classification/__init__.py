"""Classification package for the file arranger.

Provides the Classifier, which maps a file path to a Category by extension.
"""

from .classifier import Classifier, as_category_table, file_extension

__all__ = ["Classifier", "as_category_table", "file_extension"]
