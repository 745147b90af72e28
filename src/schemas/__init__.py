"""Schema definitions for wordbook."""

from .article import EXAMPLE_DELIMITER, TRANSLATE_DELIMITER, ArticleRecord
from .vocabulary import VocabularySummary

__all__ = [
    "ArticleRecord",
    "EXAMPLE_DELIMITER",
    "TRANSLATE_DELIMITER",
    "VocabularySummary",
]
