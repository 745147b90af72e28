"""Vocabulary data model."""

from .article import Article
from .exceptions import (
    ArticleAlreadyExistsError,
    ArticleNotFoundError,
    MalformedArticleError,
    NoVocabularySelectedError,
    VocabularyAlreadyExistsError,
    VocabularyError,
    VocabularyModelError,
    VocabularyNotFoundError,
)
from .vocabulary import Vocabulary

__all__ = [
    "Article",
    "Vocabulary",
    "VocabularyError",
    "VocabularyAlreadyExistsError",
    "VocabularyNotFoundError",
    "VocabularyModelError",
    "MalformedArticleError",
    "ArticleAlreadyExistsError",
    "ArticleNotFoundError",
    "NoVocabularySelectedError",
]
