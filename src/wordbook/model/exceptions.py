"""Exceptions raised by the vocabulary model."""

from pathlib import Path


class VocabularyError(Exception):
    """Base exception for all vocabulary model errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class VocabularyAlreadyExistsError(VocabularyError):
    """Raised when a new vocabulary would collide with an existing file."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"Vocabulary [{name}] already exists")


class VocabularyNotFoundError(VocabularyError):
    """Raised when a vocabulary file or registry entry does not exist."""

    def __init__(self, name: str, path: Path | None = None, message: str | None = None):
        self.name = name
        self.path = path
        if message is None:
            message = f"Vocabulary [{name}] not found"
            if path is not None:
                message += f" at {path}"
        super().__init__(message)


class VocabularyModelError(VocabularyError):
    """Raised when a vocabulary document cannot be loaded or saved."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class MalformedArticleError(VocabularyModelError):
    """Raised when an article subtree lacks required structure."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(name=source or "", message=message)


class ArticleAlreadyExistsError(VocabularyError):
    """Raised when an article source is already taken in a vocabulary."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Article with source [{source}] already exists")


class ArticleNotFoundError(VocabularyError):
    """Raised when no article with the given source exists."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Article with source [{source}] not found")


class NoVocabularySelectedError(VocabularyError):
    """Raised when an operation needs a current vocabulary and none is set."""

    def __init__(self, message: str = "No vocabulary selected"):
        super().__init__(message)
