"""Exceptions raised by the XML document adapter."""

from pathlib import Path


class DocumentError(Exception):
    """Base exception for all document errors."""

    def __init__(self, message: str, path: Path | None = None, *args, **kwargs):
        self.message = message
        self.path = path
        super().__init__(message, *args, **kwargs)


class DocumentReadError(DocumentError):
    """Raised when a document file cannot be read."""

    pass


class DocumentParseError(DocumentError):
    """Raised when a document file does not contain well-formed XML."""

    pass


class DocumentWriteError(DocumentError):
    """Raised when a document cannot be serialized to disk."""

    pass


class MissingStructureError(DocumentError):
    """Raised when a required element or attribute is absent."""

    def __init__(self, message: str, name: str, found: int = 0, *args, **kwargs):
        self.name = name
        self.found = found
        super().__init__(message, *args, **kwargs)
