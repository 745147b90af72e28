"""XML document helpers shared by the vocabulary model."""

from .exceptions import (
    DocumentError,
    DocumentParseError,
    DocumentReadError,
    DocumentWriteError,
    MissingStructureError,
)
from .tree import (
    create_document,
    create_element,
    find_child_elements,
    get_attribute,
    parse,
    serialize,
    set_attribute,
)

__all__ = [
    "DocumentError",
    "DocumentParseError",
    "DocumentReadError",
    "DocumentWriteError",
    "MissingStructureError",
    "create_document",
    "create_element",
    "find_child_elements",
    "get_attribute",
    "parse",
    "serialize",
    "set_attribute",
]
