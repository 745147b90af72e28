"""Thin helpers over lxml element trees.

These functions hold no vocabulary knowledge. They create, query, parse and
serialize XML trees so that the model classes never touch lxml parsers or the
file system directly.
"""

import logging
from pathlib import Path

from lxml import etree

from .exceptions import (
    DocumentParseError,
    DocumentReadError,
    DocumentWriteError,
    MissingStructureError,
)

logger = logging.getLogger(__name__)


def _parser() -> etree.XMLParser:
    # Blank text is dropped so pretty_print can re-indent on the next save.
    return etree.XMLParser(
        remove_blank_text=True,
        resolve_entities=False,
        no_network=True,
    )


def create_document(root_tag: str) -> etree._ElementTree:
    """Create a new document owning an empty root element.

    Args:
        root_tag: Tag name of the root element

    Returns:
        ElementTree whose root is a fresh ``root_tag`` element
    """
    return etree.ElementTree(etree.Element(root_tag))


def create_element(
    tag: str,
    parent: etree._Element | None = None,
    text: str | None = None,
) -> etree._Element:
    """Create an element, optionally appended to ``parent``."""
    if parent is None:
        element = etree.Element(tag)
    else:
        element = etree.SubElement(parent, tag)
    if text is not None:
        element.text = text
    return element


def find_child_elements(
    node: etree._Element | etree._ElementTree,
    tag: str,
    min_count: int = 0,
    required: bool = False,
    recursive: bool = False,
) -> list[etree._Element]:
    """Find elements named ``tag`` below ``node`` in document order.

    Args:
        node: Element to search, or a whole document
        tag: Tag name to match
        min_count: Minimum number of matches when ``required`` is set
        required: Raise instead of returning a short result
        recursive: Search all descendants instead of direct children only.
            A document is always searched in full, root included.

    Returns:
        List of matching elements, possibly empty

    Raises:
        MissingStructureError: If ``required`` is set and fewer than
            ``min_count`` elements match
    """
    if isinstance(node, etree._ElementTree):
        matches = list(node.iter(tag))
    elif recursive:
        matches = list(node.iterdescendants(tag=tag))
    else:
        matches = list(node.iterchildren(tag=tag))

    if required and len(matches) < min_count:
        raise MissingStructureError(
            f"Expected at least {min_count} <{tag}> element(s), found {len(matches)}",
            name=tag,
            found=len(matches),
        )
    return matches


def get_attribute(
    element: etree._Element, name: str, required: bool = False
) -> str | None:
    """Return an attribute value, or None when it is absent.

    Raises:
        MissingStructureError: If ``required`` is set and the attribute is absent
    """
    value = element.get(name)
    if value is None and required:
        raise MissingStructureError(
            f"<{element.tag}> has no '{name}' attribute", name=name
        )
    return value


def set_attribute(element: etree._Element, name: str, value: str) -> None:
    element.set(name, value)


def serialize(element: etree._Element, destination: Path) -> None:
    """Write the subtree rooted at ``element`` to ``destination``.

    The document is rendered in memory, written to a hidden sibling file and
    then moved over ``destination``, so an existing file is only replaced once
    the new content is complete on disk.

    Args:
        element: Root of the subtree to write
        destination: Target file path; overwritten if it exists

    Raises:
        DocumentWriteError: If rendering or writing fails
    """
    destination = Path(destination)
    tmp_path = destination.with_name(f".{destination.name}.tmp")
    try:
        data = etree.tostring(
            element,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=True,
        )
        tmp_path.write_bytes(data)
        tmp_path.replace(destination)
    except (OSError, etree.LxmlError, ValueError, TypeError) as e:
        tmp_path.unlink(missing_ok=True)
        raise DocumentWriteError(
            f"Failed to write {destination}: {e}", path=destination
        ) from e
    logger.debug(f"Wrote {len(data)} bytes to {destination}")


def parse(path: Path) -> etree._ElementTree:
    """Parse an XML file into a document.

    Raises:
        DocumentParseError: If the file is not well-formed XML
        DocumentReadError: If the file cannot be read
    """
    path = Path(path)
    try:
        return etree.parse(str(path), _parser())
    except etree.XMLSyntaxError as e:
        raise DocumentParseError(f"Malformed XML in {path}: {e}", path=path) from e
    except OSError as e:
        raise DocumentReadError(f"Cannot read {path}: {e}", path=path) from e
