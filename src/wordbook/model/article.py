"""Article entity: one dictionary entry of a vocabulary."""

import logging
from collections.abc import Iterable

from lxml import etree

from schemas.article import ArticleRecord
from wordbook.documents import (
    MissingStructureError,
    create_element,
    find_child_elements,
    get_attribute,
    set_attribute,
)

from .exceptions import MalformedArticleError

logger = logging.getLogger(__name__)

ARTICLE_ELEMENT = "article"
SOURCE_ATTR = "source"
TRANSLATE_ELEMENT = "translate"
EXAMPLE_ELEMENT = "example"


class Article:
    """A source word with its translations and usage examples.

    The source is the article's identity within a vocabulary and cannot be
    changed after construction. Translations and examples can be appended.
    The ``translates`` and ``examples`` properties return copies.

    An article never keeps a reference to an XML node. Its owning vocabulary
    converts it with ``to_element()`` and ``from_element()`` when needed.
    """

    def __init__(
        self,
        source: str,
        translates: Iterable[str] = (),
        examples: Iterable[str] = (),
    ):
        self._source = source
        self._translates = list(translates)
        self._examples = list(examples)

    def __repr__(self) -> str:
        return f"Article({self._source!r})"

    def __str__(self) -> str:
        return self._source

    def __eq__(self, other) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        return (
            self._source == other._source
            and self._translates == other._translates
            and self._examples == other._examples
        )

    __hash__ = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def translates(self) -> list[str]:
        return list(self._translates)

    @property
    def examples(self) -> list[str]:
        return list(self._examples)

    def add_translates(self, translates: Iterable[str]) -> None:
        self._translates.extend(translates)

    def add_examples(self, examples: Iterable[str]) -> None:
        """Append usage examples. Duplicates are kept."""
        self._examples.extend(examples)

    def to_element(self) -> etree._Element:
        """Build a fresh ``<article>`` subtree from the current state.

        Translations come first, then examples, each in sequence order.
        """
        element = create_element(ARTICLE_ELEMENT)
        set_attribute(element, SOURCE_ATTR, self._source)
        for translate in self._translates:
            create_element(TRANSLATE_ELEMENT, parent=element, text=translate)
        for example in self._examples:
            create_element(EXAMPLE_ELEMENT, parent=element, text=example)
        return element

    @classmethod
    def from_element(cls, element: etree._Element) -> "Article":
        """Rebuild an article from an ``<article>`` subtree.

        Args:
            element: Parsed article element

        Returns:
            Article with translations and examples in document order

        Raises:
            MalformedArticleError: If the element is not an article or has no
                usable source attribute
        """
        if element.tag != ARTICLE_ELEMENT:
            raise MalformedArticleError(
                f"Expected <{ARTICLE_ELEMENT}> element, got <{element.tag}>"
            )
        try:
            source = get_attribute(element, SOURCE_ATTR, required=True)
        except MissingStructureError as e:
            raise MalformedArticleError(
                f"Article on line {element.sourceline} is missing its source: {e.message}"
            ) from e
        if not source.strip():
            raise MalformedArticleError(
                f"Article on line {element.sourceline} has an empty source",
                source=source,
            )

        translates = [
            el.text or "" for el in find_child_elements(element, TRANSLATE_ELEMENT)
        ]
        examples = [
            el.text or "" for el in find_child_elements(element, EXAMPLE_ELEMENT)
        ]
        logger.debug(
            f"Loaded article [{source}] with {len(translates)} translates "
            f"and {len(examples)} examples"
        )
        return cls(source, translates, examples)

    def to_record(self) -> ArticleRecord:
        return ArticleRecord(
            source=self._source,
            translates=self.translates,
            examples=self.examples,
        )

    @classmethod
    def from_record(cls, record: ArticleRecord) -> "Article":
        return cls(record.source, record.translates, record.examples)
