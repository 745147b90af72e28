"""Vocabulary entity backed by an XML document.

One vocabulary is stored per file::

    {storage_dir}/{name}.xml

    <vocabulary name="english">
      <article source="cat">
        <translate>кот</translate>
        <example>The cat sat.</example>
      </article>
    </vocabulary>
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from lxml import etree

from wordbook.documents import (
    DocumentError,
    create_document,
    find_child_elements,
    get_attribute,
    parse,
    serialize,
    set_attribute,
)

from .article import ARTICLE_ELEMENT, Article
from .exceptions import (
    ArticleAlreadyExistsError,
    ArticleNotFoundError,
    MalformedArticleError,
    VocabularyAlreadyExistsError,
    VocabularyModelError,
    VocabularyNotFoundError,
)

logger = logging.getLogger(__name__)

VOCABULARY_ELEMENT = "vocabulary"
VOCABULARY_NAME_ATTR = "name"
VOCABULARY_SUFFIX = ".xml"


def vocabulary_path(storage_dir: Path, name: str) -> Path:
    return Path(storage_dir) / f"{name}{VOCABULARY_SUFFIX}"


def check_name(name: str) -> str:
    """Return ``name`` if it can name a file inside the storage directory.

    Raises:
        ValueError: If ``name`` is blank or contains a path separator or ``..``
    """
    if not name or not name.strip():
        raise ValueError("vocabulary name must not be empty")
    if "/" in name or "\\" in name or ".." in name:
        raise ValueError(f"vocabulary name must not contain path separators: {name!r}")
    return name


class Vocabulary:
    """A named, ordered collection of articles with unique sources.

    The vocabulary owns its document tree and its articles. Each article is
    mirrored by an ``<article>`` child of the root element, indexed by source
    so it can be refreshed in place before saving. Article elements that
    failed to load are not indexed and are written back unchanged. Elements
    repeating an earlier source are removed from the tree on load.

    Use ``Vocabulary.new()`` or ``Vocabulary.load()`` rather than the
    constructor.
    """

    def __init__(
        self,
        document: etree._ElementTree,
        element: etree._Element,
        storage_dir: Path,
        saved_name: str | None = None,
    ):
        self._document = document
        self._element = element
        self._storage_dir = Path(storage_dir)
        self._saved_name = saved_name
        self._articles: list[Article] = []
        self._article_elements: dict[str, etree._Element] = {}

        article_elements = find_child_elements(element, ARTICLE_ELEMENT)
        if not article_elements:
            logger.info(f"No articles in vocabulary [{self.name}]")
            return

        for article_element in article_elements:
            try:
                article = Article.from_element(article_element)
            except MalformedArticleError as e:
                logger.warning(f"Skipping article in vocabulary [{self.name}]: {e.message}")
                continue
            if article.source in self._article_elements:
                logger.warning(
                    f"Skipping duplicate article [{article.source}] "
                    f"in vocabulary [{self.name}]"
                )
                element.remove(article_element)
                continue
            self._articles.append(article)
            self._article_elements[article.source] = article_element

        logger.info(
            f"Loaded [{len(self._articles)}] articles for vocabulary [{self.name}]"
        )

    def __repr__(self) -> str:
        return f"Vocabulary({self.name!r})"

    def __str__(self) -> str:
        return self.name

    def __len__(self) -> int:
        return len(self._articles)

    @property
    def name(self) -> str:
        return get_attribute(self._element, VOCABULARY_NAME_ATTR) or ""

    @name.setter
    def name(self, name: str) -> None:
        # The backing file follows on the next save().
        set_attribute(self._element, VOCABULARY_NAME_ATTR, check_name(name))

    def set_name(self, name: str) -> None:
        self.name = name

    @property
    def storage_dir(self) -> Path:
        return self._storage_dir

    @property
    def path(self) -> Path:
        """File this vocabulary is saved to, derived from its current name."""
        return vocabulary_path(self._storage_dir, self.name)

    @property
    def articles(self) -> list[Article]:
        return list(self._articles)

    def get_article(self, source: str) -> Article | None:
        """Return the article with exactly this source, or None."""
        for article in self._articles:
            if article.source == source:
                return article
        return None

    def add_article(
        self,
        source: str,
        translates: Iterable[str],
        examples: Iterable[str] | None = None,
    ) -> Article:
        """Add a new article to the vocabulary.

        An existing article with the same source is never replaced.

        Args:
            source: Source word; must not be empty
            translates: Translations of the word
            examples: Usages of the word

        Returns:
            The created article

        Raises:
            ArticleAlreadyExistsError: If an article with ``source`` exists
        """
        if self.get_article(source) is not None:
            raise ArticleAlreadyExistsError(source)

        article = Article(source, translates)
        examples = list(examples or [])
        if examples:
            article.add_examples(examples)
        article_element = article.to_element()

        self._element.append(article_element)
        self._articles.append(article)
        self._article_elements[source] = article_element
        logger.debug(f"Added article [{source}] to vocabulary [{self.name}]")
        return article

    def change_article(
        self,
        source: str,
        new_source: str,
        translates: Iterable[str],
        examples: Iterable[str] | None = None,
    ) -> Article:
        """Replace an article in place, keeping its position.

        Raises:
            ArticleNotFoundError: If no article has ``source``
            ArticleAlreadyExistsError: If ``new_source`` belongs to another article
        """
        old = self.get_article(source)
        if old is None:
            raise ArticleNotFoundError(source)
        if new_source != source and self.get_article(new_source) is not None:
            raise ArticleAlreadyExistsError(new_source)

        article = Article(new_source, translates, examples or [])
        article_element = article.to_element()

        index = self._articles.index(old)
        self._element.replace(self._article_elements.pop(source), article_element)
        self._articles[index] = article
        self._article_elements[new_source] = article_element
        logger.debug(f"Changed article [{source}] to [{new_source}] in vocabulary [{self.name}]")
        return article

    def remove_article(self, source: str) -> Article:
        """Remove and return the article with ``source``.

        Raises:
            ArticleNotFoundError: If no article has ``source``
        """
        article = self.get_article(source)
        if article is None:
            raise ArticleNotFoundError(source)

        self._element.remove(self._article_elements.pop(source))
        self._articles.remove(article)
        logger.debug(f"Removed article [{source}] from vocabulary [{self.name}]")
        return article

    def save(self) -> Path:
        """Write the vocabulary to ``{storage_dir}/{name}.xml``.

        An existing file at that path is replaced only once the new content
        has been written. When the vocabulary was renamed since it was last
        saved or loaded, the file under the old name is removed afterwards.

        Returns:
            Path of the written file

        Raises:
            VocabularyModelError: If the document cannot be written
        """
        name = self.name
        path = self.path
        logger.info(f"Save vocabulary to {path}")
        try:
            self._refresh_articles()
            self._storage_dir.mkdir(parents=True, exist_ok=True)
            serialize(self._element, path)
        except (DocumentError, OSError, ValueError) as e:
            logger.error(f"Error saving vocabulary [{name}]: {e}")
            raise VocabularyModelError(name, f"Error saving vocabulary {name}: {e}") from e

        if self._saved_name is not None and self._saved_name != name:
            stale = vocabulary_path(self._storage_dir, self._saved_name)
            try:
                stale.unlink(missing_ok=True)
                logger.info(f"Removed stale vocabulary file {stale}")
            except OSError as e:
                logger.warning(f"Could not remove stale vocabulary file {stale}: {e}")
        self._saved_name = name
        return path

    def _refresh_articles(self) -> None:
        for article in self._articles:
            old_element = self._article_elements[article.source]
            new_element = article.to_element()
            self._element.replace(old_element, new_element)
            self._article_elements[article.source] = new_element

    @classmethod
    def new(cls, name: str, storage_dir: Path) -> "Vocabulary":
        """Create an empty vocabulary. Nothing is written until ``save()``.

        Args:
            name: Vocabulary name
            storage_dir: Directory the vocabulary will be saved to

        Returns:
            Vocabulary without articles

        Raises:
            VocabularyAlreadyExistsError: If ``{storage_dir}/{name}.xml`` exists
            ValueError: If ``name`` is empty or contains a path separator
        """
        check_name(name)
        if vocabulary_path(storage_dir, name).exists():
            raise VocabularyAlreadyExistsError(name)

        document = create_document(VOCABULARY_ELEMENT)
        root = document.getroot()
        set_attribute(root, VOCABULARY_NAME_ATTR, name)
        logger.info(f"Created vocabulary [{name}]")
        return cls(document, root, storage_dir)

    @classmethod
    def load(cls, path: Path, storage_dir: Path | None = None) -> "Vocabulary":
        """Load a vocabulary from an XML file.

        Articles that cannot be read are logged and skipped.

        Args:
            path: Vocabulary file
            storage_dir: Directory for later saves (default: the file's directory)

        Returns:
            Loaded vocabulary

        Raises:
            VocabularyNotFoundError: If ``path`` is not an existing file
            VocabularyModelError: If the file cannot be parsed or does not
                contain exactly one vocabulary element
        """
        path = Path(path)
        if not path.is_file():
            raise VocabularyNotFoundError(path.stem, path=path)

        try:
            document = parse(path)
        except DocumentError as e:
            raise VocabularyModelError(path.stem, e.message) from e

        roots = find_child_elements(document, VOCABULARY_ELEMENT)
        if len(roots) != 1:
            raise VocabularyModelError(
                path.stem,
                f"Expected exactly one <{VOCABULARY_ELEMENT}> element in {path}, "
                f"found {len(roots)}",
            )
        root = roots[0]
        try:
            check_name(get_attribute(root, VOCABULARY_NAME_ATTR) or "")
        except ValueError as e:
            logger.warning(f"Vocabulary in {path} has no usable name ({e}), using [{path.stem}]")
            set_attribute(root, VOCABULARY_NAME_ATTR, path.stem)

        storage_dir = Path(storage_dir) if storage_dir is not None else path.parent
        name = get_attribute(root, VOCABULARY_NAME_ATTR)
        saved_path = vocabulary_path(storage_dir, name)
        saved_name = name if saved_path.resolve() == path.resolve() else None
        return cls(document, root, storage_dir, saved_name=saved_name)
