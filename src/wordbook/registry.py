"""Registry of known vocabularies and the current selection.

The registry is an explicit context object: construct it with a config dict,
call ``scan()`` to load the storage directory, then pass it to whatever needs
it. Article mutations on the current vocabulary return an ``ArticleOutcome``
so callers handle duplicates and misses without catching exceptions. After a
mutation, callers pull the fresh list with ``current_articles()``.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from wordbook.model import (
    Article,
    ArticleAlreadyExistsError,
    ArticleNotFoundError,
    NoVocabularySelectedError,
    Vocabulary,
    VocabularyAlreadyExistsError,
    VocabularyError,
    VocabularyNotFoundError,
)
from wordbook.model.vocabulary import VOCABULARY_SUFFIX, vocabulary_path

logger = logging.getLogger(__name__)


@dataclass
class ArticleOutcome:
    """Result of an article mutation through the registry.

    Attributes:
        article: Affected article (the new one for add/change, the removed
            one for remove), or None on failure
        error: Expected failure, or None on success
    """

    article: Article | None = None
    error: VocabularyError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class VocabularyRegistry:
    """Known vocabularies in a home directory plus the current one.

    Config keys:
        home_dir (required): Directory holding the vocabulary files
        autosave: Save the current vocabulary after each successful article
            mutation (default: True)
    """

    def __init__(self, config: dict):
        if "home_dir" not in config:
            raise ValueError("config must include 'home_dir'")

        self._config = config
        self._vocabularies: dict[str, Vocabulary] = {}
        self._current: Vocabulary | None = None

    @property
    def home_dir(self) -> Path:
        return Path(self._config["home_dir"])

    @property
    def autosave(self) -> bool:
        return bool(self._config.get("autosave", True))

    def scan(self) -> list[Vocabulary]:
        """Load every vocabulary file in the home directory.

        Files that fail to load are logged and skipped. The current selection
        is cleared.

        Returns:
            Loaded vocabularies ordered by name
        """
        home_dir = self.home_dir
        home_dir.mkdir(parents=True, exist_ok=True)
        self._vocabularies = {}
        self._current = None

        for path in sorted(home_dir.glob(f"*{VOCABULARY_SUFFIX}")):
            try:
                vocabulary = Vocabulary.load(path, storage_dir=home_dir)
            except VocabularyError as e:
                logger.error(f"Failed to load vocabulary from {path}: {e.message}")
                continue
            if vocabulary.name in self._vocabularies:
                logger.warning(
                    f"Ignoring {path}: vocabulary [{vocabulary.name}] already loaded"
                )
                continue
            self._vocabularies[vocabulary.name] = vocabulary

        logger.info(f"Found {len(self._vocabularies)} vocabularies in {home_dir}")
        return self.vocabularies

    @property
    def vocabularies(self) -> list[Vocabulary]:
        return [self._vocabularies[name] for name in sorted(self._vocabularies)]

    def get(self, name: str) -> Vocabulary | None:
        return self._vocabularies.get(name)

    @property
    def current(self) -> Vocabulary | None:
        return self._current

    def select(self, vocabulary: Vocabulary | str | None) -> Vocabulary | None:
        """Make a registered vocabulary current, or clear the selection.

        Raises:
            VocabularyNotFoundError: If the vocabulary is not registered
        """
        if vocabulary is None:
            self._current = None
            return None

        name = vocabulary if isinstance(vocabulary, str) else vocabulary.name
        selected = self._vocabularies.get(name)
        if selected is None or (
            isinstance(vocabulary, Vocabulary) and selected is not vocabulary
        ):
            raise VocabularyNotFoundError(name)
        self._current = selected
        logger.debug(f"Current vocabulary is [{name}]")
        return selected

    def create(self, name: str) -> Vocabulary:
        """Create, save and register a new empty vocabulary.

        Raises:
            VocabularyAlreadyExistsError: If a file for ``name`` exists
            VocabularyModelError: If the new file cannot be written
        """
        if name in self._vocabularies:
            raise VocabularyAlreadyExistsError(name)
        vocabulary = Vocabulary.new(name, self.home_dir)
        vocabulary.save()
        self._vocabularies[name] = vocabulary
        return vocabulary

    def rename(self, name: str, new_name: str) -> Vocabulary:
        """Rename a vocabulary and move its file.

        Raises:
            VocabularyNotFoundError: If ``name`` is not registered
            VocabularyAlreadyExistsError: If ``new_name`` is taken
        """
        vocabulary = self._vocabularies.get(name)
        if vocabulary is None:
            raise VocabularyNotFoundError(name)
        if new_name == name:
            return vocabulary
        target = vocabulary_path(vocabulary.storage_dir, new_name)
        if new_name in self._vocabularies or target.exists():
            raise VocabularyAlreadyExistsError(new_name)

        vocabulary.name = new_name
        try:
            vocabulary.save()
        except VocabularyError:
            vocabulary.name = name
            raise
        del self._vocabularies[name]
        self._vocabularies[new_name] = vocabulary
        logger.info(f"Renamed vocabulary [{name}] to [{new_name}]")
        return vocabulary

    def current_articles(self) -> list[Article]:
        if self._current is None:
            return []
        return self._current.articles

    def add_article(
        self,
        source: str,
        translates: Iterable[str],
        examples: Iterable[str] | None = None,
    ) -> ArticleOutcome:
        """Add an article to the current vocabulary."""
        if self._current is None:
            return ArticleOutcome(error=NoVocabularySelectedError())
        try:
            article = self._current.add_article(source, translates, examples)
        except ArticleAlreadyExistsError as e:
            logger.warning(e.message)
            return ArticleOutcome(error=e)
        self._autosave()
        return ArticleOutcome(article=article)

    def change_article(
        self,
        source: str,
        new_source: str,
        translates: Iterable[str],
        examples: Iterable[str] | None = None,
    ) -> ArticleOutcome:
        """Replace an article of the current vocabulary in place."""
        if self._current is None:
            return ArticleOutcome(error=NoVocabularySelectedError())
        try:
            article = self._current.change_article(source, new_source, translates, examples)
        except (ArticleAlreadyExistsError, ArticleNotFoundError) as e:
            logger.warning(e.message)
            return ArticleOutcome(error=e)
        self._autosave()
        return ArticleOutcome(article=article)

    def remove_article(self, source: str) -> ArticleOutcome:
        """Remove an article from the current vocabulary."""
        if self._current is None:
            return ArticleOutcome(error=NoVocabularySelectedError())
        try:
            article = self._current.remove_article(source)
        except ArticleNotFoundError as e:
            logger.warning(e.message)
            return ArticleOutcome(error=e)
        self._autosave()
        return ArticleOutcome(article=article)

    def _autosave(self) -> None:
        if self.autosave and self._current is not None:
            self._current.save()
