"""Tests for vocabulary exception classes."""

from pathlib import Path

from wordbook.documents import (
    DocumentError,
    DocumentParseError,
    DocumentWriteError,
    MissingStructureError,
)
from wordbook.model import (
    ArticleAlreadyExistsError,
    ArticleNotFoundError,
    MalformedArticleError,
    NoVocabularySelectedError,
    VocabularyAlreadyExistsError,
    VocabularyError,
    VocabularyModelError,
    VocabularyNotFoundError,
)


class TestVocabularyError:
    def test_instantiation_with_message(self):
        """VocabularyError stores the error message."""
        error = VocabularyError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"
        assert isinstance(error, Exception)


class TestVocabularyErrors:
    def test_already_exists(self):
        """VocabularyAlreadyExistsError carries the name."""
        error = VocabularyAlreadyExistsError("english")

        assert error.name == "english"
        assert error.message == "Vocabulary [english] already exists"
        assert isinstance(error, VocabularyError)

    def test_not_found_with_path(self):
        """VocabularyNotFoundError mentions the path when given."""
        error = VocabularyNotFoundError("english", path=Path("/tmp/english.xml"))

        assert error.name == "english"
        assert error.path == Path("/tmp/english.xml")
        assert "/tmp/english.xml" in error.message

    def test_not_found_without_path(self):
        """VocabularyNotFoundError works for registry lookups."""
        error = VocabularyNotFoundError("english")
        assert error.path is None
        assert error.message == "Vocabulary [english] not found"

    def test_model_error(self):
        """VocabularyModelError carries name and message."""
        error = VocabularyModelError("english", "Malformed XML")

        assert error.name == "english"
        assert error.message == "Malformed XML"

    def test_malformed_article_is_model_error(self):
        """MalformedArticleError is a VocabularyModelError."""
        error = MalformedArticleError("Missing source")

        assert error.source is None
        assert error.message == "Missing source"
        assert isinstance(error, VocabularyModelError)


class TestArticleErrors:
    def test_already_exists(self):
        """ArticleAlreadyExistsError carries the source."""
        error = ArticleAlreadyExistsError("cat")

        assert error.source == "cat"
        assert error.message == "Article with source [cat] already exists"

    def test_not_found(self):
        """ArticleNotFoundError carries the source."""
        error = ArticleNotFoundError("cat")

        assert error.source == "cat"
        assert isinstance(error, VocabularyError)

    def test_no_selection(self):
        """NoVocabularySelectedError has a default message."""
        assert NoVocabularySelectedError().message == "No vocabulary selected"


class TestDocumentErrors:
    def test_document_error_path(self):
        """DocumentError stores message and optional path."""
        error = DocumentParseError("bad", path=Path("x.xml"))

        assert error.message == "bad"
        assert error.path == Path("x.xml")
        assert isinstance(error, DocumentError)

    def test_write_error_without_path(self):
        """path defaults to None."""
        assert DocumentWriteError("failed").path is None

    def test_missing_structure(self):
        """MissingStructureError records the missing name and match count."""
        error = MissingStructureError("missing", name="source", found=0)

        assert error.name == "source"
        assert error.found == 0
        assert isinstance(error, DocumentError)
