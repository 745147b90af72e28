"""Tests for the Article entity."""

import pytest
from lxml import etree

from schemas import ArticleRecord
from wordbook.model import Article, MalformedArticleError, VocabularyModelError


def _element(xml: str) -> etree._Element:
    return etree.fromstring(xml)


class TestArticleInit:
    def test_construction(self):
        """Article stores source and translates; examples start empty."""
        article = Article("cat", ["кот"])

        assert article.source == "cat"
        assert article.translates == ["кот"]
        assert article.examples == []

    def test_copies_input_sequences(self):
        """Later changes to the caller's lists do not affect the article."""
        translates = ["кот"]
        article = Article("cat", translates)
        translates.append("кошка")

        assert article.translates == ["кот"]

    def test_accessors_return_copies(self):
        """Mutating a returned list does not mutate the article."""
        article = Article("cat", ["кот"], ["The cat sat."])
        article.translates.append("кошка")
        article.examples.clear()

        assert article.translates == ["кот"]
        assert article.examples == ["The cat sat."]

    def test_source_is_read_only(self):
        """The source cannot be reassigned."""
        article = Article("cat", ["кот"])
        with pytest.raises(AttributeError):
            article.source = "dog"

    def test_str_and_repr(self):
        """str() is the source word."""
        article = Article("cat", ["кот"])
        assert str(article) == "cat"
        assert repr(article) == "Article('cat')"


class TestArticleMutation:
    def test_add_examples_appends_without_dedup(self):
        """add_examples appends in order and keeps duplicates."""
        article = Article("cat", ["кот"], ["one"])
        article.add_examples(["two", "one"])
        assert article.examples == ["one", "two", "one"]

    def test_add_translates(self):
        """add_translates appends translations."""
        article = Article("cat", ["кот"])
        article.add_translates(["кошка"])
        assert article.translates == ["кот", "кошка"]


class TestArticleEquality:
    def test_equal_when_fields_match(self):
        """Articles with the same fields are equal."""
        assert Article("cat", ["кот"], ["x"]) == Article("cat", ["кот"], ["x"])

    def test_not_equal_on_any_difference(self):
        """Any differing field breaks equality."""
        base = Article("cat", ["кот"], ["x"])
        assert base != Article("dog", ["кот"], ["x"])
        assert base != Article("cat", ["кошка"], ["x"])
        assert base != Article("cat", ["кот"], [])

    def test_not_equal_to_other_types(self):
        """Comparison with a non-article is False."""
        assert Article("cat") != "cat"


class TestToElement:
    def test_builds_article_subtree(self):
        """to_element writes source, then translates, then examples."""
        element = Article("cat", ["кот", "кошка"], ["The cat sat."]).to_element()

        assert element.tag == "article"
        assert element.get("source") == "cat"
        assert [child.tag for child in element] == ["translate", "translate", "example"]
        assert [child.text for child in element] == ["кот", "кошка", "The cat sat."]

    def test_builds_fresh_element_each_call(self):
        """Every call returns a new element reflecting current state."""
        article = Article("cat", ["кот"])
        first = article.to_element()
        article.add_examples(["The cat sat."])
        second = article.to_element()

        assert first is not second
        assert len(first) == 1
        assert len(second) == 2

    def test_escapes_markup_in_text(self):
        """Text with markup characters survives serialization."""
        element = Article("a<b", ["x & y"], ["<i>not a tag</i>"]).to_element()
        xml = etree.tostring(element, encoding="unicode")

        assert "x &amp; y" in xml
        assert Article.from_element(etree.fromstring(xml)) == Article(
            "a<b", ["x & y"], ["<i>not a tag</i>"]
        )


class TestFromElement:
    def test_reads_in_document_order(self):
        """from_element reads translates and examples in order."""
        element = _element(
            '<article source="cat">'
            "<translate>кот</translate><example>one</example>"
            "<translate>кошка</translate><example>two</example>"
            "</article>"
        )

        article = Article.from_element(element)

        assert article == Article("cat", ["кот", "кошка"], ["one", "two"])

    def test_empty_text_becomes_empty_string(self):
        """Empty child elements load as empty strings."""
        article = Article.from_element(_element('<article source="cat"><translate/></article>'))
        assert article.translates == [""]

    def test_article_without_children(self):
        """An article with no translations or examples is valid."""
        article = Article.from_element(_element('<article source="cat"/>'))
        assert article == Article("cat")

    def test_missing_source_raises(self):
        """A missing source attribute raises MalformedArticleError."""
        with pytest.raises(MalformedArticleError) as exc_info:
            Article.from_element(_element("<article><translate>кот</translate></article>"))
        assert isinstance(exc_info.value, VocabularyModelError)

    def test_blank_source_raises(self):
        """A blank source attribute raises MalformedArticleError."""
        with pytest.raises(MalformedArticleError):
            Article.from_element(_element('<article source="  "/>'))

    def test_wrong_tag_raises(self):
        """Elements other than <article> are rejected."""
        with pytest.raises(MalformedArticleError):
            Article.from_element(_element('<entry source="cat"/>'))


class TestRecords:
    def test_to_record(self):
        """to_record returns a validated ArticleRecord."""
        record = Article("cat", ["кот"], ["The cat sat."]).to_record()
        assert record == ArticleRecord(source="cat", translates=["кот"], examples=["The cat sat."])

    def test_from_record(self):
        """from_record builds an equal article."""
        record = ArticleRecord(source="cat", translates=["кот"])
        assert Article.from_record(record) == Article("cat", ["кот"])
