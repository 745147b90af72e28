"""Pytest fixtures for wordbook tests."""

import pytest

SAMPLE_VOCABULARY_XML = """<?xml version='1.0' encoding='UTF-8'?>
<vocabulary name="english">
    <article source="cat">
        <translate>кот</translate>
        <translate>кошка</translate>
        <example>The cat sat.</example>
    </article>
    <article source="dog">
        <translate>собака</translate>
    </article>
</vocabulary>
"""


@pytest.fixture
def home_dir(tmp_path):
    """Empty vocabulary directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def sample_vocabulary_xml():
    """Well-formed vocabulary document with two articles."""
    return SAMPLE_VOCABULARY_XML


@pytest.fixture
def sample_vocabulary_file(home_dir, sample_vocabulary_xml):
    """english.xml written into the vocabulary directory."""
    path = home_dir / "english.xml"
    path.write_text(sample_vocabulary_xml, encoding="utf-8")
    return path


@pytest.fixture
def corrupt_article_file(home_dir):
    """Vocabulary file with one good article and one without a source."""
    path = home_dir / "mixed.xml"
    path.write_text(
        """<?xml version='1.0' encoding='UTF-8'?>
<vocabulary name="mixed">
    <article source="cat">
        <translate>кот</translate>
    </article>
    <article>
        <translate>потерянный</translate>
    </article>
</vocabulary>
""",
        encoding="utf-8",
    )
    return path
