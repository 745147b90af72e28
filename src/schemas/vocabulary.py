"""Vocabulary summary record."""

from pydantic import BaseModel


class VocabularySummary(BaseModel):
    """Listing entry for a known vocabulary.

    Attributes:
        name: Vocabulary name
        path: File the vocabulary is saved to
        article_count: Number of loaded articles
    """

    name: str
    path: str
    article_count: int = 0

    @classmethod
    def of(cls, vocabulary) -> "VocabularySummary":
        return cls(
            name=vocabulary.name,
            path=str(vocabulary.path),
            article_count=len(vocabulary),
        )
