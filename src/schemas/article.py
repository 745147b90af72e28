"""Article input record."""

from pydantic import BaseModel, field_validator

TRANSLATE_DELIMITER = ";"
EXAMPLE_DELIMITER = "\n"


def _split(text: str | None, delimiter: str) -> list[str]:
    if not text:
        return []
    return [part.strip() for part in text.split(delimiter) if part.strip()]


class ArticleRecord(BaseModel):
    """Validated field values for one dictionary entry.

    Attributes:
        source: Headword; surrounding whitespace is stripped and it must not
            be blank
        translates: Translations in display order
        examples: Usage examples in display order
    """

    source: str
    translates: list[str] = []
    examples: list[str] = []

    @field_validator("source")
    @classmethod
    def source_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("source must not be blank")
        return value

    @classmethod
    def from_text(
        cls,
        source: str,
        translates_text: str | None = None,
        examples_text: str | None = None,
    ) -> "ArticleRecord":
        """Build a record from free-text form fields.

        Translations are separated by semicolons and examples by newlines.
        Entries are trimmed and blank entries dropped.
        """
        return cls(
            source=source,
            translates=_split(translates_text, TRANSLATE_DELIMITER),
            examples=_split(examples_text, EXAMPLE_DELIMITER),
        )
