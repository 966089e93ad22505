"""Data model for the daily reading article."""

from dataclasses import dataclass, field

from .word import VocabularyWord


@dataclass
class Article:
    """A generated article with its translation and key words."""

    topic: str
    title: str = ""
    content: str = ""
    translation: str = ""
    key_words: list[VocabularyWord] = field(default_factory=list)

    @property
    def has_content(self) -> bool:
        """Check if the article body was generated."""
        return bool(self.content.strip())

    @property
    def paragraphs(self) -> list[str]:
        """Non-empty paragraphs of the article body."""
        return [p.strip() for p in self.content.split("\n") if p.strip()]

    @property
    def translation_paragraphs(self) -> list[str]:
        """Non-empty paragraphs of the translation."""
        return [p.strip() for p in self.translation.split("\n") if p.strip()]
