"""Data model for daily review rows."""

from dataclasses import dataclass

from .usage import WordLearningRecord


@dataclass(frozen=True)
class ReviewItem:
    """A learned word paired with a fresh review sentence."""

    record: WordLearningRecord
    review_sentence: str

    @property
    def word(self) -> str:
        return self.record.word
