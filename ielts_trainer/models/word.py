"""Data models for vocabulary words."""

from dataclasses import dataclass
from datetime import datetime

from .usage import WordLearningRecord


@dataclass
class VocabularyWord:
    """A vocabulary item proposed by the generator and used in a quiz."""

    word: str
    phonetics: str = ""  # IPA, US pronunciation
    definition: str = ""  # Part of speech and Chinese meaning
    sentence: str = ""  # Example sentence the learner translates
    user_translation: str = ""
    score: int = 0  # 0-10, filled in by evaluation
    corrected_translation: str = ""
    explanation: str = ""
    is_skipped: bool = False

    def to_learning_record(self, date: datetime | None = None) -> WordLearningRecord:
        """Build the immutable learning record for this item.

        Args:
            date: When the item was learned (defaults to now)

        Returns:
            WordLearningRecord
        """
        return WordLearningRecord(
            word=self.word,
            sentence=self.sentence,
            date=date or datetime.now(),
            score=self.score,
            user_translation=self.user_translation,
            corrected_translation=self.corrected_translation,
            explanation=self.explanation,
            is_skipped=self.is_skipped,
        )

    def __str__(self) -> str:
        return f"{self.word} {self.phonetics}".strip()
