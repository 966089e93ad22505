"""Data models for the usage record."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ielts_trainer.utils.text_utils import normalize_text

DATE_KEY_FORMAT = "%Y-%m-%d"


def _normalized_set(data: dict[str, Any], key: str) -> set[str]:
    """Read a persisted list of keys, normalizing each entry."""
    values = data.get(key) or []
    if not isinstance(values, list):
        raise TypeError(f"{key} must be a list")
    keys = {normalize_text(str(value)) for value in values}
    keys.discard("")
    return keys


def date_key(value: datetime) -> str:
    """Return the ``YYYY-MM-DD`` key for a timestamp."""
    return value.strftime(DATE_KEY_FORMAT)


@dataclass(frozen=True)
class WordLearningRecord:
    """One scored vocabulary item from a learning session."""

    word: str
    sentence: str
    date: datetime
    score: int = 0
    user_translation: str = ""
    corrected_translation: str = ""
    explanation: str = ""
    is_skipped: bool = False

    @property
    def date_key(self) -> str:
        """Key of the day this record belongs to."""
        return date_key(self.date)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "sentence": self.sentence,
            "date": self.date.isoformat(timespec="seconds"),
            "score": self.score,
            "user_translation": self.user_translation,
            "corrected_translation": self.corrected_translation,
            "explanation": self.explanation,
            "is_skipped": self.is_skipped,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WordLearningRecord":
        """Rebuild a record from its persisted form.

        Raises:
            KeyError: If the word or date is missing
            ValueError: If the date or score cannot be parsed
        """
        return cls(
            word=str(data["word"]),
            sentence=str(data.get("sentence", "")),
            date=datetime.fromisoformat(data["date"]),
            score=int(data.get("score", 0)),
            user_translation=str(data.get("user_translation", "")),
            corrected_translation=str(data.get("corrected_translation", "")),
            explanation=str(data.get("explanation", "")),
            is_skipped=bool(data.get("is_skipped", False)),
        )


@dataclass
class UsageRecord:
    """Words and sentences already shown, plus the dated learning log."""

    used_words: set[str] = field(default_factory=set)
    used_sentences: set[str] = field(default_factory=set)
    daily_records: dict[str, list[WordLearningRecord]] = field(default_factory=dict)
    last_updated: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "used_words": sorted(self.used_words),
            "used_sentences": sorted(self.used_sentences),
            "daily_records": {
                key: [record.to_dict() for record in records]
                for key, records in sorted(self.daily_records.items())
            },
            "last_updated": (
                self.last_updated.isoformat(timespec="seconds") if self.last_updated else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UsageRecord":
        """Rebuild a usage record from its persisted form.

        Raises:
            KeyError, TypeError, ValueError: If the data has the wrong shape
        """
        last_updated = data.get("last_updated")
        daily = data.get("daily_records") or {}
        if not isinstance(daily, dict):
            raise TypeError("daily_records must be an object")

        return cls(
            used_words=_normalized_set(data, "used_words"),
            used_sentences=_normalized_set(data, "used_sentences"),
            daily_records={
                str(key): [WordLearningRecord.from_dict(item) for item in items]
                for key, items in daily.items()
            },
            last_updated=datetime.fromisoformat(last_updated) if last_updated else None,
        )
