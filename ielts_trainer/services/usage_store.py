"""JSON-backed record of used words, sentences and learning history."""

import json
import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from pathlib import Path

from ielts_trainer.models import DATE_KEY_FORMAT, UsageRecord, WordLearningRecord, date_key
from ielts_trainer.utils import normalize_text

logger = logging.getLogger(__name__)


class UsageStore:
    """Persistent store of everything the learner has already seen.

    Holds two views of the same history: flat sets of normalized words and
    sentences for fast duplicate checks, and a per-day log of scored
    learning records for review reports and date-bounded exclusion.

    The record is loaded once at construction and written back after every
    mutation. There is no locking; only one process should use a given file.
    """

    def __init__(self, record_path: Path, today: date | None = None):
        """Initialize the store and load the record file.

        Args:
            record_path: Path to the JSON record file
            today: Fixed "today" for date-range queries (defaults to the
                current date on each query)
        """
        self.record_path = record_path
        self._today = today
        self._record = self.load()

    @property
    def record(self) -> UsageRecord:
        """The in-memory usage record."""
        return self._record

    def load(self) -> UsageRecord:
        """Read the record file.

        Returns:
            The stored record, or an empty record if the file is missing or
            cannot be read
        """
        if not self.record_path.exists():
            return UsageRecord()

        try:
            with self.record_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise TypeError("usage record must be a JSON object")
            return UsageRecord.from_dict(data)
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Could not load usage record {self.record_path}, starting empty: {e}")
            return UsageRecord()

    def save(self) -> bool:
        """Write the full record to disk.

        Returns:
            True if the file was written, False if writing failed
        """
        try:
            self.record_path.parent.mkdir(parents=True, exist_ok=True)
            with self.record_path.open("w", encoding="utf-8") as f:
                json.dump(self._record.to_dict(), f, indent=2, ensure_ascii=False)
            return True
        except OSError as e:
            logger.warning(f"Could not save usage record {self.record_path}: {e}")
            return False

    # ------------------------------------------------------------------
    # Flat word/sentence sets
    # ------------------------------------------------------------------

    def record_word(self, word: str) -> None:
        """Mark a word as used."""
        if self._add_word(word):
            self.save()

    def record_words(self, words: Iterable[str]) -> None:
        """Mark several words as used with a single save."""
        changed = False
        for word in words:
            changed = self._add_word(word) or changed
        if changed:
            self.save()

    def record_sentence(self, sentence: str) -> None:
        """Mark a sentence as used."""
        if self._add_sentence(sentence):
            self.save()

    def record_sentences(self, sentences: Iterable[str]) -> None:
        """Mark several sentences as used with a single save."""
        changed = False
        for sentence in sentences:
            changed = self._add_sentence(sentence) or changed
        if changed:
            self.save()

    def is_word_used(self, word: str) -> bool:
        key = normalize_text(word)
        return bool(key) and key in self._record.used_words

    def is_sentence_used(self, sentence: str) -> bool:
        key = normalize_text(sentence)
        return bool(key) and key in self._record.used_sentences

    def get_statistics(self) -> tuple[int, int]:
        """Return (used word count, used sentence count)."""
        return len(self._record.used_words), len(self._record.used_sentences)

    def reset(self, clear_history: bool = False) -> None:
        """Clear the used word and sentence sets.

        The dated learning log is kept unless clear_history is True. While
        it is kept, date-range queries still report those words, so they
        stay excluded from selection until they age out of the window.

        Args:
            clear_history: Also delete all daily learning records
        """
        self._record.used_words.clear()
        self._record.used_sentences.clear()
        self._record.last_updated = None
        if clear_history:
            self._record.daily_records.clear()
        self.save()

    # ------------------------------------------------------------------
    # Dated learning log
    # ------------------------------------------------------------------

    def record_word_learning(self, record: WordLearningRecord) -> None:
        """Append a scored item to its day and mark its word and sentence used."""
        self._add_learning(record)
        self.save()

    def record_word_learnings(self, records: Iterable[WordLearningRecord]) -> None:
        """Append several scored items with a single save."""
        count = 0
        for record in records:
            self._add_learning(record)
            count += 1
        if count:
            self.save()

    def get_daily_records(self, key: str) -> list[WordLearningRecord]:
        """Return the learning records stored for a ``YYYY-MM-DD`` key."""
        return list(self._record.daily_records.get(key, []))

    def get_today_records(self) -> list[WordLearningRecord]:
        return self.get_daily_records(self.today().strftime(DATE_KEY_FORMAT))

    def get_used_words_in_date_range(self, days: int) -> set[str]:
        """Normalized words learned within the last ``days`` calendar days.

        A day exactly ``days`` before today is included; one day earlier is
        not. ``days=0`` covers today only.
        """
        return {
            normalize_text(record.word)
            for record in self._records_since(days)
            if normalize_text(record.word)
        }

    def get_used_sentences_in_date_range(self, days: int) -> set[str]:
        """Normalized sentences learned within the last ``days`` calendar days."""
        return {
            normalize_text(record.sentence)
            for record in self._records_since(days)
            if normalize_text(record.sentence)
        }

    def today(self) -> date:
        return self._today or date.today()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _add_word(self, word: str) -> bool:
        key = normalize_text(word)
        if not key:
            return False
        self._record.used_words.add(key)
        self._record.last_updated = datetime.now()
        return True

    def _add_sentence(self, sentence: str) -> bool:
        key = normalize_text(sentence)
        if not key:
            return False
        self._record.used_sentences.add(key)
        self._record.last_updated = datetime.now()
        return True

    def _add_learning(self, record: WordLearningRecord) -> None:
        self._record.daily_records.setdefault(date_key(record.date), []).append(record)
        self._add_word(record.word)
        self._add_sentence(record.sentence)
        self._record.last_updated = datetime.now()

    def _records_since(self, days: int) -> list[WordLearningRecord]:
        cutoff = self.today() - timedelta(days=max(days, 0))
        matched: list[WordLearningRecord] = []
        for key, records in self._record.daily_records.items():
            try:
                day = datetime.strptime(key, DATE_KEY_FORMAT).date()
            except ValueError:
                logger.debug(f"Skipping unparseable date key in usage record: {key!r}")
                continue
            if day >= cutoff:
                matched.extend(records)
        return matched
