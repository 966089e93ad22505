"""Select fresh vocabulary without repeating recent words or sentences."""

import logging

from ielts_trainer.interfaces import TextGenerator
from ielts_trainer.models import Ok, SelectionResult, VocabularyWord
from ielts_trainer.utils import normalize_text

from .prompts import avoid_repetition_hint, word_batch_prompt
from .response_parser import decode_word_list
from .usage_store import UsageStore

logger = logging.getLogger(__name__)


class WordSelector:
    """Acquire unique vocabulary items from the generator.

    Requests candidates in a few bounded rounds and drops any candidate
    whose word or example sentence was seen within the exclusion window
    or earlier in the same selection. A candidate with a repeated sentence
    is discarded outright rather than sent back for a new sentence.
    """

    MAX_ATTEMPTS = 3
    FIRST_ROUND_EXTRA = 5  # Over-fetch to absorb duplicates
    LATER_ROUND_EXTRA = 3
    MAX_EMPTY_ROUNDS = 2

    def __init__(self, generator: TextGenerator, usage_store: UsageStore):
        """Initialize the selector.

        Args:
            generator: Text generator used to propose candidates
            usage_store: Store used for exclusion and for recording accepted items
        """
        self.generator = generator
        self.usage_store = usage_store

    def select_words(self, count: int, topics: list[str], exclude_days: int) -> SelectionResult:
        """Select up to ``count`` words not used within ``exclude_days`` days.

        Accepted words and sentences are recorded in the usage store as
        soon as they are accepted.

        Args:
            count: Number of words wanted
            topics: Topics the words should relate to
            exclude_days: Length of the exclusion window in days

        Returns:
            SelectionResult with at most ``count`` words
        """
        result = SelectionResult(requested=max(count, 0))
        if count <= 0:
            return result

        seen_words = set(self.usage_store.get_used_words_in_date_range(exclude_days))
        seen_sentences = set(self.usage_store.get_used_sentences_in_date_range(exclude_days))
        accepted = result.words
        empty_rounds = 0

        for attempt in range(self.MAX_ATTEMPTS):
            if len(accepted) >= count:
                break

            if attempt == 0:
                request_size = count + self.FIRST_ROUND_EXTRA
                hint = avoid_repetition_hint(seen_words)
            else:
                request_size = count - len(accepted) + self.LATER_ROUND_EXTRA
                hint = ""

            candidates = self._request_candidates(request_size, topics, hint)
            if not candidates:
                empty_rounds += 1
                if empty_rounds >= self.MAX_EMPTY_ROUNDS:
                    break
                continue
            empty_rounds = 0

            for candidate in candidates:
                if len(accepted) >= count:
                    break
                if self._accept(candidate, seen_words, seen_sentences):
                    accepted.append(candidate)

        del accepted[count:]

        if not result.is_complete:
            logger.warning(
                f"Only {len(accepted)} unique words found ({count} requested); "
                f"many recent words may already be used"
            )
        return result

    def _request_candidates(self, size: int, topics: list[str], hint: str) -> list[VocabularyWord]:
        """Ask the generator for one batch; failures yield no candidates."""
        outcome = self.generator.generate(word_batch_prompt(size, topics, hint))
        if not isinstance(outcome, Ok):
            logger.warning(f"Word request failed: {outcome}")
            return []

        decoded = decode_word_list(outcome.value)
        if not isinstance(decoded, Ok):
            logger.warning(f"Could not decode word list: {decoded}")
            return []
        return decoded.value

    def _accept(
        self,
        candidate: VocabularyWord,
        seen_words: set[str],
        seen_sentences: set[str],
    ) -> bool:
        """Check a candidate against the seen sets and record it if new."""
        word_key = normalize_text(candidate.word)
        if not word_key or word_key in seen_words:
            return False

        sentence_key = normalize_text(candidate.sentence)
        if sentence_key and sentence_key in seen_sentences:
            logger.debug(f"Dropping {candidate.word!r}: example sentence already used")
            return False

        seen_words.add(word_key)
        self.usage_store.record_word(candidate.word)
        if sentence_key:
            seen_sentences.add(sentence_key)
            self.usage_store.record_sentence(candidate.sentence)
        return True
