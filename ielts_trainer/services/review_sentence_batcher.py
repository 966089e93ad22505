"""Generate fresh review sentences for learned words in one request."""

import logging

from ielts_trainer.interfaces import TextGenerator
from ielts_trainer.models import Ok
from ielts_trainer.utils import clean_sentence

from .prompts import review_sentences_prompt
from .response_parser import decode_sentence_map

logger = logging.getLogger(__name__)

FALLBACK_TEMPLATE = "Review the usage of: {word}"


def fallback_sentence(word: str) -> str:
    """Placeholder used when no review sentence was generated for a word."""
    return FALLBACK_TEMPLATE.format(word=word)


class ReviewSentenceBatcher:
    """Map each learned word to a new example sentence (stateless service)."""

    def __init__(self, generator: TextGenerator):
        """Initialize the batcher.

        Args:
            generator: Text generator used for the batched request
        """
        self.generator = generator

    def generate_review_sentences(self, words: list[str]) -> dict[str, str]:
        """Request one sentence per word in a single call.

        Words missing from the response, or with an empty value, get the
        fallback sentence. If the request fails or the response cannot be
        decoded, every word gets the fallback sentence.

        Args:
            words: Words to review; duplicates and blanks are ignored

        Returns:
            Mapping of every input word to a sentence
        """
        unique_words = list(dict.fromkeys(w for w in words if w and w.strip()))
        if not unique_words:
            return {}

        outcome = self.generator.generate(review_sentences_prompt(unique_words))
        if not isinstance(outcome, Ok):
            logger.warning(f"Review sentence request failed: {outcome}")
            return {word: fallback_sentence(word) for word in unique_words}

        decoded = decode_sentence_map(outcome.value)
        if not isinstance(decoded, Ok):
            logger.warning(f"Could not decode review sentences: {decoded}")
            return {word: fallback_sentence(word) for word in unique_words}

        generated: dict[str, str] = decoded.value
        by_lower = {key.strip().lower(): value for key, value in generated.items()}

        sentences: dict[str, str] = {}
        missing = 0
        for word in unique_words:
            raw = generated.get(word)
            if raw is None:
                raw = by_lower.get(word.strip().lower())
            sentence = clean_sentence(raw)
            if not sentence:
                missing += 1
                sentence = fallback_sentence(word)
            sentences[word] = sentence

        if missing:
            logger.info(
                f"{missing} of {len(unique_words)} review sentences fell back to a placeholder"
            )
        return sentences
