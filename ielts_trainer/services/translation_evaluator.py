"""Score the learner's translations with the text generator."""

import logging

from ielts_trainer.interfaces import TextGenerator
from ielts_trainer.models import Ok, VocabularyWord
from ielts_trainer.utils import remove_markdown_formatting

from .prompts import evaluation_prompt, translation_prompt
from .response_parser import decode_evaluations

logger = logging.getLogger(__name__)

SKIPPED_PREFIX = "(User skipped) "
MISSING_TRANSLATION = "（无法获取翻译）"


class TranslationEvaluator:
    """Evaluate quiz answers (stateless service)."""

    def __init__(self, generator: TextGenerator):
        """Initialize the evaluator.

        Args:
            generator: Text generator used for scoring and translation
        """
        self.generator = generator

    def evaluate(self, words: list[VocabularyWord]) -> list[VocabularyWord]:
        """Score answered items and fill in reference translations for skipped ones.

        Answered items are scored in one batched request. If that request
        fails or returns the wrong number of evaluations, the answered items
        are left unscored. Skipped items always score 0.

        Args:
            words: Quiz items with user translations

        Returns:
            The same list, updated in place
        """
        answered = [w for w in words if not w.is_skipped]
        if answered:
            self._score_answers(answered)

        for word in words:
            if word.is_skipped:
                word.score = 0
                if not word.corrected_translation:
                    word.corrected_translation = self.get_correct_translation(word.sentence)
                if not word.explanation.startswith(SKIPPED_PREFIX):
                    word.explanation = SKIPPED_PREFIX + word.explanation

        return words

    def get_correct_translation(self, sentence: str) -> str:
        """Get a reference Chinese translation for one sentence.

        Args:
            sentence: English sentence

        Returns:
            Translation, or a placeholder if none could be generated
        """
        if not sentence.strip():
            return MISSING_TRANSLATION

        outcome = self.generator.generate(translation_prompt(sentence))
        if not isinstance(outcome, Ok):
            logger.warning(f"Translation request failed: {outcome}")
            return MISSING_TRANSLATION

        translation = remove_markdown_formatting(outcome.value)
        return translation or MISSING_TRANSLATION

    def _score_answers(self, answered: list[VocabularyWord]) -> None:
        pairs = [
            {"originalSentence": w.sentence, "userTranslation": w.user_translation}
            for w in answered
        ]
        outcome = self.generator.generate(evaluation_prompt(pairs))
        if not isinstance(outcome, Ok):
            logger.warning(f"Evaluation request failed: {outcome}")
            return

        decoded = decode_evaluations(outcome.value)
        if not isinstance(decoded, Ok):
            logger.warning(f"Could not decode evaluation result: {decoded}")
            return

        evaluations = decoded.value
        if len(evaluations) != len(answered):
            logger.warning(
                f"Evaluation returned {len(evaluations)} results for {len(answered)} answers"
            )
            return

        for word, (score, corrected, explanation) in zip(answered, evaluations):
            word.score = score
            word.corrected_translation = corrected
            word.explanation = explanation
