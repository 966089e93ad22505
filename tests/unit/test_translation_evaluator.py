"""Tests for translation_evaluator module."""

import json

from ielts_trainer.models import Ok, ServiceError
from ielts_trainer.services.translation_evaluator import (
    MISSING_TRANSLATION,
    SKIPPED_PREFIX,
    TranslationEvaluator,
)


def _evaluations(*scores):
    return Ok(
        json.dumps(
            [
                {
                    "score": score,
                    "correctedTranslation": f"译文{score}",
                    "explanation": f"Explanation {score}",
                }
                for score in scores
            ],
            ensure_ascii=False,
        )
    )


class TestEvaluate:
    """Tests for TranslationEvaluator.evaluate."""

    def test_scores_answered_items(self, scripted_generator, make_vocabulary_word):
        """Answered items get score, correction and explanation in order."""
        words = [
            make_vocabulary_word("abate", user_translation="减弱"),
            make_vocabulary_word("deter", user_translation="阻止"),
        ]
        generator = scripted_generator(_evaluations(9, 4))

        TranslationEvaluator(generator).evaluate(words)

        assert [w.score for w in words] == [9, 4]
        assert [w.corrected_translation for w in words] == ["译文9", "译文4"]
        assert words[1].explanation == "Explanation 4"
        assert generator.call_count == 1
        assert "减弱" in generator.prompts[0]

    def test_skipped_items(self, scripted_generator, make_vocabulary_word):
        """Skipped items score 0 and receive a reference translation."""
        words = [make_vocabulary_word("abate", is_skipped=True)]
        generator = scripted_generator(Ok("风暴**减弱**了。"))

        TranslationEvaluator(generator).evaluate(words)

        assert words[0].score == 0
        assert words[0].corrected_translation == "风暴减弱了。"
        assert words[0].explanation.startswith(SKIPPED_PREFIX)

    def test_skipped_prefix_added_once(self, scripted_generator, make_vocabulary_word):
        """Evaluating the same items twice does not repeat the skipped prefix."""
        words = [make_vocabulary_word("abate", is_skipped=True)]
        evaluator = TranslationEvaluator(scripted_generator(Ok("风暴减弱了。")))

        evaluator.evaluate(words)
        evaluator.evaluate(words)

        assert words[0].explanation.count(SKIPPED_PREFIX.strip()) == 1

    def test_mixed_items(self, scripted_generator, make_vocabulary_word):
        """Only answered items are sent for scoring."""
        words = [
            make_vocabulary_word("abate", user_translation="减弱"),
            make_vocabulary_word("deter", is_skipped=True),
        ]
        generator = scripted_generator(_evaluations(7), Ok("阻止。"))

        TranslationEvaluator(generator).evaluate(words)

        assert words[0].score == 7
        assert words[1].score == 0
        assert words[1].corrected_translation == "阻止。"
        assert generator.call_count == 2

    def test_length_mismatch_leaves_unscored(self, scripted_generator, make_vocabulary_word):
        """A response with the wrong number of evaluations is ignored."""
        words = [
            make_vocabulary_word("abate", user_translation="减弱"),
            make_vocabulary_word("deter", user_translation="阻止"),
        ]
        generator = scripted_generator(_evaluations(9))

        TranslationEvaluator(generator).evaluate(words)

        assert [w.score for w in words] == [0, 0]
        assert [w.corrected_translation for w in words] == ["", ""]

    def test_request_failure_leaves_unscored(self, scripted_generator, make_vocabulary_word):
        """A failed request does not raise."""
        words = [make_vocabulary_word("abate", user_translation="减弱")]
        generator = scripted_generator(ServiceError(500, "down"))

        result = TranslationEvaluator(generator).evaluate(words)

        assert result is words
        assert words[0].score == 0

    def test_empty_list(self, scripted_generator):
        """Nothing to evaluate makes no request."""
        generator = scripted_generator()
        assert TranslationEvaluator(generator).evaluate([]) == []
        assert generator.call_count == 0


class TestGetCorrectTranslation:
    """Tests for TranslationEvaluator.get_correct_translation."""

    def test_returns_translation(self, scripted_generator):
        """Should return the cleaned translation."""
        generator = scripted_generator(Ok("  这是翻译。 "))
        assert TranslationEvaluator(generator).get_correct_translation("This.") == "这是翻译。"

    def test_failure_gives_placeholder(self, scripted_generator):
        """A failed request gives the placeholder text."""
        generator = scripted_generator(ServiceError(None, "timeout"))
        result = TranslationEvaluator(generator).get_correct_translation("This.")
        assert result == MISSING_TRANSLATION

    def test_blank_sentence_makes_no_request(self, scripted_generator):
        """A blank sentence gives the placeholder without a request."""
        generator = scripted_generator()
        assert TranslationEvaluator(generator).get_correct_translation("  ") == MISSING_TRANSLATION
        assert generator.call_count == 0
