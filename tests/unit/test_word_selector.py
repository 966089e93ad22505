"""Tests for word_selector module."""

import logging
from datetime import datetime

import pytest

from ielts_trainer.models import Malformed, Ok, ServiceError, WordLearningRecord
from ielts_trainer.services.word_selector import WordSelector

TOPICS = ["Education", "Technology"]


@pytest.fixture
def seed_learned(usage_store, today):
    """Record words as learned today so they fall inside the exclusion window."""

    def _seed(*words):
        usage_store.record_word_learnings(
            WordLearningRecord(
                word=word,
                sentence=f"This sentence shows how to use {word}.",
                date=datetime(today.year, today.month, today.day, 9, 0, 0),
            )
            for word in words
        )

    return _seed


# ---------------------------------------------------------------------------
# TestSelectWords
# ---------------------------------------------------------------------------


class TestSelectWords:
    """Tests for WordSelector.select_words."""

    def test_full_batch_in_one_call(self, usage_store, scripted_generator, word_batch_json):
        """Five distinct candidates for count=5 should all be accepted in one round."""
        words = ["abate", "benign", "candid", "deter", "elicit"]
        generator = scripted_generator(Ok(word_batch_json(*words)))
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(5, TOPICS, 7)

        assert [w.word for w in result.words] == words
        assert result.is_complete
        assert generator.call_count == 1
        for w in result.words:
            assert usage_store.is_word_used(w.word)
            assert usage_store.is_sentence_used(w.sentence)

    def test_excludes_recently_learned_words(
        self, usage_store, scripted_generator, word_batch_json, seed_learned
    ):
        """Words learned within the window must never be selected again."""
        seed_learned("alpha", "beta")
        batch = Ok(word_batch_json("alpha", "beta", "gamma"))
        generator = scripted_generator(batch, batch, batch)
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(3, TOPICS, 7)

        assert [w.word for w in result.words] == ["gamma"]

    def test_words_outside_window_may_return(
        self, usage_store, scripted_generator, word_batch_json
    ):
        """Words only in the flat set, with no dated record, are not excluded."""
        usage_store.record_word("alpha")
        generator = scripted_generator(Ok(word_batch_json("alpha")))
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(1, TOPICS, 7)

        assert [w.word for w in result.words] == ["alpha"]

    def test_excludes_recently_used_sentences(
        self, usage_store, scripted_generator, word_batch_json, seed_learned
    ):
        """A new word with an already used example sentence is dropped outright."""
        seed_learned("alpha")
        reused = "This sentence shows how to use alpha."
        generator = scripted_generator(
            Ok(word_batch_json(("omega", reused), "sigma")),
        )
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(2, TOPICS, 7)

        assert [w.word for w in result.words] == ["sigma"]
        assert not usage_store.is_word_used("omega")

    def test_duplicates_within_selection(self, usage_store, scripted_generator, word_batch_json):
        """Spelling variants in one batch count as the same word."""
        generator = scripted_generator(
            Ok(word_batch_json("Alpha", ("alpha!", "A different sentence."), "beta"))
        )
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(2, TOPICS, 7)

        assert [w.word for w in result.words] == ["Alpha", "beta"]

    def test_duplicate_sentence_within_batch(
        self, usage_store, scripted_generator, word_batch_json
    ):
        """Two candidates sharing one sentence keep only the first."""
        shared = "Same sentence for both."
        generator = scripted_generator(Ok(word_batch_json(("one", shared), ("two", shared))))
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(2, TOPICS, 7)

        assert [w.word for w in result.words] == ["one"]

    def test_blank_words_are_skipped(self, usage_store, scripted_generator, word_batch_json):
        """Candidates with a blank word are ignored."""
        generator = scripted_generator(Ok(word_batch_json(" ", "valid")))
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(1, TOPICS, 7)

        assert [w.word for w in result.words] == ["valid"]

    @pytest.mark.parametrize("count", [0, 1, 2, 4])
    def test_never_exceeds_count(self, count, usage_store, scripted_generator, word_batch_json):
        """The result never holds more than the requested number of words."""
        batch = Ok(word_batch_json("a1", "a2", "a3", "a4", "a5", "a6", "a7", "a8"))
        generator = scripted_generator(batch)
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(count, TOPICS, 7)

        assert len(result) <= count

    def test_stops_accepting_once_full(self, usage_store, scripted_generator, word_batch_json):
        """Candidates beyond the count are not recorded as used."""
        generator = scripted_generator(Ok(word_batch_json("first", "second", "third")))
        selector = WordSelector(generator, usage_store)

        selector.select_words(2, TOPICS, 7)

        assert usage_store.is_word_used("second")
        assert not usage_store.is_word_used("third")

    def test_zero_count_makes_no_request(self, usage_store, scripted_generator):
        """count=0 should return immediately."""
        generator = scripted_generator()
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(0, TOPICS, 7)

        assert result.words == []
        assert generator.call_count == 0

    def test_negative_count(self, usage_store, scripted_generator):
        """A negative count behaves like zero."""
        result = WordSelector(scripted_generator(), usage_store).select_words(-3, TOPICS, 7)
        assert len(result) == 0
        assert result.requested == 0


# ---------------------------------------------------------------------------
# TestRounds
# ---------------------------------------------------------------------------


class TestRounds:
    """Tests for the bounded request rounds."""

    def test_request_sizes(self, usage_store, scripted_generator, word_batch_json):
        """Round 0 over-fetches by 5, later rounds ask for remaining + 3."""
        generator = scripted_generator(
            Ok(word_batch_json("one")),
            Ok(word_batch_json("two", "three")),
        )
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(3, TOPICS, 7)

        assert len(result) == 3
        assert "provide 8 IELTS" in generator.prompts[0]
        assert "provide 5 IELTS" in generator.prompts[1]

    def test_hint_only_in_first_round(
        self, usage_store, scripted_generator, word_batch_json, seed_learned
    ):
        """Only the first request carries the list of words to avoid."""
        seed_learned("alpha")
        generator = scripted_generator(Ok(word_batch_json("one")), Ok(word_batch_json("two")))
        selector = WordSelector(generator, usage_store)

        selector.select_words(2, TOPICS, 7)

        assert "AVOID REPETITION" in generator.prompts[0]
        assert "alpha" in generator.prompts[0]
        assert "AVOID REPETITION" not in generator.prompts[1]

    def test_no_hint_without_history(self, usage_store, scripted_generator, word_batch_json):
        """With nothing to avoid, the first request has no hint."""
        generator = scripted_generator(Ok(word_batch_json("one")))
        WordSelector(generator, usage_store).select_words(1, TOPICS, 7)
        assert "AVOID REPETITION" not in generator.prompts[0]

    def test_prompt_names_topics(self, usage_store, scripted_generator, word_batch_json):
        """The request mentions every topic."""
        generator = scripted_generator(Ok(word_batch_json("one")))
        WordSelector(generator, usage_store).select_words(1, TOPICS, 7)
        assert "Education, Technology" in generator.prompts[0]

    def test_at_most_three_rounds(self, usage_store, scripted_generator, word_batch_json, caplog):
        """Repeated candidates end after three rounds with a shortfall warning."""
        batch = Ok(word_batch_json("same", "again"))
        generator = scripted_generator(batch, batch, batch, batch)
        selector = WordSelector(generator, usage_store)

        with caplog.at_level(logging.WARNING, logger="ielts_trainer.services.word_selector"):
            result = selector.select_words(5, TOPICS, 7)

        assert [w.word for w in result.words] == ["same", "again"]
        assert generator.call_count == 3
        assert result.shortfall == 3
        assert not result.is_complete
        assert "Only 2 unique words" in caplog.text

    def test_two_failed_rounds_end_early(self, usage_store, scripted_generator):
        """Two consecutive failures stop the loop before the third round."""
        generator = scripted_generator(
            ServiceError(503, "unavailable"), ServiceError(None, "timeout")
        )
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(3, TOPICS, 7)

        assert result.words == []
        assert generator.call_count == 2

    def test_malformed_counts_as_empty(self, usage_store, scripted_generator):
        """Undecodable responses are treated like failed rounds."""
        generator = scripted_generator(Ok("Sorry, I cannot help."), Malformed("", "no text"))
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(3, TOPICS, 7)

        assert result.words == []
        assert generator.call_count == 2

    def test_failure_then_success(self, usage_store, scripted_generator, word_batch_json):
        """A single failed round does not abort selection."""
        generator = scripted_generator(
            ServiceError(429, "rate limited"),
            Ok(word_batch_json("one", "two")),
        )
        selector = WordSelector(generator, usage_store)

        result = selector.select_words(2, TOPICS, 7)

        assert [w.word for w in result.words] == ["one", "two"]
        assert generator.call_count == 2

    def test_fenced_json_is_accepted(self, usage_store, scripted_generator, word_batch_json):
        """Code-fenced JSON from the generator still decodes."""
        fenced = "```json\n" + word_batch_json("fenced") + "\n```"
        generator = scripted_generator(Ok(fenced))

        result = WordSelector(generator, usage_store).select_words(1, TOPICS, 7)

        assert [w.word for w in result.words] == ["fenced"]
