"""Pytest configuration and shared fixtures."""

import json
from datetime import date

import pytest

from ielts_trainer.config import IeltsTrainerConfig
from ielts_trainer.models import ServiceError, VocabularyWord
from ielts_trainer.presenters import NullPresenter, NullProgressCallback
from ielts_trainer.services import UsageStore

TODAY = date(2024, 5, 20)


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return IeltsTrainerConfig(
        google_api_key="test-key",
        word_count=3,
        topics=["Education", "Technology"],
        exclude_days=7,
        article_key_words_count=2,
        usage_record_path=temp_dir / "usage_record.json",
        report_dir=temp_dir / "reports",
        max_retries=2,
        retry_delay=0.0,
        request_timeout=5.0,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def null_progress():
    """Provide a null progress callback for testing."""
    return NullProgressCallback()


class ScriptedGenerator:
    """A TextGenerator that replays queued results and records every prompt.

    Once the script runs out, every call returns a ServiceError.
    """

    def __init__(self, results=None):
        self.results = list(results or [])
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.results:
            return self.results.pop(0)
        return ServiceError(None, "script exhausted")

    @property
    def call_count(self):
        return len(self.prompts)


@pytest.fixture
def scripted_generator():
    """Factory fixture for generators that replay a list of results."""

    def _make(*results):
        return ScriptedGenerator(results)

    return _make


@pytest.fixture
def word_batch_json():
    """Factory fixture that builds a generator word-list response.

    Each argument is a word, or a (word, sentence) tuple. Words without an
    explicit sentence get one that is unique to the word.
    """

    def _make(*entries):
        items = []
        for entry in entries:
            word, sentence = entry if isinstance(entry, tuple) else (entry, None)
            items.append(
                {
                    "word": word,
                    "phonetics": f"/{word}/",
                    "definition": f"n. {word} 的释义",
                    "sentence": sentence or f"This sentence shows how to use {word}.",
                }
            )
        return json.dumps(items, ensure_ascii=False)

    return _make


@pytest.fixture
def make_vocabulary_word():
    """Factory fixture for creating VocabularyWord instances with sensible defaults."""

    def _make(word="ubiquitous", sentence=None, **kwargs):
        return VocabularyWord(
            word=word,
            phonetics=kwargs.pop("phonetics", f"/{word}/"),
            definition=kwargs.pop("definition", "adj. 普遍存在的"),
            sentence=sentence or f"This sentence shows how to use {word}.",
            **kwargs,
        )

    return _make


@pytest.fixture
def today():
    """Provide the fixed date used as "today" by the usage store fixture."""
    return TODAY


@pytest.fixture
def usage_store(test_config):
    """Provide a usage store on a temporary file with a fixed today."""
    return UsageStore(test_config.usage_record_path, today=TODAY)


class RecordingProgress:
    """A real ProgressCallback implementation that records all calls for assertion."""

    def __init__(self):
        self.starts = []
        self.progresses = []
        self.completes = 0
        self.errors = []

    def on_start(self, total: int, description: str) -> None:
        self.starts.append((total, description))

    def on_progress(self, current: int, item_description: str) -> None:
        self.progresses.append((current, item_description))

    def on_complete(self) -> None:
        self.completes += 1

    def on_error(self, item_description: str, error_message: str) -> None:
        self.errors.append((item_description, error_message))


@pytest.fixture
def recording_progress():
    """Provide a progress callback that records all calls for assertion."""
    return RecordingProgress()
