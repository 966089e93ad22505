"""Orchestrator for a vocabulary translation quiz."""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ielts_trainer.config import IeltsTrainerConfig
from ielts_trainer.interfaces import PresenterProtocol
from ielts_trainer.models import VocabularyWord
from ielts_trainer.services import (
    ReportService,
    TranslationEvaluator,
    UsageStore,
    WordSelector,
)

SKIP_ANSWER = "pass"
REPORT_PREFIX = "IELTS_Report"


class VocabularySession:
    """Run one quiz: select words, collect answers, score, record, report."""

    def __init__(
        self,
        config: IeltsTrainerConfig,
        selector: WordSelector,
        evaluator: TranslationEvaluator,
        usage_store: UsageStore,
        report_service: ReportService,
        presenter: PresenterProtocol,
    ):
        """Initialize the session.

        Args:
            config: Configuration (word count, topics, exclusion window)
            selector: Service that picks fresh words
            evaluator: Service that scores translations
            usage_store: Store that receives the learning records
            report_service: Service that writes the HTML report
            presenter: Output presenter
        """
        self.config = config
        self.selector = selector
        self.evaluator = evaluator
        self.usage_store = usage_store
        self.report_service = report_service
        self.presenter = presenter

    def run(self, input_func: Callable[[str], str] = input) -> Path | None:
        """Run the quiz.

        Args:
            input_func: Reads one answer given a prompt (``input`` by default)

        Returns:
            Path of the written report, or None if no words could be selected
        """
        topics = [t.strip() for t in self.config.topics if isinstance(t, str) and t.strip()]
        self.presenter.show_info(
            f"\nFetching {self.config.word_count} new IELTS words for you... Please wait."
        )
        selection = self.selector.select_words(
            self.config.word_count, topics, self.config.exclude_days
        )

        if not selection.words:
            self.presenter.show_error(
                "Failed to fetch words. Please check your API key, network connection "
                "and API quota."
            )
            return None

        if not selection.is_complete:
            self.presenter.show_warning(
                f"Got {len(selection.words)} unique words ({selection.requested} requested). "
                f"Many recent words are already used; consider 'usage reset'."
            )

        words = selection.words
        self.presenter.show_success(f"Fetched {len(words)} words. Let's begin!")
        self.ask_questions(words, input_func)

        self.presenter.show_info("\nEvaluating your answers... Please wait.")
        self.evaluator.evaluate(words)

        self.record_learning(words)

        html = self.report_service.render_words_report(words)
        report_path = self.report_service.write_report(html, REPORT_PREFIX)
        self.presenter.show_success(f"Report generated: {report_path}")
        return report_path

    def ask_questions(
        self, words: list[VocabularyWord], input_func: Callable[[str], str]
    ) -> None:
        """Show each question and store the learner's answer on the item."""
        for index, word in enumerate(words, 1):
            self.presenter.show_question(index, len(words), word)
            answer = input_func("\nYour translation: ").strip()
            if answer.lower() == SKIP_ANSWER:
                word.is_skipped = True
                self.presenter.show_info("Question skipped.")
            else:
                word.user_translation = answer

    def record_learning(self, words: list[VocabularyWord], when: datetime | None = None) -> None:
        """Persist every quiz item as a learning record for today."""
        learned_at = when or datetime.now()
        self.usage_store.record_word_learnings(w.to_learning_record(learned_at) for w in words)
