"""Orchestrator for the daily review report."""

from datetime import datetime
from pathlib import Path

from ielts_trainer.exceptions import ValidationError
from ielts_trainer.interfaces import PresenterProtocol
from ielts_trainer.models import DATE_KEY_FORMAT, ReviewItem
from ielts_trainer.services import ReportService, ReviewSentenceBatcher, UsageStore

REPORT_PREFIX = "IELTS_Daily_Report"


class DailyReview:
    """Build the review report for everything learned on one day."""

    def __init__(
        self,
        usage_store: UsageStore,
        batcher: ReviewSentenceBatcher,
        report_service: ReportService,
        presenter: PresenterProtocol,
    ):
        self.usage_store = usage_store
        self.batcher = batcher
        self.report_service = report_service
        self.presenter = presenter

    def run(self, day: str | None = None) -> Path | None:
        """Generate the review report for a day.

        Args:
            day: Date as ``YYYY-MM-DD`` (defaults to today)

        Returns:
            Path of the written report, or None if there are no records

        Raises:
            ValidationError: If ``day`` is not a valid date
        """
        key = self.parse_day(day) if day else self.usage_store.today().strftime(DATE_KEY_FORMAT)
        records = [r for r in self.usage_store.get_daily_records(key) if r.word.strip()]

        if not records:
            self.presenter.show_warning(f"No learning records for {key}; nothing to review.")
            return None

        self.presenter.show_info(f"\nGenerating review sentences for {len(records)} words...")
        sentences = self.batcher.generate_review_sentences([r.word for r in records])
        items = [ReviewItem(record=r, review_sentence=sentences[r.word]) for r in records]

        html = self.report_service.render_daily_report(key, items)
        report_path = self.report_service.write_report(html, REPORT_PREFIX)
        self.presenter.show_success(f"Daily report generated: {report_path}")
        return report_path

    @staticmethod
    def parse_day(day: str) -> str:
        """Validate a ``YYYY-MM-DD`` string and return it in canonical form."""
        try:
            return datetime.strptime(day.strip(), DATE_KEY_FORMAT).strftime(DATE_KEY_FORMAT)
        except ValueError as e:
            raise ValidationError(f"Invalid date '{day}', expected YYYY-MM-DD") from e
