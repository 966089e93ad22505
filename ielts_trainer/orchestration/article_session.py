"""Orchestrator for the daily reading article."""

from pathlib import Path

from ielts_trainer.config import IeltsTrainerConfig
from ielts_trainer.interfaces import PresenterProtocol, ProgressCallback
from ielts_trainer.services import ArticleService, ReportService

REPORT_PREFIX = "IELTS_Article"


class ArticleSession:
    """Generate the daily article and write it as a report."""

    def __init__(
        self,
        config: IeltsTrainerConfig,
        article_service: ArticleService,
        report_service: ReportService,
        presenter: PresenterProtocol,
    ):
        self.config = config
        self.article_service = article_service
        self.report_service = report_service
        self.presenter = presenter

    def run(self, progress_callback: ProgressCallback | None = None) -> Path | None:
        """Generate and write the article.

        Args:
            progress_callback: Optional callback for progress reporting

        Returns:
            Path of the written report, or None if no article was generated
        """
        topics = [t.strip() for t in self.config.topics if isinstance(t, str) and t.strip()]
        article = self.article_service.generate_daily_article(
            topics, self.config.article_key_words_count, progress_callback
        )

        if not article.has_content:
            self.presenter.show_error("Failed to generate the article. Please try again later.")
            return None

        if not article.translation:
            self.presenter.show_warning("The translation could not be generated.")
        if not article.key_words:
            self.presenter.show_warning("No key words could be extracted.")

        html = self.report_service.render_article_report(article)
        report_path = self.report_service.write_report(html, REPORT_PREFIX)
        self.presenter.show_success(f"Article report generated: {report_path}")
        return report_path
