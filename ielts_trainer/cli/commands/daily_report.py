"""CLI command for the daily review report."""

from ielts_trainer.exceptions import IeltsTrainerException
from ielts_trainer.orchestration import DailyReview
from ielts_trainer.presenters import ConsolePresenter
from ielts_trainer.services import GeminiClient, ReportService, ReviewSentenceBatcher, UsageStore

from .common import load_config, validate


def daily_report_command(args) -> int:
    """Execute the daily-report subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        config = load_config(args.config)
        if not validate(config, presenter):
            return 1

        review = DailyReview(
            usage_store=UsageStore(config.usage_record_path),
            batcher=ReviewSentenceBatcher(GeminiClient(config)),
            report_service=ReportService(config),
            presenter=presenter,
        )
        report_path = review.run(args.date)
        return 0 if report_path else 1

    except IeltsTrainerException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
