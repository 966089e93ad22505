"""CLI command for the daily reading article."""

from ielts_trainer.exceptions import IeltsTrainerException
from ielts_trainer.orchestration import ArticleSession
from ielts_trainer.presenters import ConsolePresenter, ConsoleProgressCallback
from ielts_trainer.services import ArticleService, GeminiClient, ReportService

from .common import load_config, validate


def article_command(args) -> int:
    """Execute the article subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    progress = ConsoleProgressCallback()

    try:
        config = load_config(args.config)
        if not validate(config, presenter):
            return 1

        session = ArticleSession(
            config=config,
            article_service=ArticleService(GeminiClient(config)),
            report_service=ReportService(config),
            presenter=presenter,
        )
        report_path = session.run(progress_callback=progress)
        return 0 if report_path else 1

    except IeltsTrainerException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
