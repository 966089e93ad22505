"""CLI command for the vocabulary translation quiz."""

from ielts_trainer.exceptions import IeltsTrainerException
from ielts_trainer.orchestration import VocabularySession
from ielts_trainer.presenters import ConsolePresenter
from ielts_trainer.services import (
    GeminiClient,
    ReportService,
    TranslationEvaluator,
    UsageStore,
    WordSelector,
)

from .common import load_config, validate


def words_command(args) -> int:
    """Execute the words subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    presenter.show_info("IELTS Trainer - Vocabulary Translation Quiz")
    presenter.show_info("=" * 50)

    try:
        config = load_config(args.config, word_count=args.count, exclude_days=args.exclude_days)
        if not validate(config, presenter):
            return 1

        generator = GeminiClient(config)
        usage_store = UsageStore(config.usage_record_path)
        session = VocabularySession(
            config=config,
            selector=WordSelector(generator, usage_store),
            evaluator=TranslationEvaluator(generator),
            usage_store=usage_store,
            report_service=ReportService(config),
            presenter=presenter,
        )
        report_path = session.run()
        return 0 if report_path else 1

    except KeyboardInterrupt:
        presenter.show_warning("\nQuiz interrupted.")
        return 1
    except IeltsTrainerException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
