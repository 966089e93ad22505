"""CLI commands for inspecting and resetting the usage record."""

from ielts_trainer.exceptions import IeltsTrainerException
from ielts_trainer.presenters import ConsolePresenter
from ielts_trainer.services import UsageStore

from .common import load_config


def usage_stats_command(args) -> int:
    """Show how many words, sentences and study days are recorded."""
    presenter = ConsolePresenter()

    try:
        config = load_config(args.config)
        store = UsageStore(config.usage_record_path)
        word_count, sentence_count = store.get_statistics()
        presenter.show_statistics(word_count, sentence_count, len(store.record.daily_records))
        return 0

    except IeltsTrainerException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1


def usage_reset_command(args) -> int:
    """Clear the used word and sentence sets (and the history with --all).

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        config = load_config(args.config)
        store = UsageStore(config.usage_record_path)
        store.reset(clear_history=args.all)
        if args.all:
            presenter.show_success("Usage record and learning history cleared")
        else:
            presenter.show_success("Used words and sentences cleared (learning history kept)")
        return 0

    except IeltsTrainerException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
