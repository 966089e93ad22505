"""Presenter protocol for output abstraction."""

from typing import Protocol

from ielts_trainer.models import ValidationResult, VocabularyWord


class PresenterProtocol(Protocol):
    """Interface for presenting output to the user.

    This protocol abstracts all output operations, so sessions can run
    against the console or silently in tests.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_success(self, message: str) -> None:
        """Display a success message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_validation_result(self, result: ValidationResult) -> None:
        """Display the result of configuration validation."""
        ...

    def show_question(self, index: int, total: int, word: VocabularyWord) -> None:
        """Display one quiz question.

        Args:
            index: Question number (1-based)
            total: Number of questions in the session
            word: The vocabulary item being asked
        """
        ...

    def show_statistics(self, word_count: int, sentence_count: int, day_count: int) -> None:
        """Display usage record statistics.

        Args:
            word_count: Number of distinct used words
            sentence_count: Number of distinct used sentences
            day_count: Number of days with learning records
        """
        ...
