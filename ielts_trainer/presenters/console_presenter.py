"""Console presenter for CLI output."""

from ielts_trainer.models import ValidationResult, VocabularyWord


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_validation_result(self, result: ValidationResult) -> None:
        """Display the result of configuration validation."""
        if not result.issues:
            return

        print("\nConfiguration Issues:")
        for issue in result.issues:
            print(f"  {issue}")

        if result.all_passed:
            print("\n[OK] Configuration is usable")
        else:
            print("\n[FAIL] Configuration is invalid")

    def show_question(self, index: int, total: int, word: VocabularyWord) -> None:
        """Display one quiz question."""
        print(f"\nQuestion {index}/{total}")
        print(f"Word: {word.word}")
        if word.phonetics:
            print(f"Phonetics: {word.phonetics}")
        if word.definition:
            print(f"Definition: {word.definition}")
        print("\nPlease translate the following sentence into Chinese (type 'pass' to skip):")
        print(word.sentence)

    def show_statistics(self, word_count: int, sentence_count: int, day_count: int) -> None:
        """Display usage record statistics."""
        print("\nUsage Record:")
        print(f"  Used words: {word_count}")
        print(f"  Used sentences: {sentence_count}")
        print(f"  Days with learning records: {day_count}")


class ConsoleProgressCallback:
    """Console implementation of progress callback."""

    def __init__(self):
        """Initialize the progress callback."""
        self.total = 0
        self.current = 0
        self.description = ""

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts."""
        self.total = total
        self.current = 0
        self.description = description
        print(f"\n{description}...")

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when a step is reached."""
        self.current = current
        print(f"  [{current}/{self.total}] {item_description}")

    def on_complete(self) -> None:
        """Called when an operation completes."""
        print(f"  [OK] Complete: {self.current}/{self.total}")

    def on_error(self, item_description: str, error_message: str) -> None:
        """Called when a step fails."""
        print(f"  [ERROR] {item_description}: {error_message}")
