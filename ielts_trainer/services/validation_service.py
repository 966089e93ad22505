"""Service for validating configuration before a session starts."""

from ielts_trainer.config import IeltsTrainerConfig
from ielts_trainer.models import ValidationIssue, ValidationResult

MAX_WORD_COUNT = 100
MAX_KEY_WORDS_COUNT = 50


class ValidationService:
    """Validate configuration values (stateless service)."""

    def __init__(self, config: IeltsTrainerConfig):
        """Initialize the validation service.

        Args:
            config: Configuration to validate
        """
        self.config = config

    def validate_setup(self, require_api_key: bool = True) -> ValidationResult:
        """Run all validation checks.

        Args:
            require_api_key: Treat a missing API key as an error

        Returns:
            ValidationResult listing every problem found

        Note:
            This method never raises exceptions - all errors are captured
            in the ValidationResult.
        """
        issues: list[ValidationIssue] = []
        config = self.config

        if require_api_key and not (config.google_api_key or "").strip():
            issues.append(
                ValidationIssue(
                    component="google_api_key",
                    severity="ERROR",
                    message="API key is empty (set it in config.json or GOOGLE_API_KEY)",
                )
            )

        if not 1 <= config.word_count <= MAX_WORD_COUNT:
            issues.append(
                ValidationIssue(
                    component="word_count",
                    severity="ERROR",
                    message=f"Must be between 1 and {MAX_WORD_COUNT}, got {config.word_count}",
                )
            )

        if not 1 <= config.article_key_words_count <= MAX_KEY_WORDS_COUNT:
            issues.append(
                ValidationIssue(
                    component="article_key_words_count",
                    severity="ERROR",
                    message=(
                        f"Must be between 1 and {MAX_KEY_WORDS_COUNT}, "
                        f"got {config.article_key_words_count}"
                    ),
                )
            )

        if config.exclude_days < 0:
            issues.append(
                ValidationIssue(
                    component="exclude_days",
                    severity="ERROR",
                    message=f"Must not be negative, got {config.exclude_days}",
                )
            )

        topics = [t for t in config.topics if isinstance(t, str) and t.strip()]
        if not topics:
            issues.append(
                ValidationIssue(
                    component="topics",
                    severity="ERROR",
                    message="At least one topic is required",
                )
            )
        elif len(topics) != len(config.topics):
            issues.append(
                ValidationIssue(
                    component="topics",
                    severity="WARNING",
                    message="Blank or non-text topics will be ignored",
                )
            )

        if config.max_retries < 0 or config.retry_delay < 0 or config.request_timeout <= 0:
            issues.append(
                ValidationIssue(
                    component="network",
                    severity="ERROR",
                    message="Retries and delays must be non-negative and the timeout positive",
                )
            )

        return ValidationResult(issues=issues)
