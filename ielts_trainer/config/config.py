"""Configuration classes for IELTS Trainer."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class IeltsTrainerConfig:
    """Immutable configuration for training sessions.

    The configuration is frozen so that services constructed from it
    cannot drift apart during a session.
    """

    # Gemini API settings
    google_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1"
    request_timeout: float = 120.0  # Seconds per request
    max_retries: int = 3
    retry_delay: float = 1.0  # Base delay, multiplied by the attempt number

    # Vocabulary settings
    word_count: int = 20
    topics: list[str] = field(
        default_factory=lambda: [
            "Education",
            "Environment",
            "Technology",
            "Health",
            "Society",
        ]
    )
    exclude_days: int = 7  # Words used within this many days are not reselected

    # Article settings
    article_key_words_count: int = 15

    # Storage settings
    usage_record_path: Path = field(default_factory=lambda: Path("usage_record.json"))
    report_dir: Path = field(default_factory=lambda: Path("."))

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.usage_record_path, str):
            object.__setattr__(self, "usage_record_path", Path(self.usage_record_path))
        if isinstance(self.report_dir, str):
            object.__setattr__(self, "report_dir", Path(self.report_dir))
