"""Default configuration values for IELTS Trainer."""

from .config import IeltsTrainerConfig


def create_default_config(**overrides) -> IeltsTrainerConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        IeltsTrainerConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            word_count=10,
            exclude_days=14
        )
    """
    return IeltsTrainerConfig(**overrides)
