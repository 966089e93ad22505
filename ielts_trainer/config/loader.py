"""Load configuration from a JSON file."""

import json
import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any

from ielts_trainer.exceptions import ConfigurationError

from .config import IeltsTrainerConfig

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "GOOGLE_API_KEY"

# Accepted value types per config key; None means "use the default".
FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "google_api_key": (str,),
    "gemini_model": (str,),
    "gemini_api_url": (str,),
    "request_timeout": (int, float),
    "max_retries": (int,),
    "retry_delay": (int, float),
    "word_count": (int,),
    "topics": (list,),
    "exclude_days": (int,),
    "article_key_words_count": (int,),
    "usage_record_path": (str, Path),
    "report_dir": (str, Path),
}


class ConfigLoader:
    """Reads ``config.json`` into an IeltsTrainerConfig.

    Keys use the dataclass field names. Unknown keys are ignored with a
    warning. An empty API key falls back to the GOOGLE_API_KEY environment
    variable.
    """

    DEFAULT_PATH = Path("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> IeltsTrainerConfig:
        """Load configuration from a JSON file.

        Args:
            path: Config file path (defaults to ./config.json)

        Returns:
            Loaded configuration

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        config_path = path or cls.DEFAULT_PATH
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a JSON object")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IeltsTrainerConfig:
        """Build a configuration from a plain dictionary.

        Args:
            data: Mapping of field names to values

        Returns:
            IeltsTrainerConfig

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        known = {f.name for f in fields(IeltsTrainerConfig)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key}")
            elif value is not None:
                cls._check_type(key, value)
                kwargs[key] = value

        if not kwargs.get("google_api_key"):
            env_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
            if env_key:
                kwargs["google_api_key"] = env_key

        try:
            return IeltsTrainerConfig(**kwargs)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def _check_type(key: str, value: Any) -> None:
        """Raise ConfigurationError if value does not fit the key's type."""
        expected = FIELD_TYPES.get(key)
        if expected is None:
            return
        # bool is an int subclass, but true/false is never a valid count
        if isinstance(value, bool) or not isinstance(value, expected):
            names = " or ".join(t.__name__ for t in expected)
            raise ConfigurationError(
                f"'{key}' must be {names}, got {type(value).__name__}: {value!r}"
            )
        if key == "topics" and not all(isinstance(t, str) for t in value):
            raise ConfigurationError("'topics' must be a list of strings")
