"""Configuration management for IELTS Trainer."""

from .config import IeltsTrainerConfig
from .defaults import create_default_config
from .loader import ConfigLoader

__all__ = ["IeltsTrainerConfig", "create_default_config", "ConfigLoader"]
