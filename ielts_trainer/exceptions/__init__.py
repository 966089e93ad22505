"""Custom exceptions for IELTS Trainer."""

from .base import IeltsTrainerException
from .config import ConfigurationError, ValidationError

__all__ = [
    "IeltsTrainerException",
    "ConfigurationError",
    "ValidationError",
]
