"""Configuration and input validation exceptions."""

from .base import IeltsTrainerException


class ConfigurationError(IeltsTrainerException):
    """Raised when the configuration file cannot be loaded."""

    pass


class ValidationError(IeltsTrainerException):
    """Raised when a configuration value or argument is invalid."""

    pass
