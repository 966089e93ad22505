"""Helpers shared by the CLI commands."""

from dataclasses import replace
from pathlib import Path

from ielts_trainer.config import ConfigLoader, IeltsTrainerConfig
from ielts_trainer.interfaces import PresenterProtocol
from ielts_trainer.services import ValidationService


def load_config(config_path: str | None, **overrides) -> IeltsTrainerConfig:
    """Load the configuration for a command.

    An explicit path must exist. Without one, ``config.json`` in the working
    directory is used if present; otherwise defaults apply (the API key may
    still come from the environment).

    Args:
        config_path: Value of ``--config``, if given
        **overrides: Field values from command-line options; None is ignored

    Returns:
        Configuration with overrides applied

    Raises:
        ConfigurationError: If the config file is missing or invalid
    """
    if config_path:
        config = ConfigLoader.load(Path(config_path))
    elif ConfigLoader.DEFAULT_PATH.exists():
        config = ConfigLoader.load()
    else:
        config = ConfigLoader.from_dict({})

    changes = {key: value for key, value in overrides.items() if value is not None}
    return replace(config, **changes) if changes else config


def validate(
    config: IeltsTrainerConfig, presenter: PresenterProtocol, require_api_key: bool = True
) -> bool:
    """Validate the configuration and report issues.

    Returns:
        True if the command may proceed
    """
    result = ValidationService(config).validate_setup(require_api_key=require_api_key)
    presenter.show_validation_result(result)
    if not result.all_passed:
        presenter.show_error("Validation failed. Please fix the issues above.")
        return False
    return True
