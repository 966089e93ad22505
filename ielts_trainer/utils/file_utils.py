"""File system utilities."""

from datetime import datetime
from pathlib import Path

MAX_NAME_ATTEMPTS = 100


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def unique_file_path(
    directory: Path,
    prefix: str,
    suffix: str = ".html",
    now: datetime | None = None,
) -> Path:
    """Build a timestamped file path that does not exist yet.

    Produces ``{prefix}_{YYYYmmdd_HHMMSS}{suffix}``, then ``..._1``,
    ``..._2`` and so on when that name is taken. After 100 attempts the
    last candidate is returned even if it exists.

    Args:
        directory: Target directory
        prefix: File name prefix
        suffix: File extension including the dot
        now: Timestamp to use (defaults to the current time)

    Returns:
        Path inside directory
    """
    timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    candidate = directory / f"{prefix}_{timestamp}{suffix}"
    counter = 1
    while candidate.exists() and counter < MAX_NAME_ATTEMPTS:
        candidate = directory / f"{prefix}_{timestamp}_{counter}{suffix}"
        counter += 1
    return candidate
