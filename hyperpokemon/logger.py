"""Logging configuration using loguru.

hyperpokemon runs inside the host's process, so importing it leaves the
host's loguru handlers alone. The package's own messages are disabled until
the host opts in with :func:`configure_logging`, which adds a file sink that
only records hyperpokemon messages. Logs are kept for 1 week.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

PACKAGE_NAME = "hyperpokemon"
LOG_DIR_ENV = "HYPERPOKEMON_LOG_DIR"

logger.disable(PACKAGE_NAME)


class _LoggingState:
    """Internal state tracker for the package file sink."""

    def __init__(self) -> None:
        """Initialize logging state without a file sink."""
        self.file_handler_id: int | None = None


_state = _LoggingState()


def get_log_dir() -> Path:
    """Get the directory used for log files.

    Returns:
        ``HYPERPOKEMON_LOG_DIR`` if set, else ~/.local/share/hyperpokemon/logs.
    """
    override_dir = os.environ.get(LOG_DIR_ENV)
    if override_dir:
        return Path(override_dir).expanduser().resolve()
    return Path.home() / ".local" / "share" / PACKAGE_NAME / "logs"


def configure_logging(log_dir: Path | None = None, level: str = "DEBUG") -> int:
    """Enable hyperpokemon logging to a rotating file.

    Calling it again returns the sink that is already installed.

    Args:
        log_dir: Directory for log files. Defaults to :func:`get_log_dir`.
        level: Minimum log level for the file sink.

    Returns:
        The sink ID.
    """
    if _state.file_handler_id is not None:
        return _state.file_handler_id

    directory = log_dir if log_dir is not None else get_log_dir()
    directory.mkdir(parents=True, exist_ok=True)

    logger.enable(PACKAGE_NAME)
    _state.file_handler_id = logger.add(
        directory / "hyperpokemon_{time:YYYY-MM-DD}.log",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        filter=PACKAGE_NAME,  # Only this package's records
        rotation="00:00",  # New file at midnight
        retention="1 week",  # Keep logs for 1 week
        compression="gz",  # Compress old logs
        backtrace=True,
        diagnose=False,
    )
    return _state.file_handler_id


def disable_logging() -> None:
    """Remove the package file sink and silence hyperpokemon messages again."""
    if _state.file_handler_id is not None:
        logger.remove(_state.file_handler_id)
        _state.file_handler_id = None
    logger.disable(PACKAGE_NAME)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)
