import json
import logging
import logging.config
from collections import defaultdict
from enum import Enum
from pathlib import Path
from typing import Any

import typer

from asyncapi_bindings._internal.logger import logger


class LogLevels(str, Enum):
    """A class to represent log levels.

    Attributes:
        critical : critical log level
        error : error log level
        warning : warning log level
        info : info log level
        debug : debug log level
    """

    critical = "critical"
    fatal = "fatal"
    error = "error"
    warning = "warning"
    warn = "warn"
    info = "info"
    debug = "debug"
    notset = "notset"


LOG_LEVELS: defaultdict[str, int] = defaultdict(
    lambda: logging.INFO,
    **{
        "critical": logging.CRITICAL,
        "fatal": logging.FATAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "warn": logging.WARN,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "notset": logging.NOTSET,
    },
)


class LogFiles(str, Enum):
    """The class to represent supported log configuration files."""

    json = ".json"


def get_log_level(level: LogLevels | str | int) -> int:
    """Get the log level.

    Args:
        level: The log level to get. Can be an integer, a LogLevels enum value, or a string.

    Returns:
        The log level as an integer.

    """
    if isinstance(level, int):
        return level

    if isinstance(level, LogLevels):
        return LOG_LEVELS[level.value]

    return LOG_LEVELS[level.lower()]


class EchoHandler(logging.Handler):
    """Emit records to the stderr of the running command."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def set_log_level(level: int) -> None:
    """Set the level of the package logger and route its records to stderr."""
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        if isinstance(handler, EchoHandler):
            logger.removeHandler(handler)

    handler = EchoHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(handler)


def get_log_config(file: Path) -> dict[str, Any] | Any:
    """Read dict config from file."""
    file_path = Path(file)

    if not file_path.exists():
        raise ValueError(f"File {file} not found")

    file_format = file_path.suffix

    if file_format == LogFiles.json:
        with file_path.open("r") as config_file:
            logging_config = json.load(config_file)
    else:
        raise ValueError(f"Format {file_format} is not supported")

    return logging_config


def set_log_config(configuration: dict[str, Any]) -> None:
    """Set the logging config from file."""
    logging.config.dictConfig(configuration)
