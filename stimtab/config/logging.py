"""Logging configuration models for stimtab."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

# marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_FLAG = "_stimtab_handler"


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Parameters
    ----------
    level : str
        Log level.
    format : str
        Log format string.
    file : Path | None
        Log file path.
    console : bool
        Whether to log to console.

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'INFO'
    >>> config.console
    True
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file: Path | None = Field(default=None, description="Log file path")
    console: bool = Field(default=True, description="Log to console")


def configure_logging(
    config: LoggingConfig, logger_name: str = "stimtab"
) -> logging.Logger:
    """Install handlers for the package logger.

    Handlers from a previous call are removed first, so configuring twice
    does not duplicate output.

    Parameters
    ----------
    config : LoggingConfig
        Logging configuration.
    logger_name : str
        Logger to configure (default: "stimtab").

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(config.level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = []
    if config.console:
        handlers.append(logging.StreamHandler())
    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)

    return logger
