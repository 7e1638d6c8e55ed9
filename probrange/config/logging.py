"""Logging configuration model."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field
from rich.logging import RichHandler

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Parameters
    ----------
    level : str
        Logging level.
    format : str
        Log message format (ignored by the rich handler's own columns).
    use_rich : bool
        Render log records with rich.

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'WARNING'
    """

    level: LogLevel = Field(default="WARNING", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    use_rich: bool = Field(default=True, description="Use rich log handler")


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from a LoggingConfig.

    Parameters
    ----------
    config : LoggingConfig
        Logging settings to apply.
    """
    if config.use_rich:
        handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
        log_format = "%(message)s"
    else:
        handler = logging.StreamHandler()
        log_format = config.format

    logging.basicConfig(
        level=getattr(logging, config.level),
        format=log_format,
        handlers=[handler],
        force=True,
    )
