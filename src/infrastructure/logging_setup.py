"""
Logging setup for the invoicing application.

Applies a LoggingConfig to the root logger: level, format, a console
handler, and an optional size-rotated log file.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from src.application.config import LoggingConfig

_HANDLER_MARKER = "_invoicing_handler"


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure the root logger from config.

    Calling this again replaces the handlers installed by the previous call
    and leaves any other handlers alone.

    Args:
        config: Logging settings; defaults to LoggingConfig()

    Returns:
        The configured root logger

    Raises:
        ValueError: If config.level is not a known logging level
    """
    config = config or LoggingConfig()

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {config.level}")

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                config.file,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        root.addHandler(handler)

    root.setLevel(level)
    return root
