"""Loguru setup for gating components (classifier, rules, scoring, CLI).

Every component binds a ``component`` name; records logged without one
fall back to "guardian". Sinks write to stderr so CLI tables printed on
stdout stay machine-readable.
"""

import sys
from typing import Optional

from loguru import logger

from guardian_system.config.settings import settings

DEFAULT_COMPONENT = "guardian"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
)


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Install the loguru sink.

    Args:
        level: Overrides GUARDIAN_LOG_LEVEL.
        log_format: "console" for colorized lines in a terminal, anything
            else for JSON records. Overrides GUARDIAN_LOG_FORMAT.
    """
    level = (level or settings.log_level).upper()
    log_format = (log_format or settings.log_format).lower()

    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})

    if log_format == "console" and sys.stderr.isatty():
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)
    else:
        # Item titles and descriptions are user text; keep them out of tracebacks
        logger.add(sys.stderr, format="{message}", level=level, serialize=True, diagnose=False)


def get_logger(component: str):
    """
    Get a logger bound to a component name.

    Example:
        >>> log = get_logger("cli")
        >>> log.info("Evaluating 12 items for under_8")
    """
    return logger.bind(component=component)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging"]
