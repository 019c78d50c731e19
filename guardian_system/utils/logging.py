"""Structlog setup for the engine and the policy store.

Engine and store events are logged as event names with key/value context
(``verdict_built``, ``batch_evaluated``, ``policy_swapped``). A batch binds
its evaluation id and tier through contextvars so every event logged while
it runs carries them.
"""

import sys
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars
from structlog.processors import JSONRenderer

from guardian_system.config.settings import settings

# loguru levels structlog has no name for
STRUCTLOG_LEVELS = {"TRACE": "DEBUG", "SUCCESS": "INFO"}


def configure_structured_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure structlog processors and the renderer.

    Console rendering is used only in a terminal with GUARDIAN_LOG_FORMAT=console;
    JSON lines otherwise.
    """
    level = (level or settings.log_level).upper()
    level = STRUCTLOG_LEVELS.get(level, level).lower()
    log_format = (log_format or settings.log_format).lower()

    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "console" and sys.stderr.isatty():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(JSONRenderer(sort_keys=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_structured_logger(
    name: str,
    component: Optional[str] = None,
    **context: Any,
) -> structlog.BoundLogger:
    """
    Get a structlog logger with bound context.

    Example:
        >>> log = get_structured_logger(__name__, component="GuardianEngine")
        >>> log.debug("verdict_built", content_id="v1", allowed=True, total=712)
    """
    logger = structlog.get_logger(name)
    if component:
        logger = logger.bind(component=component)
    if context:
        logger = logger.bind(**context)
    return logger


def get_evaluation_id() -> str:
    """New id correlating the events of one batch evaluation."""
    return str(uuid.uuid4())


@contextmanager
def evaluation_context(tier: str, evaluation_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind ``evaluation_id`` and ``tier`` to every event logged in the block.

    Yields:
        The evaluation id in use.
    """
    evaluation_id = evaluation_id or get_evaluation_id()
    with bound_contextvars(evaluation_id=evaluation_id, tier=tier):
        yield evaluation_id


configure_structured_logging()


__all__ = [
    "configure_structured_logging",
    "evaluation_context",
    "get_evaluation_id",
    "get_structured_logger",
]
