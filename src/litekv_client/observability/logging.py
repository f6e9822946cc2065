"""Structured logging for the LiteKV client and CLI.

Log records always go to stderr (or an explicit stream) so that CLI stdout
carries nothing but command output. Stored values never reach a log
record: any ``value`` field is dropped before rendering.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from structlog.types import EventDict, Processor, WrappedLogger

    from litekv_core.config.settings import Settings

REDACTED_FIELDS = ("value",)


def configure_logging(settings: Settings, stream: TextIO | None = None) -> None:
    """Route structlog and stdlib logging to stderr as console text or JSON lines."""
    shared_processors: list[Processor] = [
        merge_contextvars,
        drop_stored_values,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    renderer: Processor
    if settings.log_format == "json":
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    level = _resolve_level(settings.log_level)

    # Loggers are built when first bound, never cached on first use
    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # httpx request lines contain the full URL, percent-encoded values included
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def drop_stored_values(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Remove stored values from an event before it is rendered."""
    for field in REDACTED_FIELDS:
        event_dict.pop(field, None)
    return event_dict


def bind_store_context(app_id: str, api_url: str) -> None:
    """Tag every log entry in this context with the store it talks to."""
    bind_contextvars(app_id=app_id, api_url=api_url)


def clear_store_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()


def _resolve_level(level_name: str) -> int:
    """Convert a level name such as 'debug' to its logging constant; unknown names mean INFO."""
    level = logging.getLevelNamesMapping().get(level_name.upper())
    return level if level is not None else logging.INFO
