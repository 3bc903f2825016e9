"""Structured logging for the allocator.

Command answers are printed on stdout, so every log record goes to stderr.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from pythonjsonlogger import jsonlogger

from hotel_allocator.config.settings import settings

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def add_hotel_id_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Prefix the event with ``[HOTEL]`` when a ``hotel_id`` key is bound."""
    hotel_id = event_dict.get("hotel_id")
    if hotel_id:
        event_dict["event"] = f"[{str(hotel_id).upper()}] {event_dict.get('event', '')}"
    return event_dict


def resolve_level(level: Optional[str] = None) -> int:
    """Numeric level from an explicit name, ``DEBUG=true`` or ``LOG_LEVEL``."""
    if level is None:
        level = "DEBUG" if settings.debug else settings.logging.level
    return getattr(logging, level.upper())


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Route structlog through a single stderr handler.

    Args:
        level: Level name; defaults to the configured one
        fmt: ``json`` or ``console``; defaults to ``LOG_FORMAT``
    """
    log_level = resolve_level(level)
    json_output = (fmt or settings.logging.format) == "json"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        jsonlogger.JsonFormatter() if json_output else logging.Formatter(CONSOLE_FORMAT)
    )
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            add_hotel_id_prefix,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
