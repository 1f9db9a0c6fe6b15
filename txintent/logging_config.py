"""
Structured logging configuration using structlog.

Every record, structlog or stdlib, carries the toolkit name plus whatever the
request middleware and the action registry bound (request_id, action,
action_id). Rendering is JSON unless ``log_json`` is off or the level is
DEBUG, in which case the colored console renderer is used.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings

# Libraries whose INFO output is per-call noise (each provider request).
_QUIET_LOGGERS = ("uvicorn.access", "httpcore", "httpx")


def add_toolkit_name(toolkit_name: str) -> structlog.types.Processor:
    """Processor stamping ``toolkit`` on every event unless already set."""

    def processor(logger, method_name, event_dict):
        event_dict.setdefault("toolkit", toolkit_name)
        return event_dict

    return processor


def setup_logging(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: Override log level (default: settings.log_level)
        json_logs: Override JSON rendering (default: settings.log_json)
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    if json_logs is None:
        json_logs = settings.log_json and level != logging.DEBUG

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        add_toolkit_name(settings.toolkit_name),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
