"""
Logging for the scorecard client.

Library modules only ask structlog for named loggers; nothing is configured on
import. Applications that want the scorecard log format call
``configure_logging`` (or ``configure_logging_from_settings``) once at startup.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

if TYPE_CHECKING:
    from .config import Settings


def _tag_component(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("component", "scorecard")
    return event_dict


def build_processors(json_logs: bool) -> list[Processor]:
    """Processor chain ending in a JSON or console renderer."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _tag_component,
    ]
    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Route structlog through stdlib logging at ``level``.

    Opt-in for host applications; replaces any existing structlog configuration.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=build_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: Optional["Settings"] = None) -> None:
    """Configure logging from ``LOG_LEVEL`` and ``ENV``; JSON outside development."""
    if settings is None:
        from .config import get_settings

        settings = get_settings()
    configure_logging(settings.log_level, json_logs=not settings.is_development)


def get_logger(name: str) -> Any:
    """Named structlog logger; uses whatever configuration the host has set up."""
    return structlog.get_logger(name)


__all__ = [
    "build_processors",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
