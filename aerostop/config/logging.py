"""structlog setup for the reservation CLI.

Logs are diagnostics for whoever runs the desk terminal; the guest only
ever sees prompts and receipts on stdout.
"""
import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger.json import JsonFormatter

from aerostop.config.settings import LoggingSettings, settings


def add_room_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Tag events about a specific room, e.g. ``[Room 07] Reservation recorded``."""
    room_number = event_dict.get("room_number")
    if room_number:
        event_dict["event"] = f"[Room {room_number}] {event_dict.get('event', '')}"
    return event_dict


def configure_logging(logging_settings: LoggingSettings | None = None) -> None:
    """Route structlog through a single stderr handler.

    Args:
        logging_settings: Level and json/console format. Defaults to the
            ``LOG_*`` environment settings.
    """
    logging_settings = logging_settings or settings.logging
    log_level = getattr(logging, logging_settings.level)
    as_json = logging_settings.format == "json"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JsonFormatter()
        if as_json
        else logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    handler.setLevel(log_level)

    # Replace anything installed earlier, e.g. by a previous call
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_room_prefix,
            structlog.processors.JSONRenderer()
            if as_json
            else structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Logger for module ``name``."""
    return structlog.get_logger(name)
