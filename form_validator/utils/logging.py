import logging
import sys

import structlog

from form_validator.config import get_settings


def get_logger(name: str | None = None):
    """
    Get a logger with form_validator prefix.

    Args:
        name: Module name (typically __name__). If None, returns root form_validator logger.

    Returns:
        A structlog logger with form_validator prefix.
    """
    if name is None:
        return structlog.get_logger("form_validator")
    if name.startswith("form_validator"):
        return structlog.get_logger(name)
    return structlog.get_logger(f"form_validator.{name}")


def setup_third_party_logging(debug_all: bool = False):
    """
    Configure third-party library logging levels.

    Args:
        debug_all: If True, enable verbose logging for all libraries.
                   If False, set third-party loggers to WARNING level.
    """

    if debug_all:
        return

    # Markdown and bs4 are chatty at DEBUG
    for log_name, _ in logging.Logger.manager.loggerDict.items():
        if not log_name.startswith("form_validator"):
            logging.getLogger(log_name).setLevel(logging.WARNING)


def format_context(logger, method_name, event_dict):
    """Format bound context into the event message"""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v!r}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


def setup_logging() -> None:
    """
    Setup logging for the application.

    Environment variables:
        DEBUG_ALL: If set to "true" (case-insensitive), enable DEBUG logging for all libraries.
                   If not set, form_validator logs at LOG_LEVEL, third-party libraries at WARNING.
        LOG_LEVEL: Level for the form_validator namespace (default INFO).
    """
    settings = get_settings().logging

    root_level = "DEBUG" if settings.debug_all else "WARNING"
    logging.basicConfig(
        stream=sys.stderr,
        level=root_level,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    setup_third_party_logging(settings.debug_all)

    logging.getLogger("form_validator").setLevel(settings.log_level)
