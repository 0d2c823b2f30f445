"""Structured logging for the infrastructure program."""

import logging
import sys
from typing import Optional

import structlog

# All program events go through this stdlib logger; the emitting module is
# carried in the event as ``module``.
APP_LOGGER = "container_app_iac"

# Keys whose values must never reach the log output.
SECRET_KEYS = frozenset({"password", "shared_key", "primary_key", "secret"})


def redact_secrets(logger, method_name: str, event_dict: dict) -> dict:
    """Replace values of secret-bearing keys with a fixed marker."""
    for key in event_dict:
        if key in SECRET_KEYS:
            event_dict[key] = "[secret]"
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Configure structured logging for a Pulumi program run.

    Pulumi forwards the program's stdout to the engine as diagnostics, so
    events are always written to stdout, and also to ``log_file`` if given.
    Calling this again replaces the previous handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to output logs in JSON format
        log_file: Optional file path for log output
    """
    numeric_level = getattr(logging, level.upper())

    app_logger = logging.getLogger(APP_LOGGER)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(numeric_level)
    app_logger.propagate = False

    handlers: list = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        app_logger.addHandler(handler)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically module name)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(APP_LOGGER, module=name)
