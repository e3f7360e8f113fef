# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging setup for bcryptkit using structlog.

bcryptkit is a library: importing it never touches the root logger or the
global structlog configuration. Loggers are structlog wrappers around
stdlib loggers under the "bcryptkit" namespace, so records reach whatever
handlers the host application installed. A NullHandler keeps the library
silent until then.

Assumptions:
- Events render as JSON by default, key=value when json_output is False
- Hosts opt in to bcryptkit's own output with configure_logging()
"""
import logging
from typing import IO, Optional

import structlog
from structlog.types import EventDict, Processor

from bcryptkit.config import settings

LOGGER_NAMESPACE = "bcryptkit"

_json_renderer = structlog.processors.JSONRenderer()
_kv_renderer = structlog.processors.KeyValueRenderer(key_order=["event", "level"])
_use_json = settings.log_json

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def add_log_level(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add log level to event dict.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary

    Returns:
        EventDict: Updated event dictionary with level
    """
    event_dict["level"] = method_name.upper()
    return event_dict


def render(logger: logging.Logger, method_name: str, event_dict: EventDict) -> str:
    """Render the event with the renderer chosen by configure_logging."""
    if _use_json:
        return _json_renderer(logger, method_name, event_dict)
    return _kv_renderer(logger, method_name, event_dict)


PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
    render,
]


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
    stream: Optional[IO[str]] = None
) -> Optional[logging.Handler]:
    """Opt in to bcryptkit log output.

    Args:
        log_level: Level for the "bcryptkit" logger (DEBUG, INFO, WARNING, ...)
        json_output: If True, render JSON; if False, key=value pairs
        stream: If given, attach a StreamHandler writing to it

    Returns:
        Handler: The attached handler, or None when no stream was given

    Assumptions:
    - Defaults come from settings (INFO, JSON)
    - Only the "bcryptkit" logger is changed
    """
    global _use_json

    level = log_level or settings.log_level
    _use_json = json_output if json_output is not None else settings.log_json

    library_logger = logging.getLogger(LOGGER_NAMESPACE)
    library_logger.setLevel(getattr(logging, level.upper()))

    if stream is None:
        return None
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger.addHandler(handler)
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger under the bcryptkit namespace.

    Args:
        name: Logger name, e.g. "bcryptkit.security"

    Returns:
        BoundLogger: structlog logger wrapping the stdlib logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )
