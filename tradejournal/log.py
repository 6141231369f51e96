"""Logging setup using structlog.

Every module logs through a stdlib logger under the ``tradejournal``
namespace, which carries only a ``NullHandler`` until ``configure_logging``
attaches a stderr handler. Library calls therefore print nothing unless
the CLI (or an embedding application) asks for output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

ROOT_LOGGER_NAME = "tradejournal"
_HANDLER_NAME = "tradejournal-stderr"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(log_level: str = "WARNING", json: bool = False) -> None:
    """Send tradejournal logs to stderr.

    Calling it again replaces the previous handler and level.

    Args:
        log_level: Level name, e.g. "DEBUG". Unknown names fall back to WARNING.
        json: Render one JSON object per line instead of console output.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str, **kwargs: Any) -> Any:
    """Return a lazy structlog logger for a component.

    Binding is deferred to the first log call, so module-level loggers
    pick up whatever ``configure_logging`` set in the meantime.

    Args:
        component: Dotted component name, also used for the stdlib logger.
        **kwargs: Extra context bound to every event.
    """
    stdlib_logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")
    return structlog.wrap_logger(stdlib_logger, component=component, **kwargs)
