"""Structured logging via structlog.

Modules log through the stdlib (`logging.getLogger(__name__)`). This
module routes those records through structlog's ProcessorFormatter so
plugin output and httpx's own logging share one format.

Renderer selection:
  json_logs=False: `ConsoleRenderer` for readable CI build logs.
  json_logs=True:  `JSONRenderer` for log shippers.

Level names follow the plugin's `log_level` setting: debug, info,
warn/warning, error.
"""

from __future__ import annotations

import logging
import sys

import structlog

from artifactory_publish.errors import ConfigurationError

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_log_level(level: str) -> int:
    """Map a log_level setting to a stdlib level number."""
    try:
        return LOG_LEVELS[level.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported log level {level!r}; expected one of "
            + ", ".join(sorted(LOG_LEVELS))
        ) from None


def configure_logging(level: str = "info", json_logs: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call more than once; the root handler is replaced each time.
    """
    numeric_level = parse_log_level(level)

    shared_processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    # httpx logs every request at INFO; keep that for debug runs only.
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    )
