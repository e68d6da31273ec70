"""structlog setup for payledger.

All log output goes to stderr so it never mixes with menu prompts or
command results on stdout.  ``--log-json`` switches the renderer to JSON
lines; ``-v`` lowers the ``payledger`` logger to DEBUG.  Records from
stdlib ``logging.getLogger(__name__)`` loggers pass through the same
processors as structlog events.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

APP_LOGGER = "payledger"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Safe to call more than once; each call replaces the root handler.

    Args:
        verbose: DEBUG for payledger's own loggers. Otherwise WARNING.
        log_json: JSON lines instead of the console renderer.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_roster(path: Path) -> None:
    """Tag every following log event with the roster file in use."""
    structlog.contextvars.bind_contextvars(roster=str(path))
