"""structlog setup for work_tracker.

Service events (entry changes, imports, failed rows) are emitted through
structlog and handed to stdlib logging, so one stderr handler renders both
structlog events and plain ``logging`` records from libraries.
"""

from __future__ import annotations

import logging
import sys

import structlog

from ..core.exceptions import ValidationError

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

APP_LOGGER = "work_tracker"


def resolve_level(level: str) -> int:
    """Map a level name (any case) to its stdlib number."""
    try:
        return LOG_LEVELS[str(level).strip().upper()]
    except KeyError:
        raise ValidationError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}") from None


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_logging(*, level: str = "INFO", log_json: bool = False) -> None:
    """Route structlog through stdlib logging with one stderr handler.

    Only the ``work_tracker`` logger follows ``level``; everything else
    (pandas, openpyxl) stays at WARNING.
    """
    app_level = resolve_level(level)
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    renderer = structlog.processors.JSONRenderer() if log_json else structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty()
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(app_level)
