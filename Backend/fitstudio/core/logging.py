from __future__ import annotations

import logging
import sys

import structlog

from fitstudio.core.config import settings


def _apply(level_name: str, render_json: bool) -> None:
    renderer = structlog.processors.JSONRenderer() if render_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level_name)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_default_logging() -> None:
    # importing the package stays quiet; applications opt in with configure_logging()
    _apply(settings.LOG_LEVEL, settings.LOG_JSON)


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    level_name = (level or settings.LOG_LEVEL).upper()
    render_json = settings.LOG_JSON if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level_name)
    _apply(level_name, render_json)


configure_default_logging()

log = structlog.get_logger("fitstudio")
