"""Logging setup for the store.

Modules log through ``logging.getLogger(__name__)``; this routes those
records through structlog's stdlib formatter so the output is either a
readable console line or one JSON object per record.
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.types import Processor

from tourney_store.core.config import settings


def configure_logging(
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> None:
    """Configure structured logging.

    Args:
        log_level: Logging level name, defaults to ``settings.LOG_LEVEL``
        json_logs: Emit JSON lines instead of console output, defaults to
            ``settings.JSON_LOGS``
    """
    level = (log_level or settings.LOG_LEVEL).upper()
    use_json = settings.JSON_LOGS if json_logs is None else json_logs

    shared_processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("tourney_store")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
