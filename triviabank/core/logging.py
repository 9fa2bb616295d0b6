import logging
import sys
from typing import TextIO

import structlog


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_level: str = "INFO", *, stream: TextIO | None = None) -> None:
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=_resolve_level(log_level),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
