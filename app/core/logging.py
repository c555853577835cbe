# app/core/logging.py
from __future__ import annotations

import logging
import sys
from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} - {message}"

# stdlib loggers that would otherwise bypass loguru
ROUTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "sqlalchemy")

_configured = False


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru, keeping level and call site."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO") -> None:
    global _configured
    if _configured:
        return

    level = level.upper()
    logging.basicConfig(handlers=[InterceptHandler()], level=level, force=True)
    for name in ROUTED_LOGGERS:
        routed = logging.getLogger(name)
        routed.handlers = []
        routed.propagate = True

    logger.remove()
    logger.add(sys.stdout, level=level, format=LOG_FORMAT, diagnose=False, backtrace=False)

    _configured = True
