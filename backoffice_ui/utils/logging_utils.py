"""Central logging configuration using Loguru JSON sinks."""

from __future__ import annotations

import logging
import sys

from loguru import logger as loguru_logger


class InterceptHandler(logging.Handler):
    """Forward stdlib records to loguru, keeping the originating logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        loguru_logger.bind(logger_name=record.name).log(level, record.getMessage())


def configure_json_logging(level: str = "INFO") -> None:
    """Route stdlib logging through a JSON loguru sink on stderr."""
    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        level=level.upper(),
        serialize=True,
        enqueue=False,
        backtrace=False,
        diagnose=False,
    )

    logging.basicConfig(
        handlers=[InterceptHandler()],
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
