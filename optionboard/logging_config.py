"""Loguru sink setup. Pipeline modules log through stdlib logging; those records
are forwarded into loguru so everything lands in the same sinks."""

import logging
import sys

from loguru import logger

from optionboard.config import Settings


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(settings: Settings) -> None:
    """Install stderr (and optional file) sinks and route stdlib logging into loguru."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation="1 day",
            retention="7 days",
            level=settings.log_level,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug("Logging configured at {}", settings.log_level)
