"""
Logging configuration for repository analysis runs.

Records emitted by the ``repohealth`` loggers are rendered as one JSON
object per line. Structured context (repository, path, status code, score)
is attached through the ``extra`` argument of the logging calls.
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from typing import Any

ROOT_LOGGER_NAME = "repohealth"

# Extra attributes copied from the log record when present
STRUCTURED_FIELDS = (
    "event",
    "owner",
    "repo",
    "branch",
    "path",
    "status_code",
    "entry_count",
    "file_count",
    "finding_count",
    "health_score",
    "error",
)


class AnalysisLogFormatter(logging.Formatter):
    """Formatter that renders analysis log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def configure_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    enable_console: bool = True,
) -> logging.Logger:
    """
    Configure the repohealth logger.

    Args:
        log_file: Path to a log file (optional, rotated hourly)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Whether to also log to the console

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.propagate = False

    # Replace any handlers from a previous call
    logger.handlers.clear()

    formatter = AnalysisLogFormatter()

    if log_file:
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="H",
            interval=1,
            backupCount=168,  # 7 days
            encoding="utf-8",
            utc=False,
        )
        file_handler.suffix = "%Y%m%d_%H%M%S.log"
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the package logger."""
    return logging.getLogger(ROOT_LOGGER_NAME)
