"""
Logging configuration for the weather suitability engine.

Console output carries the per-evaluation summary; the log file keeps the
per-hour scoring detail written at DEBUG.
"""

import logging
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULT_LOG_FILE = "logs/weather_suitability.log"

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logger(
    name: str = "weather_suitability",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up the application logger.

    Args:
        name: Logger name
        log_file: Path to log file. If None, uses LOG_FILE env var or default
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    log_path = Path(log_file or os.getenv("LOG_FILE", DEFAULT_LOG_FILE))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    _attach(logger, logging.StreamHandler(), logging.INFO, CONSOLE_FORMAT)
    _attach(logger, logging.FileHandler(log_path, mode="a", encoding="utf-8"), logging.DEBUG, FILE_FORMAT)

    logger.propagate = False
    return logger


class LoggerContext:
    """
    Log one pipeline step with its duration and outcome.

    Keyword fields (domain, location, ...) are attached to every message.
    Facts learned inside the block are added with note() and reported on
    completion.

    Example:
        with LoggerContext(logger, "evaluation", domain="drying", location="Brighton") as step:
            ...
            step.note(status="YES", windows=2)
    """

    def __init__(self, logger: logging.Logger, operation: str, **fields: Any):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the step being logged
            **fields: Context shown with every message
        """
        self.logger = logger
        self.operation = operation
        self.fields: Dict[str, Any] = {key: value for key, value in fields.items() if value is not None}
        self.outcome: Dict[str, Any] = {}
        self.started: Optional[float] = None

    @staticmethod
    def _format(values: Dict[str, Any]) -> str:
        if not values:
            return ""
        return " [" + ", ".join(f"{key}={value}" for key, value in values.items()) + "]"

    def note(self, **outcome: Any) -> None:
        """Record facts to report when the step completes."""
        self.outcome.update(outcome)

    def __enter__(self):
        self.started = time.perf_counter()
        self.logger.info(f"Starting {self.operation}{self._format(self.fields)}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.perf_counter() - self.started

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.operation} after {duration:.2f}s{self._format(self.fields)}: {exc_val}",
                exc_info=True
            )
            return False

        self.logger.info(
            f"Completed {self.operation} in {duration:.2f}s{self._format({**self.fields, **self.outcome})}"
        )
        return False
