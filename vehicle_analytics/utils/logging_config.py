"""
VehicleAnalytics - Logging Configuration

Centralized logging setup for the dashboard, API and CLI.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = Path("data/logs")
) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Console logging level (default: INFO)
        log_file: Log file name (default: vehicle_analytics.log)
        log_dir: Directory for log files, or None for console-only logging

    Returns:
        Root logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_dir is not None else level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / (log_file or "vehicle_analytics.log")

        # File keeps DEBUG regardless of console level
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    configure_module_loggers(level)

    return root_logger


def configure_module_loggers(default_level: int = logging.INFO) -> None:
    """
    Set levels for application modules and quiet third-party libraries.

    Args:
        default_level: Level for vehicle_analytics.* loggers
    """
    logging.getLogger("vehicle_analytics").setLevel(default_level)

    # werkzeug logs one line per request, including every Dash callback
    for lib in ("werkzeug", "urllib3", "dash", "flask_cors"):
        logging.getLogger(lib).setLevel(logging.WARNING)


class LogContext:
    """
    Temporarily change one logger's level.

    Example:
        with LogContext("vehicle_analytics.utils.performance", logging.DEBUG):
            views.analytics.yoy(params)
    """

    def __init__(self, logger_name: str, level: int):
        self.logger = logging.getLogger(logger_name)
        self.new_level = level
        self.original_level = logging.NOTSET

    def __enter__(self) -> logging.Logger:
        self.original_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)
        return False
