"""
Logging configuration for Unawareness.

Console output is human-oriented and optionally coloured; the file log is
semicolon-separated CSV so it can be opened in a spreadsheet.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings
    from ..settings.logging import LoggingSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"
FILE_MAX_BYTES = 10 * 1024 * 1024
FILE_BACKUP_COUNT = 5

# Third-party loggers that are chatty at DEBUG
QUIET_LOGGERS = ("PIL", "PIL.PngImagePlugin")


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for console output."""

    RESET = "\033[0m"
    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return formatted
        # First occurrence is the level column
        return formatted.replace(
            record.levelname, f"{color}{record.levelname}{self.RESET}", 1
        )


class CSVFormatter(logging.Formatter):
    """One quoted, semicolon-separated row per record."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage().replace('"', '""')
        fields = [
            f'"{self.formatTime(record, self.datefmt)}"',
            record.levelname.ljust(8),
            f'"{int(record.relativeCreated)} ms"',
            f'"{record.name}"',
            f'"{record.lineno}"',
            f'"{message}"',
        ]
        return ";".join(fields)


def _console_handler(options: "LoggingSettings") -> logging.Handler:
    formatter_class = ColoredFormatter if options.console_use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, options.console_log_level.upper(), logging.INFO))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    return handler


def _file_handler(log_path: Path) -> logging.Handler:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=FILE_MAX_BYTES,
        backupCount=FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    # File always captures DEBUG
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATEFMT))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Install console and file handlers according to settings.

    Safe to call again after the logging options change: existing root
    handlers are replaced.

    Args:
        settings: AppSettings instance; its ``logging`` section is used
    """
    options = settings.logging

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    logging.getLogger("unawareness").setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if options.console_logging:
        root_logger.addHandler(_console_handler(options))

    log_path: Optional[Path] = None
    if options.file_logging:
        try:
            root_logger.addHandler(_file_handler(options.log_file_path))
            log_path = options.log_file_absolute_path
        except OSError as e:
            root_logger.warning(f"Could not setup file logging: {e}")

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if options.console_logging:
        logger.debug(
            f"Console logging: {options.console_log_level} "
            f"(colors: {options.console_use_colors})"
        )
    if log_path is not None:
        logger.debug(f"File logging: DEBUG at {log_path}")
