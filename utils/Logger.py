"""
Logging configuration with singleton pattern.

Provides a centralized logger accessible via class methods.
All standard logging.Logger methods are accessible directly.

Log output goes to stderr so that the per-project status lines printed on
stdout are never interleaved with log records. When log_color is True and
stderr is a TTY, the severity (levelname) is colored: DEBUG=gray, INFO=white,
WARNING=orange, ERROR=red, CRITICAL=bright purple. The log file is never colored.

Example usage:
    from utils.Logger import Logger

    Logger.initialize(log_level="INFO")

    Logger.info("Regenerating READMEs")
    Logger.set_current_project("crates/rune")
    Logger.debug("spawning generator")  # tagged with [crates/rune]
    Logger.clear_current_project()
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional, Union

_RESET = "\033[0m"
_LEVEL_COLORS = {
    "DEBUG": "\033[90m",
    "INFO": "\033[37m",
    "WARNING": "\033[38;5;208m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[95m",
}

_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(project_tag)s%(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ColoredLevelFormatter(logging.Formatter):
    """Formats like the base formatter but colors only the levelname."""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelname)
        if color:
            record.colored_levelname = f"{color}{record.levelname}{_RESET}"
        else:
            record.colored_levelname = record.levelname
        return super().format(record)


class _ProjectFilter(logging.Filter):
    """
    Tag the record with the project currently being regenerated.

    Attached to handlers so records from child loggers are tagged too. A
    record passing several handlers is tagged once.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "project_tag"):
            project = getattr(record, "project", None)
            if project is None:
                project = getattr(Logger._thread_local, "project", None)
            record.project_tag = f"[{project}] " if project else ""
        return True


class LoggerMeta(type):
    """Metaclass to delegate all method calls to the underlying logger."""

    def __getattr__(cls, name: str):
        if name.startswith("__"):
            raise AttributeError(name)
        if not cls._initialized:
            raise RuntimeError("Logger has not been initialized. Call Logger.initialize() first.")
        return getattr(cls._logger, name)


class Logger(metaclass=LoggerMeta):
    """Logger class providing direct access to all logging.Logger methods."""

    _logger: Optional[logging.Logger] = None
    _initialized: bool = False
    _thread_local = threading.local()

    @classmethod
    def set_current_project(cls, project: Optional[str]) -> None:
        """Set the project tag for subsequent log output. Use None to clear."""
        cls._thread_local.project = project

    @classmethod
    def clear_current_project(cls) -> None:
        cls._thread_local.project = None

    @classmethod
    def initialize(
        cls,
        log_level: str = "INFO",
        log_file: Optional[Union[str, Path]] = None,
        log_color: bool = False,
    ) -> None:
        """
        Initialize the logger with specified settings.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR). Unknown
                names fall back to INFO.
            log_file: Path of a log file to append to. None disables file
                logging.
            log_color: If True and stderr is a TTY, color the levelname in
                stream output.
        """
        if cls._initialized:
            return

        level = getattr(logging, log_level.upper(), logging.INFO)
        plain_formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)

        cls._logger = logging.getLogger("ReadmeRegen")
        cls._logger.handlers.clear()
        cls._logger.filters.clear()
        cls._logger.setLevel(level)
        cls._logger.propagate = False

        if log_color and sys.stderr.isatty():
            stream_format = _LOG_FORMAT.replace("%(levelname)s", "%(colored_levelname)s")
            stream_formatter: logging.Formatter = _ColoredLevelFormatter(stream_format, datefmt=_DATE_FORMAT)
        else:
            stream_formatter = plain_formatter

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(level)
        stream_handler.setFormatter(stream_formatter)
        stream_handler.addFilter(_ProjectFilter())
        cls._logger.addHandler(stream_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(plain_formatter)
            file_handler.addFilter(_ProjectFilter())
            cls._logger.addHandler(file_handler)

        cls._initialized = True

    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """
        Get the underlying logger instance for advanced usage.

        Args:
            name: Optional child logger name. If None, returns the main logger.

        Returns:
            Logger instance
        """
        if not cls._initialized:
            raise RuntimeError("Logger has not been initialized. Call Logger.initialize() first.")
        if name is None:
            return cls._logger
        return logging.getLogger(f"ReadmeRegen.{name}")
