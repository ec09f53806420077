"""
Logging helpers for the command executor.

A single logger is built once by the entry point and handed to every
component. Components wrap it in a ModuleLogger so each record carries the
name of the module that produced it.

Components built without a logger (library use, tests) fall back to the
package logger, which only has a NullHandler until create_logger configures
it, so they stay silent instead of writing to stderr.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional, TextIO, Tuple, Union

LOGGER_NAME = "command_executor"

RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}

LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}

_LEVELS_BY_NAME = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
}


def parse_log_level(level: str) -> int:
    """
    Convert a level name to a ``logging`` level.

    Args:
        level: DEBUG, INFO, WARN, ERROR or FATAL (case-insensitive)

    Returns:
        The matching logging level, INFO for unknown names
    """
    return _LEVELS_BY_NAME.get((level or "").strip().upper(), logging.INFO)


class ColorFormatter(logging.Formatter):
    """Formats records as ``[timestamp] LEVEL [module] message`` with ANSI colors."""

    def __init__(self, use_color: bool = True):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        level_name = LEVEL_NAMES.get(record.levelno, record.levelname)
        if self.use_color:
            level_name = f"{LEVEL_COLORS.get(record.levelno, '')}{level_name}{RESET}"

        message = record.getMessage()
        module_tag = getattr(record, "module_tag", None)
        if module_tag:
            line = f"[{timestamp}] {level_name} [{module_tag}] {message}"
        else:
            line = f"[{timestamp}] {level_name} {message}"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def create_logger(
    level: str = "INFO",
    stream: Optional[TextIO] = None,
    use_color: bool = True,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Build the logger shared by all components of one run.

    The logger does not propagate to the root logger, so nothing global is
    configured. Calling this again with the same name replaces its handler.

    Args:
        level: Level name accepted by parse_log_level
        stream: Output stream, stdout by default
        use_color: Whether to emit ANSI color codes
        name: Logger name

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(parse_log_level(level))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ColorFormatter(use_color=use_color))
    logger.addHandler(handler)
    return logger


class ModuleLogger(logging.LoggerAdapter):
    """Logger adapter that tags every record with a module name."""

    def __init__(self, logger: logging.Logger, module: str):
        super().__init__(logger, {"module_tag": module})
        self.module = module

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("module_tag", self.module)
        kwargs["extra"] = extra
        return msg, kwargs

    def fatal(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Log at FATAL level and terminate the process with exit code 1."""
        self.critical(msg, *args, **kwargs)
        raise SystemExit(1)


def get_module_logger(
    module: str, logger: Optional[Union[logging.Logger, "ModuleLogger"]] = None
) -> ModuleLogger:
    """
    Wrap a logger with a module tag.

    Args:
        module: Module tag shown in every record, e.g. ``executor.plain``
        logger: Logger to wrap; the package logger when not given, which is
            silent unless create_logger has configured it

    Returns:
        ModuleLogger bound to the module tag
    """
    if isinstance(logger, ModuleLogger):
        logger = logger.logger
    return ModuleLogger(logger or logging.getLogger(LOGGER_NAME), module)
