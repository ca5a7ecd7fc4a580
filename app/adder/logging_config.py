"""
Logging Configuration

Logging setup for the adder. Records always go to stderr (and
optionally a file) so standard output carries only the prompts
and the result line.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional

# Identifies the current run in every log record
_run_id_ctx: ContextVar[Optional[str]] = ContextVar("run_id", default=None)

_logging_configured = False

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset([
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "taskName", "thread", "threadName",
])


def get_run_id() -> Optional[str]:
    """Get the current run ID."""
    return _run_id_ctx.get()


def set_run_id(run_id: Optional[str]) -> None:
    """Set the current run ID."""
    _run_id_ctx.set(run_id)


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record: time, level, logger, message, the run id
    (null outside a run), and any `extra=` fields under "extra".
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": get_run_id(),
        }

        extra = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}
        if extra:
            log_data["extra"] = extra
        if record.exc_info:
            log_data["error"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Configure logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to write logs to
        json_format: Whether to emit JSON records
    """
    global _logging_configured

    if _logging_configured:
        return

    if json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger("adder")
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root_logger.handlers = []
    # Keep records off the root logger, whose handlers may write to stdout
    root_logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True


def reset_logging() -> None:
    """Drop the package handlers so setup_logging() can run again."""
    global _logging_configured

    root_logger = logging.getLogger("adder")
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = []
    root_logger.propagate = True
    _logging_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (will be prefixed with 'adder.')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"adder.{name}")
