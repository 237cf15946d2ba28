"""
Structured logging configuration
Provides consistent logging across the engine with:
- Structured JSON logging for embedding hosts that ship logs
- Human-readable logs for development
- Request / spec correlation IDs
- Operation timing
"""

import json
import logging
import sys
import time
from contextvars import ContextVar
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# Context variables for correlation
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
spec_id_var: ContextVar[Optional[str]] = ContextVar("spec_id", default=None)

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 3

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def correlation_context() -> Dict[str, str]:
    """The correlation ids bound to the current context"""
    context = {}
    request_id = request_id_var.get()
    if request_id:
        context["request_id"] = request_id
    spec_id = spec_id_var.get()
    if spec_id:
        context["spec_id"] = spec_id
    return context


class StructuredFormatter(logging.Formatter):
    """One JSON object per line"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            **correlation_context(),
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
            and key not in log_data
            and not key.startswith("_")
            and not callable(value)
        }
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Colored single-line output for a terminal"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]

        context = correlation_context()
        tags = []
        if "request_id" in context:
            tags.append(f"req:{context['request_id'][:8]}")
        if "spec_id" in context:
            tags.append(f"spec:{context['spec_id'][:12]}")
        suffix = f" [{', '.join(tags)}]" if tags else ""

        line = (
            f"{color}{timestamp} {record.levelname:8s}{self.RESET} "
            f"{record.name:30s}{suffix} {record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class LoggerAdapter(logging.LoggerAdapter):
    """Merges correlation ids and bound context into every record's extra"""

    def process(self, msg: str, kwargs: Any) -> tuple:
        extra = kwargs.setdefault("extra", {})
        extra.update(correlation_context())
        for key, value in (self.extra or {}).items():
            extra.setdefault(key, value)
        return msg, kwargs


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    use_json: bool = False,
    max_bytes: int = DEFAULT_LOG_MAX_BYTES,
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
) -> None:
    """
    Configure engine logging on the root logger

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional rotating log file; always written as JSON
        use_json: Structured JSON on stdout instead of colored lines
        max_bytes: Rotation size for log_file
        backup_count: Rotated files kept for log_file
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(StructuredFormatter() if use_json else DevelopmentFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)


def get_logger(name: str, **extra: Any) -> LoggerAdapter:
    """
    Get a logger with optional bound context

    Example:
        logger = get_logger(__name__, component="rule_enforcer")
        logger.info("Spec checked", extra={"violations": 2})
    """
    return LoggerAdapter(logging.getLogger(name), extra)


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


def set_spec_id(spec_id: str) -> None:
    """Set the ID of the animation spec being processed"""
    spec_id_var.set(spec_id)


def clear_context() -> None:
    request_id_var.set(None)
    spec_id_var.set(None)


class LogTimer:
    """Logs the start, completion or failure of an operation with its duration"""

    def __init__(self, logger: logging.LoggerAdapter, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self._started: Optional[float] = None
        self.duration: Optional[float] = None  # seconds

    def __enter__(self) -> "LogTimer":
        self._started = time.perf_counter()
        self.logger.log(self.level, f"Starting: {self.operation}", extra={"operation": self.operation})
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb) -> None:
        self.duration = time.perf_counter() - self._started
        extra = {"operation": self.operation, "duration_ms": round(self.duration * 1000, 2)}

        if exc_type:
            self.logger.error(
                f"Failed: {self.operation}",
                extra={**extra, "error": str(exc_val)},
                exc_info=True,
            )
        else:
            self.logger.log(self.level, f"Completed: {self.operation}", extra=extra)
