"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - exceptions.py: Exception hierarchy

Usage:
    from motion_rules.core import get_logger, LogTimer
"""

from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_spec_id,
    clear_context,
    LogTimer,
)

from .exceptions import (
    MotionRulesError,
    StorageError,
    TemplateRegistryError,
    DuplicateTemplateError,
    TemplateNotFoundError,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_spec_id",
    "clear_context",
    "LogTimer",
    # Exceptions
    "MotionRulesError",
    "StorageError",
    "TemplateRegistryError",
    "DuplicateTemplateError",
    "TemplateNotFoundError",
]
