# Area: Shared
"""
Shared utilities used across the skill engine.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    log_handler_error,
    TerminalFormatter,
    JSONFormatter,
)

__all__ = [
    "setup_logging",
    "log_handler_error",
    "TerminalFormatter",
    "JSONFormatter",
]
