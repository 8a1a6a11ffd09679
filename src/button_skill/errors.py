"""
button_skill.errors — Custom exception classes
===============================================

Defines the exception hierarchy for the skill engine.
Configuration errors (a directive built without a required field) are
programming defects and propagate out of the builders; the skill's error
handler turns them into an apologetic response.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class ButtonSkillError(Exception):
    """Base exception for all button_skill errors."""
    pass


class MissingParameterError(ButtonSkillError):
    """Raised when a directive builder is called without a required field."""

    def __init__(self, param: str, directive_type: Optional[str] = None):
        self.param = param
        self.directive_type = directive_type
        super().__init__(f'Required parameter, "{param}" is missing.')

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="MISSING_PARAMETER",
            source=self.directive_type or "directive builder",
            payload={"param": self.param},
            details=[str(self)],
        )


class InvalidRequestError(ButtonSkillError):
    """Raised when an inbound request envelope cannot be parsed."""

    def __init__(self, payload: Dict[str, Any], validation_errors: List[str]):
        self.payload = payload
        self.validation_errors = validation_errors
        super().__init__(
            f"Request envelope failed validation: {validation_errors}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_REQUEST",
            source="request envelope",
            payload=self.payload,
            details=self.validation_errors,
        )


def format_handler_error(
    error: BaseException,
    request_type: str,
    request_id: Optional[str],
) -> str:
    """Structured error block for an exception raised by a request handler."""
    if isinstance(error, ButtonSkillError) and hasattr(error, "format_error_log"):
        return error.format_error_log()
    return _format_error_block(
        error_type=type(error).__name__,
        source=request_type,
        payload={"requestId": request_id},
        details=[str(error)],
    )


def _format_error_block(
    error_type: str,
    source: str,
    payload: Dict[str, Any],
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for the log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " SKILL ERROR — TURN ABANDONED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Source:       {source}",
        "",
        " ── PAYLOAD " + "─" * 52,
        _indent_json(payload),
    ]

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
