# Area: Dispatch
"""
Request and event dispatch.

This package handles:
- Parsing inbound request envelopes
- Session state across turns
- Routing input handler events to phase handlers
- Top-level request handlers
"""

from .request_models import RequestEnvelope, Request, parse_envelope
from .session_state import SessionState
from .handler_input import HandlerInput
from .input_events import EventRoute, EVENT_ROUTES, InputEventDispatcher
from .request_handlers import (
    RequestHandler,
    SkillErrorHandler,
    build_request_handlers,
)

__all__ = [
    "RequestEnvelope",
    "Request",
    "parse_envelope",
    "SessionState",
    "HandlerInput",
    "EventRoute",
    "EVENT_ROUTES",
    "InputEventDispatcher",
    "RequestHandler",
    "SkillErrorHandler",
    "build_request_handlers",
]
