# Area: Test Fixtures
"""Shared request envelope factories for the skill tests."""

import logging

import pytest

from button_skill._dispatch import HandlerInput, SessionState, parse_envelope
from button_skill._skill_config import DEFAULT_CONFIG
from button_skill._turn import ResponseBuilder, new_turn_context


def _envelope(request, attributes=None):
    return {
        "version": "1.0",
        "session": {
            "sessionId": "session-1",
            "new": attributes is None,
            "attributes": attributes,
        },
        "request": request,
    }


@pytest.fixture
def launch_envelope():
    def make(request_id="launch-1", attributes=None):
        return _envelope(
            {"type": "LaunchRequest", "requestId": request_id},
            attributes,
        )
    return make


@pytest.fixture
def intent_envelope():
    def make(name, request_id="intent-1", slots=None, attributes=None):
        intent = {"name": name}
        if slots:
            intent["slots"] = {
                slot: {"name": slot, "value": value} for slot, value in slots.items()
            }
        return _envelope(
            {"type": "IntentRequest", "requestId": request_id, "intent": intent},
            attributes,
        )
    return make


@pytest.fixture
def input_handler_envelope():
    def make(originating_request_id, events, request_id="event-1", attributes=None):
        return _envelope(
            {
                "type": "GameEngine.InputHandlerEvent",
                "requestId": request_id,
                "originatingRequestId": originating_request_id,
                "events": events,
            },
            attributes,
        )
    return make


@pytest.fixture
def press():
    """A reported input handler event holding button-down input events."""
    def make(event_name, *gadget_ids):
        return {
            "name": event_name,
            "inputEvents": [
                {"gadgetId": gadget_id, "action": "down", "color": "ffffff", "feature": "press"}
                for gadget_id in gadget_ids
            ],
        }
    return make


@pytest.fixture
def make_handler_input():
    def make(envelope, session=None):
        parsed = parse_envelope(envelope)
        return HandlerInput(
            request_envelope=parsed,
            session=session or SessionState.from_attributes(parsed.session.attributes),
            turn=new_turn_context(),
            response_builder=ResponseBuilder(),
            config=dict(DEFAULT_CONFIG),
        )
    return make


@pytest.fixture
def reset_package_logger():
    """Undo setup_logging changes to the package logger after a test."""
    pkg_logger = logging.getLogger("button_skill")
    yield pkg_logger
    for handler in list(pkg_logger.handlers):
        handler.close()
    pkg_logger.handlers.clear()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True
