# Area: Dispatch
"""
button_skill._dispatch.request_models — Inbound request envelope
================================================================

pydantic models for the request envelopes the host delivers: launch,
intent, session-ended and GameEngine.InputHandlerEvent requests.
Unknown fields are kept so newer envelopes still parse.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from ..errors import InvalidRequestError

INPUT_HANDLER_EVENT = "GameEngine.InputHandlerEvent"
INTENT_REQUEST = "IntentRequest"
LAUNCH_REQUEST = "LaunchRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"


class InboundModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Slot(InboundModel):
    name: str
    value: Optional[str] = None


class Intent(InboundModel):
    name: str
    slots: Dict[str, Slot] = Field(default_factory=dict)


class InputHandlerEvent(InboundModel):
    """One named event reported by an input handler."""
    name: str
    input_events: Optional[List[Dict[str, Any]]] = None


class Request(InboundModel):
    type: str
    request_id: Optional[str] = None
    timestamp: Optional[str] = None
    intent: Optional[Intent] = None
    reason: Optional[str] = None
    # GameEngine.InputHandlerEvent only
    originating_request_id: Optional[str] = None
    events: Optional[List[InputHandlerEvent]] = None

    @property
    def intent_name(self) -> Optional[str]:
        return self.intent.name if self.intent else None

    def slot_value(self, slot_name: str) -> Optional[str]:
        if not self.intent:
            return None
        slot = self.intent.slots.get(slot_name)
        return slot.value if slot else None


class Session(InboundModel):
    session_id: Optional[str] = None
    new: bool = False
    attributes: Optional[Dict[str, Any]] = None


class RequestEnvelope(InboundModel):
    version: str = "1.0"
    session: Session = Field(default_factory=Session)
    request: Request


def parse_envelope(payload: Dict[str, Any]) -> RequestEnvelope:
    """Parse a raw envelope dict, raising InvalidRequestError on bad input."""
    try:
        return RequestEnvelope.model_validate(payload)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidRequestError(payload, errors) from e
