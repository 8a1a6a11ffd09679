# Area: Turn
"""
button_skill._turn.response_builder — Outbound response
=======================================================

Builds the ``response`` object of a skill reply: SSML speech, reprompt,
session continuation and the directive list.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


def _ssml(text: str) -> Dict[str, str]:
    return {"type": "SSML", "ssml": f"<speak>{text}</speak>"}


class ResponseBuilder:
    """
    Mutable builder for one outbound response.

    Handlers normally go through the TurnContext; the builder is used
    directly only for session-level decisions (ending the session) and
    by the response assembler.
    """

    def __init__(self):
        self.response: Dict[str, Any] = {}

    def speak(self, speech: str) -> "ResponseBuilder":
        self.response["outputSpeech"] = _ssml(speech)
        return self

    def ask(self, reprompt: str) -> "ResponseBuilder":
        """Set the reprompt; a reprompt implies the session stays open."""
        self.response["reprompt"] = {"outputSpeech": _ssml(reprompt)}
        self.response["shouldEndSession"] = False
        return self

    def set_should_end_session(self, value: Optional[bool]) -> "ResponseBuilder":
        """None removes the flag, leaving continuation to the device."""
        if value is None:
            self.response.pop("shouldEndSession", None)
        else:
            self.response["shouldEndSession"] = value
        return self

    def add_directive(self, directive: Dict[str, Any]) -> "ResponseBuilder":
        self.response.setdefault("directives", []).append(directive)
        return self

    def get_response(self) -> Dict[str, Any]:
        return self.response
