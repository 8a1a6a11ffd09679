# Area: Dispatch
"""Input passed to request handlers and phase entry points."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from .request_models import Request, RequestEnvelope
from .session_state import SessionState
from .._turn.context import TurnContext
from .._turn.response_builder import ResponseBuilder


@dataclass
class HandlerInput:
    """Everything a handler may read or mutate during one turn."""

    request_envelope: RequestEnvelope
    session: SessionState
    turn: TurnContext
    response_builder: ResponseBuilder
    config: Dict[str, Any]

    @property
    def request(self) -> Request:
        return self.request_envelope.request
