# Area: Turn
"""
button_skill._turn.context — Per-turn accumulator
=================================================

One TurnContext is created for each inbound request and threaded
through every handler that touches the turn. Handlers only append;
nothing they add is overwritten or reordered by a later handler.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .._directives.models import WireModel
from ..types import InputEvent


@dataclass
class TurnContext:
    """
    Speech, reprompt, microphone and directives collected for one turn.

    ``open_microphone`` is None until a handler decides: True keeps the
    conversation open for a spoken reply, False keeps the session alive
    for button events only.
    """
    speech_parts: List[str] = field(default_factory=list)
    reprompt_parts: List[str] = field(default_factory=list)
    directives: List[WireModel] = field(default_factory=list)
    open_microphone: Optional[bool] = None
    game_input_events: List[InputEvent] = field(default_factory=list)

    def speak(self, *parts: str) -> "TurnContext":
        self.speech_parts.extend(parts)
        return self

    def reprompt(self, *parts: str) -> "TurnContext":
        self.reprompt_parts.extend(parts)
        return self

    def add_directive(self, directive: WireModel) -> "TurnContext":
        self.directives.append(directive)
        return self

    def to_log_dict(self) -> Dict[str, Any]:
        return {
            "speech_parts": list(self.speech_parts),
            "reprompt_parts": list(self.reprompt_parts),
            "directives": [d.to_wire() for d in self.directives],
            "open_microphone": self.open_microphone,
        }
