# Area: Directives
"""
button_skill._directives.models — Outbound wire models
======================================================

Frozen pydantic models for everything the skill sends to the device
layer: light animations and the three gadget directives. Field names
are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, NonNegativeInt, PositiveInt
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable value object serialized with camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ══════════════════════════════════════════════════════════════
# LIGHT ANIMATIONS
# ══════════════════════════════════════════════════════════════


class AnimationFrame(WireModel):
    """One step of a light animation."""
    duration_ms: PositiveInt
    blend: bool
    color: str


class LightAnimation(WireModel):
    """A frame sequence repeated ``repeat`` times on the target lights."""
    repeat: NonNegativeInt
    target_lights: List[str]
    sequence: List[AnimationFrame]


# ══════════════════════════════════════════════════════════════
# DIRECTIVES
# ══════════════════════════════════════════════════════════════


class StartInputHandlerDirective(WireModel):
    type: Literal["GameEngine.StartInputHandler"] = "GameEngine.StartInputHandler"
    timeout: PositiveInt
    proxies: Optional[List[str]] = None
    recognizers: Dict[str, Dict[str, Any]]
    events: Dict[str, Dict[str, Any]]


class StopInputHandlerDirective(WireModel):
    type: Literal["GameEngine.StopInputHandler"] = "GameEngine.StopInputHandler"
    originating_request_id: str


class SetLightParameters(WireModel):
    animations: List[LightAnimation]
    trigger_event: Literal["buttonDown", "buttonUp", "none"]
    trigger_event_time_ms: NonNegativeInt = 0


class SetLightDirective(WireModel):
    type: Literal["GadgetController.SetLight"] = "GadgetController.SetLight"
    version: Literal[1] = 1
    target_gadgets: List[str]
    parameters: SetLightParameters
