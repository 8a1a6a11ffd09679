# Area: Phases
"""Helpers shared by the roll call and game play phases."""

from typing import List, Optional

from .._animations import solid_animation
from .._directives import SetLightDirective, set_idle_animation
from ..types import InputEvent

LIGHTS_OFF_MS = 100


def gadget_ids(input_events: List[InputEvent]) -> List[str]:
    """Distinct gadget ids in arrival order."""
    ids: List[str] = []
    for input_event in input_events or []:
        gadget_id = input_event.get("gadgetId")
        if gadget_id and gadget_id not in ids:
            ids.append(gadget_id)
    return ids


def lights_off(target_gadgets: Optional[List[str]] = None) -> SetLightDirective:
    """Idle animation that turns the given gadgets (default: all) black."""
    return set_idle_animation(
        solid_animation(1, "black", LIGHTS_OFF_MS),
        target_gadgets=target_gadgets,
    )
