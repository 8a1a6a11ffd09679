# Area: Directives
"""
button_skill._directives.builder — Gadget directive builders
============================================================

Builds the directives a skill response can carry to the Echo Buttons:
starting and stopping an input handler, and setting light animations
for the buttonDown, buttonUp and idle ("none") triggers.

Missing required parameters raise MissingParameterError naming the
field; these are programming errors, not bad input.
"""

from __future__ import annotations
from typing import Any, List, Optional

from ..errors import MissingParameterError
from ..types import Events, Recognizers
from .models import (
    LightAnimation,
    SetLightDirective,
    SetLightParameters,
    StartInputHandlerDirective,
    StopInputHandlerDirective,
)


def _required(value: Any, param: str, directive_type: str) -> Any:
    if value is None:
        raise MissingParameterError(param, directive_type)
    return value


# ── GameEngine.StartInputHandler ──────────────────────────────

def start_input_handler(
    timeout: Optional[int] = None,
    recognizers: Optional[Recognizers] = None,
    events: Optional[Events] = None,
    proxies: Optional[List[str]] = None,
) -> StartInputHandlerDirective:
    """Open a new input handler session listening for button events."""
    directive_type = "GameEngine.StartInputHandler"
    _required(timeout, "timeout", directive_type)
    _required(recognizers, "recognizers", directive_type)
    _required(events, "events", directive_type)
    return StartInputHandlerDirective(
        timeout=timeout,
        proxies=proxies,
        recognizers=recognizers,
        events=events,
    )


# ── GameEngine.StopInputHandler ───────────────────────────────

def stop_input_handler(
    originating_request_id: Optional[str] = None,
) -> StopInputHandlerDirective:
    """Cancel the input handler started by ``originating_request_id``."""
    _required(originating_request_id, "originatingRequestId", "GameEngine.StopInputHandler")
    return StopInputHandlerDirective(originating_request_id=originating_request_id)


# ── GadgetController.SetLight ─────────────────────────────────

def _set_light(
    trigger_event: str,
    animations: Optional[List[LightAnimation]],
    target_gadgets: Optional[List[str]],
    trigger_event_time_ms: Optional[int],
) -> SetLightDirective:
    _required(animations, "animations", "GadgetController.SetLight")
    return SetLightDirective(
        target_gadgets=target_gadgets or [],
        parameters=SetLightParameters(
            animations=animations,
            trigger_event=trigger_event,
            trigger_event_time_ms=trigger_event_time_ms or 0,
        ),
    )


def set_button_down_animation(
    animations: Optional[List[LightAnimation]] = None,
    target_gadgets: Optional[List[str]] = None,
    trigger_event_time_ms: Optional[int] = None,
) -> SetLightDirective:
    """Animation played when a button is pressed. No targets means all gadgets."""
    return _set_light("buttonDown", animations, target_gadgets, trigger_event_time_ms)


def set_button_up_animation(
    animations: Optional[List[LightAnimation]] = None,
    target_gadgets: Optional[List[str]] = None,
    trigger_event_time_ms: Optional[int] = None,
) -> SetLightDirective:
    """Animation played when a button is released."""
    return _set_light("buttonUp", animations, target_gadgets, trigger_event_time_ms)


def set_idle_animation(
    animations: Optional[List[LightAnimation]] = None,
    target_gadgets: Optional[List[str]] = None,
    trigger_event_time_ms: Optional[int] = None,
) -> SetLightDirective:
    """Animation played right away, with no trigger."""
    return _set_light("none", animations, target_gadgets, trigger_event_time_ms)
