# Area: Directives
"""
Gadget directives.

This package handles:
- Frozen wire models for animations and directives
- Builders for StartInputHandler, StopInputHandler and SetLight
"""

from .models import (
    WireModel,
    AnimationFrame,
    LightAnimation,
    StartInputHandlerDirective,
    StopInputHandlerDirective,
    SetLightParameters,
    SetLightDirective,
)
from .builder import (
    start_input_handler,
    stop_input_handler,
    set_button_down_animation,
    set_button_up_animation,
    set_idle_animation,
)

__all__ = [
    "WireModel",
    "AnimationFrame",
    "LightAnimation",
    "StartInputHandlerDirective",
    "StopInputHandlerDirective",
    "SetLightParameters",
    "SetLightDirective",
    "start_input_handler",
    "stop_input_handler",
    "set_button_down_animation",
    "set_button_up_animation",
    "set_idle_animation",
]
