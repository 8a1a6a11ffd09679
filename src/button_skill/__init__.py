"""
button_skill — Echo Buttons skill engine
========================================

Turns button presses, input handler timeouts and voice intents into
speech and gadget light directives for a two-button color game.

Quick Start:
    from button_skill import ButtonSkill
    skill = ButtonSkill()
    response = skill.invoke(request_envelope)

Hosted:
    handler = button_skill.lambda_handler

Building blocks
---------------
Animations and directives can be used on their own:

    from button_skill import blink_animation, set_idle_animation
    directive = set_idle_animation(blink_animation(3, "blue"))
    directive.to_wire()
"""

from .skill import ButtonSkill, lambda_handler
from .settings import SkillPhase
from .errors import (
    ButtonSkillError,
    MissingParameterError,
    InvalidRequestError,
)
from ._animations import (
    resolve_color,
    get_color,
    solid_animation,
    fade_animation,
    fade_in_animation,
    fade_out_animation,
    cross_fade_animation,
    breathe_animation,
    blink_animation,
    flip_animation,
    pulse_animation,
)
from ._directives import (
    AnimationFrame,
    LightAnimation,
    start_input_handler,
    stop_input_handler,
    set_button_down_animation,
    set_button_up_animation,
    set_idle_animation,
)
from ._turn import TurnContext, assemble_response, new_turn_context
from ._dispatch import InputEventDispatcher, SessionState
from .types import InputEvent, RecognizerSpec, EventSpec

__all__ = [
    # Main classes
    "ButtonSkill",
    "lambda_handler",
    "SkillPhase",
    "SessionState",
    "TurnContext",
    "InputEventDispatcher",
    "new_turn_context",
    "assemble_response",
    # Errors
    "ButtonSkillError",
    "MissingParameterError",
    "InvalidRequestError",
    # Colors and animations
    "resolve_color",
    "get_color",
    "AnimationFrame",
    "LightAnimation",
    "solid_animation",
    "fade_animation",
    "fade_in_animation",
    "fade_out_animation",
    "cross_fade_animation",
    "breathe_animation",
    "blink_animation",
    "flip_animation",
    "pulse_animation",
    # Directives
    "start_input_handler",
    "stop_input_handler",
    "set_button_down_animation",
    "set_button_up_animation",
    "set_idle_animation",
    # Raw payload types
    "InputEvent",
    "RecognizerSpec",
    "EventSpec",
]
__version__ = "1.0.0"
