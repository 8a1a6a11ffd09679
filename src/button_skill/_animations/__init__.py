# Area: Animations
"""
Light animation helpers.

This package handles:
- Color name resolution
- The basic animation vocabulary (solid, fade, blink, breathe, ...)
"""

from .colors import COLORS, BLACK, get_color, resolve_color
from .basic import (
    ANIMATION_FRAMES,
    compile_animation,
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

__all__ = [
    "COLORS",
    "BLACK",
    "get_color",
    "resolve_color",
    "ANIMATION_FRAMES",
    "compile_animation",
    "solid_animation",
    "fade_animation",
    "fade_in_animation",
    "fade_out_animation",
    "cross_fade_animation",
    "breathe_animation",
    "blink_animation",
    "flip_animation",
    "pulse_animation",
]
