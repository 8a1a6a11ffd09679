# Area: Animations
"""
button_skill._animations.basic — Basic light animations
=======================================================

A small animation vocabulary compiled from a frame table. Every
animation returns a one-element list holding a LightAnimation on
light "1", ready to be passed to a SetLight directive builder.

The timing constants encode the feel of the game; they are not
parameters.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

from .colors import BLACK, resolve_color
from .._directives.models import AnimationFrame, LightAnimation

TARGET_LIGHTS = ["1"]

INSTANT_MS = 1
BREATHE_HOLD_MS = 300
BREATHE_RELEASE_MS = 300
BLINK_ON_MS = 500
BLINK_OFF_MS = 500
PULSE_RISE_MS = 500
PULSE_FALL_MS = 1000
FADE_CYCLES = 1


@dataclass(frozen=True)
class Arg:
    """Reference to a caller-supplied parameter inside a frame spec."""
    name: str


@dataclass(frozen=True)
class FrameSpec:
    """Frame template: literal values or Arg references."""
    duration: Union[int, Arg]
    blend: bool
    color: Union[str, Arg]


ANIMATION_FRAMES: Dict[str, Tuple[FrameSpec, ...]] = {
    "solid": (
        FrameSpec(Arg("duration"), False, Arg("color")),
    ),
    "fade": (
        FrameSpec(Arg("duration"), True, Arg("color")),
    ),
    "fade_in": (
        FrameSpec(INSTANT_MS, True, BLACK),
        FrameSpec(Arg("duration"), True, Arg("color")),
    ),
    "fade_out": (
        FrameSpec(Arg("duration"), True, Arg("color")),
        FrameSpec(INSTANT_MS, True, BLACK),
    ),
    "cross_fade": (
        FrameSpec(Arg("duration_one"), True, Arg("color_one")),
        FrameSpec(Arg("duration_two"), True, Arg("color_two")),
    ),
    "breathe": (
        FrameSpec(INSTANT_MS, True, BLACK),
        FrameSpec(Arg("duration"), True, Arg("color")),
        FrameSpec(BREATHE_HOLD_MS, True, Arg("color")),
        FrameSpec(BREATHE_RELEASE_MS, True, BLACK),
    ),
    "blink": (
        FrameSpec(BLINK_ON_MS, False, Arg("color")),
        FrameSpec(BLINK_OFF_MS, False, BLACK),
    ),
    "flip": (
        FrameSpec(Arg("duration_one"), False, Arg("color_one")),
        FrameSpec(Arg("duration_two"), False, Arg("color_two")),
    ),
    "pulse": (
        FrameSpec(PULSE_RISE_MS, True, Arg("color_one")),
        FrameSpec(PULSE_FALL_MS, True, Arg("color_two")),
    ),
}


def compile_animation(name: str, cycles: int, **params: Any) -> List[LightAnimation]:
    """Build the named animation from its frame table entry."""
    sequence = []
    for spec in ANIMATION_FRAMES[name]:
        duration = params[spec.duration.name] if isinstance(spec.duration, Arg) else spec.duration
        if isinstance(spec.color, Arg):
            color = resolve_color(params[spec.color.name])
        else:
            color = spec.color
        sequence.append(AnimationFrame(duration_ms=duration, blend=spec.blend, color=color))

    return [
        LightAnimation(
            repeat=cycles,
            target_lights=list(TARGET_LIGHTS),
            sequence=sequence,
        )
    ]


def solid_animation(cycles: int, color: str, duration: int) -> List[LightAnimation]:
    return compile_animation("solid", cycles, color=color, duration=duration)


def fade_animation(color: str, duration: int) -> List[LightAnimation]:
    """Fade from the current color to ``color`` once."""
    return compile_animation("fade", FADE_CYCLES, color=color, duration=duration)


def fade_in_animation(cycles: int, color: str, duration: int) -> List[LightAnimation]:
    return compile_animation("fade_in", cycles, color=color, duration=duration)


def fade_out_animation(cycles: int, color: str, duration: int) -> List[LightAnimation]:
    return compile_animation("fade_out", cycles, color=color, duration=duration)


def cross_fade_animation(
    cycles: int,
    color_one: str,
    color_two: str,
    duration_one: int,
    duration_two: int,
) -> List[LightAnimation]:
    return compile_animation(
        "cross_fade", cycles,
        color_one=color_one, color_two=color_two,
        duration_one=duration_one, duration_two=duration_two,
    )


def breathe_animation(cycles: int, color: str, duration: int) -> List[LightAnimation]:
    """Rise from black to ``color`` over ``duration``, hold, then release."""
    return compile_animation("breathe", cycles, color=color, duration=duration)


def blink_animation(cycles: int, color: str) -> List[LightAnimation]:
    return compile_animation("blink", cycles, color=color)


def flip_animation(
    cycles: int,
    color_one: str,
    color_two: str,
    duration_one: int,
    duration_two: int,
) -> List[LightAnimation]:
    """Hard switch between two colors."""
    return compile_animation(
        "flip", cycles,
        color_one=color_one, color_two=color_two,
        duration_one=duration_one, duration_two=duration_two,
    )


def pulse_animation(cycles: int, color_one: str, color_two: str) -> List[LightAnimation]:
    return compile_animation("pulse", cycles, color_one=color_one, color_two=color_two)
