# Area: Animations Tests
"""Tests for the basic light animation vocabulary."""

import pytest
from pydantic import ValidationError

from button_skill._animations import (
    blink_animation,
    breathe_animation,
    cross_fade_animation,
    fade_animation,
    fade_in_animation,
    fade_out_animation,
    flip_animation,
    pulse_animation,
    solid_animation,
)
from button_skill._animations.basic import (
    ANIMATION_FRAMES,
    BREATHE_HOLD_MS,
    BREATHE_RELEASE_MS,
    INSTANT_MS,
    PULSE_FALL_MS,
    PULSE_RISE_MS,
)


def frames(animations):
    """(duration, blend, color) tuples of the single animation returned."""
    assert len(animations) == 1
    return [
        (frame.duration_ms, frame.blend, frame.color)
        for frame in animations[0].sequence
    ]


class TestAnimationShape:
    """Tests for the common structure of every animation."""

    @pytest.mark.parametrize("animations", [
        solid_animation(2, "red", 100),
        fade_animation("red", 100),
        fade_in_animation(2, "red", 100),
        fade_out_animation(2, "red", 100),
        cross_fade_animation(2, "red", "blue", 100, 200),
        breathe_animation(2, "red", 100),
        blink_animation(2, "red"),
        flip_animation(2, "red", "blue", 100, 200),
        pulse_animation(2, "red", "blue"),
    ])
    def test_single_animation_on_light_one(self, animations):
        """Test that each animation is one LightAnimation on light "1"."""
        assert len(animations) == 1
        assert animations[0].target_lights == ["1"]

    def test_frame_table_lengths(self):
        """Test the number of frames each animation compiles to."""
        lengths = {name: len(specs) for name, specs in ANIMATION_FRAMES.items()}
        assert lengths == {
            "solid": 1,
            "fade": 1,
            "fade_in": 2,
            "fade_out": 2,
            "cross_fade": 2,
            "breathe": 4,
            "blink": 2,
            "flip": 2,
            "pulse": 2,
        }

    def test_zero_cycles_allowed(self):
        """Test that a repeat count of zero is accepted."""
        animation = solid_animation(0, "red", 100)[0]
        assert animation.repeat == 0

    def test_non_positive_duration_rejected(self):
        with pytest.raises(ValidationError):
            solid_animation(1, "red", 0)


class TestAnimationFrames:
    """Tests for the frames of individual animations."""

    def test_blink_three_blue(self):
        """Test blink(3, "blue") on the wire."""
        animation = blink_animation(3, "blue")[0]
        assert animation.to_wire() == {
            "repeat": 3,
            "targetLights": ["1"],
            "sequence": [
                {"durationMs": 500, "blend": False, "color": "0000ff"},
                {"durationMs": 500, "blend": False, "color": "000000"},
            ],
        }

    def test_cross_fade_red_green(self):
        """Test cross_fade(2, "red", "green", 200, 400)."""
        animations = cross_fade_animation(2, "red", "green", 200, 400)
        assert animations[0].repeat == 2
        assert frames(animations) == [
            (200, True, "ff0000"),
            (400, True, "00ff00"),
        ]

    def test_solid(self):
        assert frames(solid_animation(1, "white", 2000)) == [(2000, False, "ffffff")]

    def test_fade_runs_once(self):
        animations = fade_animation("blue", 750)
        assert animations[0].repeat == 1
        assert frames(animations) == [(750, True, "0000ff")]

    def test_fade_in_starts_black(self):
        assert frames(fade_in_animation(1, "red", 300)) == [
            (INSTANT_MS, True, "000000"),
            (300, True, "ff0000"),
        ]

    def test_fade_out_ends_black(self):
        assert frames(fade_out_animation(1, "red", 300)) == [
            (300, True, "ff0000"),
            (INSTANT_MS, True, "000000"),
        ]

    def test_breathe(self):
        """Test breathe rises from black, holds, then releases to black."""
        assert frames(breathe_animation(30, "white", 1000)) == [
            (INSTANT_MS, True, "000000"),
            (1000, True, "ffffff"),
            (BREATHE_HOLD_MS, True, "ffffff"),
            (BREATHE_RELEASE_MS, True, "000000"),
        ]

    def test_flip_does_not_blend(self):
        assert frames(flip_animation(4, "red", "blue", 100, 200)) == [
            (100, False, "ff0000"),
            (200, False, "0000ff"),
        ]

    def test_pulse_uses_fixed_timing(self):
        assert frames(pulse_animation(1, "red", "white")) == [
            (PULSE_RISE_MS, True, "ff0000"),
            (PULSE_FALL_MS, True, "ffffff"),
        ]

    def test_hex_and_unknown_colors(self):
        """Test that literal codes are stripped and unknown names pass through."""
        assert frames(flip_animation(1, "#00ff00", "teal", 100, 100)) == [
            (100, False, "00ff00"),
            (100, False, "teal"),
        ]
