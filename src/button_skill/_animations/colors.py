# Area: Animations
"""
button_skill._animations.colors — Color name resolution
=======================================================

Maps color names and literal ``0x``/``#`` codes to the 6-hex-digit
strings the gadgets expect. Unknown names are logged and passed
through unchanged; the device decides what to do with them.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger("button_skill.colors")

# Shades are a step darker than the intended color; the button LEDs are bright.
COLORS: Dict[str, str] = {
    "white": "ffffff",
    "red": "ff0000",
    "orange": "ff3300",
    "green": "00ff00",
    "dark green": "004411",
    "blue": "0000ff",
    "light blue": "00a0b0",
    "purple": "4b0098",
    "yellow": "ffd400",
    "black": "000000",
}

BLACK = COLORS["black"]


def get_color(color_name: str) -> Optional[str]:
    """Case-insensitive table lookup; None when the name is unknown."""
    if isinstance(color_name, str):
        hex_code = COLORS.get(color_name.lower())
        if hex_code:
            return hex_code
    logger.warning(f"UNKNOWN COLOR: {color_name}")
    return None


def resolve_color(requested_color: Optional[str]) -> str:
    """
    Return the hex code for a color name or literal code.

    ``0xAABBCC`` and ``#AABBCC`` lose their prefix and are otherwise
    returned verbatim. Names go through the table; a miss returns the
    input unchanged.
    """
    color = requested_color or ""
    if color.startswith("0x"):
        return color[2:]
    if color.startswith("#"):
        return color[1:]
    return get_color(color) or color
