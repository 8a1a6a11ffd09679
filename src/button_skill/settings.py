"""
button_skill.settings — Static game settings
=============================================

Skill phases and the fixed constants of the color game.
Tunable values (input handler timeouts, logging) live in
``_skill_config`` instead.
"""

from enum import Enum


class SkillPhase(Enum):
    """Macro-state of the session; decides which phase owns event routing."""
    ROLL_CALL   = "ROLL_CALL"    # Registering the two buttons
    PLAY        = "PLAY"         # Color chosen, listening for button presses
    EXIT        = "EXIT"         # Input handler timed out, asking to quit


# Colors the player may pick for the button-down animation
ALLOWED_COLORS = ("red", "blue", "green")

# Proxy names used during roll call before real gadget ids are known
FIRST_BUTTON_PROXY = "first_button"
SECOND_BUTTON_PROXY = "second_button"

# Named input handler events (the keys of StartInputHandler "events")
FIRST_BUTTON_CHECKED_IN = "first_button_checked_in"
SECOND_BUTTON_CHECKED_IN = "second_button_checked_in"
BUTTON_DOWN_EVENT = "button_down_event"
TIMEOUT_EVENT = "timeout"

# Ticking sound played while the skill waits for button presses
WAITING_AUDIO = (
    "<audio src='https://s3.amazonaws.com/ask-soundlibrary/foley/"
    "amzn_sfx_rhythmic_ticking_30s_01.mp3'/>"
)

# Colors used by the roll call lights
ROLL_CALL_IDLE_COLOR = "white"
ROLL_CALL_CHECKED_IN_COLOR = "green"
