# Area: Phases
"""
button_skill._phases.game_play — Game play phase
================================================

After roll call the player picks a color. The skill then listens for
button presses, lighting each pressed button in that color, until the
input handler times out.
"""

import logging
from typing import Any, Dict, List

from .common import gadget_ids, lights_off
from .._animations import (
    breathe_animation,
    fade_out_animation,
    solid_animation,
)
from .._directives import (
    set_button_down_animation,
    set_button_up_animation,
    set_idle_animation,
    start_input_handler,
)
from .._dispatch.handler_input import HandlerInput
from .._dispatch.session_state import SessionState
from .._turn.context import TurnContext
from ..types import Events, InputEvent, Recognizers
from ..settings import (
    SkillPhase,
    ALLOWED_COLORS,
    BUTTON_DOWN_EVENT,
    TIMEOUT_EVENT,
    WAITING_AUDIO,
)

logger = logging.getLogger("button_skill.game_play")

IDLE_BREATHE_CYCLES = 30
IDLE_BREATHE_MS = 1200
BUTTON_DOWN_MS = 1000
BUTTON_UP_FADE_MS = 800
PRESSED_FADE_MS = 2000

COLOR_SLOT = "color"

BUTTON_DOWN_RECOGNIZERS: Recognizers = {
    "button_down_recognizer": {
        "type": "match",
        "fuzzy": False,
        "anchor": "end",
        "pattern": [{"action": "down"}],
    },
}

BUTTON_DOWN_EVENTS: Events = {
    BUTTON_DOWN_EVENT: {
        "meets": ["button_down_recognizer"],
        "reports": "matches",
        "shouldEndInputHandler": False,
    },
    TIMEOUT_EVENT: {
        "meets": ["timed out"],
        "reports": "history",
        "shouldEndInputHandler": True,
    },
}


class GamePlayPhase:
    """Game play state handlers."""

    def __init__(self, config: Dict[str, Any]):
        self.timeout_ms = config["play_timeout_ms"]

    def choose_color(self, handler_input: HandlerInput) -> None:
        """
        Handle the color intent.

        A valid color opens a button-down input handler and programs the
        registered buttons to show it; anything else asks again.
        """
        session = handler_input.session
        turn = handler_input.turn

        if not session.roll_call_complete:
            logger.info("Color chosen before roll call completed")
            session.advance_phase(SkillPhase.ROLL_CALL)
            session.expecting_confirmation = True
            turn.speak(
                "Both buttons need to check in before you pick a color.",
                "Would you like to register your buttons now?",
            )
            turn.reprompt("Say yes to start roll call, or no to exit.")
            turn.open_microphone = True
            return

        color = (handler_input.request.slot_value(COLOR_SLOT) or "").lower()
        if color not in ALLOWED_COLORS:
            logger.info(f"Unsupported color requested: '{color}'")
            turn.speak("Sorry, that is not one of the colors I know.")
            turn.reprompt("Please pick red, blue, or green.")
            turn.open_microphone = True
            return

        session.color_choice = color
        session.expecting_confirmation = False
        session.press_counts = {}
        session.advance_phase(SkillPhase.PLAY)

        turn.add_directive(start_input_handler(
            timeout=self.timeout_ms,
            recognizers=BUTTON_DOWN_RECOGNIZERS,
            events=BUTTON_DOWN_EVENTS,
        ))
        session.open_input_handler(handler_input.request.request_id)

        targets = list(session.button_ids)
        turn.add_directive(set_idle_animation(
            breathe_animation(IDLE_BREATHE_CYCLES, color, IDLE_BREATHE_MS),
            target_gadgets=targets,
        ))
        turn.add_directive(set_button_down_animation(
            solid_animation(1, color, BUTTON_DOWN_MS),
            target_gadgets=targets,
        ))
        turn.add_directive(set_button_up_animation(
            fade_out_animation(1, color, BUTTON_UP_FADE_MS),
            target_gadgets=targets,
        ))

        turn.speak(
            f"Ok. {color} it is.",
            f"When you press a button, it will turn {color}.",
            "Go ahead and press a button.",
            WAITING_AUDIO,
        )
        turn.open_microphone = False

    def handle_button_pressed(
        self, session: SessionState, turn: TurnContext, input_events: List[InputEvent]
    ) -> None:
        turn.open_microphone = False
        ids = gadget_ids(input_events)
        if not ids:
            logger.warning("Button down event without a gadget id")
            return

        gadget_id = ids[0]
        number = session.button_number(gadget_id)
        presses = session.record_press(gadget_id)
        logger.info(f"Button {number} ({gadget_id}) pressed, {presses} press(es)")

        turn.add_directive(set_idle_animation(
            fade_out_animation(1, session.color_choice or "white", PRESSED_FADE_MS),
            target_gadgets=[gadget_id],
        ))
        if number is None:
            turn.speak("That button is not registered.")
        else:
            turn.speak(f"Button {number}.")

    def handle_timeout(
        self, session: SessionState, turn: TurnContext, input_events: List[InputEvent]
    ) -> None:
        logger.info(f"Game play timed out after {session.total_presses()} press(es)")
        session.close_input_handler()
        session.advance_phase(SkillPhase.EXIT)
        session.expecting_confirmation = True

        turn.add_directive(lights_off(list(session.button_ids)))
        turn.speak(
            f"You pressed the buttons {session.total_presses()} times.",
            "The input handler has timed out.",
            "That concludes our test. Would you like to quit?",
        )
        turn.reprompt("Would you like to exit?")
        turn.open_microphone = True
