# Area: Phases
"""
button_skill._phases.roll_call — Roll call phase
================================================

Registers the two Echo Buttons before play starts. Roll call opens an
input handler that reports when the first button and then the second
button are pressed, and times out if they are not.
"""

import logging
from typing import Any, Dict, List

from .common import gadget_ids, lights_off
from .._animations import breathe_animation, solid_animation
from .._directives import (
    set_button_down_animation,
    set_idle_animation,
    start_input_handler,
)
from .._dispatch.handler_input import HandlerInput
from .._dispatch.session_state import SessionState
from .._turn.context import TurnContext
from ..types import Events, InputEvent, Recognizers
from ..settings import (
    SkillPhase,
    FIRST_BUTTON_PROXY,
    SECOND_BUTTON_PROXY,
    FIRST_BUTTON_CHECKED_IN,
    SECOND_BUTTON_CHECKED_IN,
    TIMEOUT_EVENT,
    WAITING_AUDIO,
    ROLL_CALL_IDLE_COLOR,
    ROLL_CALL_CHECKED_IN_COLOR,
)

logger = logging.getLogger("button_skill.roll_call")

IDLE_BREATHE_CYCLES = 30
IDLE_BREATHE_MS = 1000
BUTTON_DOWN_MS = 2000
CHECKED_IN_MS = 60000

ROLL_CALL_RECOGNIZERS: Recognizers = {
    "roll_call_first_button_recognizer": {
        "type": "match",
        "fuzzy": False,
        "anchor": "end",
        "pattern": [
            {"gadgetIds": [FIRST_BUTTON_PROXY], "action": "down"},
        ],
    },
    "roll_call_second_button_recognizer": {
        "type": "match",
        "fuzzy": True,
        "anchor": "end",
        "pattern": [
            {"gadgetIds": [FIRST_BUTTON_PROXY], "action": "down"},
            {"gadgetIds": [SECOND_BUTTON_PROXY], "action": "down"},
        ],
    },
}

ROLL_CALL_EVENTS: Events = {
    FIRST_BUTTON_CHECKED_IN: {
        "meets": ["roll_call_first_button_recognizer"],
        "reports": "matches",
        "shouldEndInputHandler": False,
        "maximumInvocations": 1,
    },
    SECOND_BUTTON_CHECKED_IN: {
        "meets": ["roll_call_second_button_recognizer"],
        "reports": "matches",
        "shouldEndInputHandler": True,
        "maximumInvocations": 1,
    },
    TIMEOUT_EVENT: {
        "meets": ["timed out"],
        "reports": "history",
        "shouldEndInputHandler": True,
    },
}


class RollCallPhase:
    """Roll call state handlers."""

    def __init__(self, config: Dict[str, Any]):
        self.timeout_ms = config["roll_call_timeout_ms"]

    # ── Entry points (from request handlers) ─────────────────

    def new_session(self, handler_input: HandlerInput) -> None:
        logger.info("New session: welcome and start roll call")
        handler_input.turn.speak(
            "Welcome to the Color Changer skill.",
            "This skill shows the core of every Echo Button skill:",
            "roll call, button events and light animations.",
            "First, let's make sure both of your buttons are connected.",
            "Press the first button, wait for confirmation, then press the second button.",
            WAITING_AUDIO,
        )
        self.start_roll_call(handler_input)

    def start_roll_call(self, handler_input: HandlerInput) -> None:
        """Open the roll call input handler and light up all buttons."""
        session = handler_input.session
        turn = handler_input.turn

        session.reset_buttons()
        session.expecting_confirmation = False
        session.advance_phase(SkillPhase.ROLL_CALL)

        turn.add_directive(start_input_handler(
            timeout=self.timeout_ms,
            proxies=[FIRST_BUTTON_PROXY, SECOND_BUTTON_PROXY],
            recognizers=ROLL_CALL_RECOGNIZERS,
            events=ROLL_CALL_EVENTS,
        ))
        session.open_input_handler(handler_input.request.request_id)

        turn.add_directive(set_idle_animation(
            breathe_animation(IDLE_BREATHE_CYCLES, ROLL_CALL_IDLE_COLOR, IDLE_BREATHE_MS),
        ))
        turn.add_directive(set_button_down_animation(
            solid_animation(1, ROLL_CALL_CHECKED_IN_COLOR, BUTTON_DOWN_MS),
        ))
        turn.open_microphone = False

    # ── Input handler events ─────────────────────────────────

    def handle_first_button_check_in(
        self, session: SessionState, turn: TurnContext, input_events: List[InputEvent]
    ) -> None:
        ids = gadget_ids(input_events)
        turn.open_microphone = False
        if not ids:
            logger.warning("First button check-in without a gadget id")
            return

        number = session.register_button(ids[0])
        turn.add_directive(self._checked_in_light(ids[0]))
        turn.speak(f"Hello, button {number}.")

    def handle_second_button_check_in(
        self, session: SessionState, turn: TurnContext, input_events: List[InputEvent]
    ) -> None:
        # The report may carry both presses when the first check-in was missed.
        for gadget_id in gadget_ids(input_events):
            if session.button_number(gadget_id) is not None:
                continue
            number = session.register_button(gadget_id)
            turn.add_directive(self._checked_in_light(gadget_id))
            turn.speak(f"Hello, button {number}.")

        session.roll_call_complete = True
        session.close_input_handler()
        session.advance_phase(SkillPhase.PLAY)

        turn.speak(
            "Great! Both of your buttons are checked in.",
            "Now pick a color to show when the buttons are pressed: red, blue, or green.",
        )
        turn.reprompt("Pick a color: red, blue, or green.")
        turn.open_microphone = True

    def handle_timeout(
        self, session: SessionState, turn: TurnContext, input_events: List[InputEvent]
    ) -> None:
        logger.info(f"Roll call timed out with {len(session.button_ids)} button(s)")
        session.close_input_handler()
        session.expecting_confirmation = True

        turn.add_directive(lights_off())
        turn.speak(
            "For this skill we need two buttons.",
            "Would you like more time to press the buttons?",
        )
        turn.reprompt("Say yes to go back to roll call, or no to exit.")
        turn.open_microphone = True

    @staticmethod
    def _checked_in_light(gadget_id: str):
        return set_idle_animation(
            solid_animation(1, ROLL_CALL_CHECKED_IN_COLOR, CHECKED_IN_MS),
            target_gadgets=[gadget_id],
        )
