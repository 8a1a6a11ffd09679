# Area: Dispatch
"""
button_skill._dispatch.session_state — Session state tracker
============================================================

Tracks the session across turns: the current phase, the id of the
open input handler (if any), a pending yes/no question, and the
phase-owned game data (registered buttons, chosen color, presses).

The host stores it between turns as the envelope's sessionAttributes;
``to_attributes``/``from_attributes`` convert both ways.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from ..settings import SkillPhase

logger = logging.getLogger("button_skill.session")


@dataclass
class SessionState:
    """
    Full state of one skill session.

    ``active_input_handler_id`` is set exactly while an input handler
    session is open; gadget event batches from any other id are stale.
    """
    phase: SkillPhase = SkillPhase.ROLL_CALL
    active_input_handler_id: Optional[str] = None
    expecting_confirmation: bool = False

    # Roll call
    roll_call_complete: bool = False
    button_ids: List[str] = field(default_factory=list)   # index + 1 = button number

    # Game play
    color_choice: Optional[str] = None
    press_counts: Dict[str, int] = field(default_factory=dict)

    # ── Transition helpers ───────────────────────────────────

    def advance_phase(self, new_phase: SkillPhase) -> None:
        logger.info(f"Phase: {self.phase.value} → {new_phase.value}")
        self.phase = new_phase

    def open_input_handler(self, request_id: Optional[str]) -> None:
        logger.info(f"Input handler opened by request {request_id}")
        self.active_input_handler_id = request_id

    def close_input_handler(self) -> None:
        if self.active_input_handler_id:
            logger.info(f"Input handler {self.active_input_handler_id} closed")
        self.active_input_handler_id = None

    # ── Buttons ──────────────────────────────────────────────

    def register_button(self, gadget_id: str) -> int:
        """Register a gadget (idempotent) and return its button number."""
        if gadget_id not in self.button_ids:
            self.button_ids.append(gadget_id)
            logger.info(f"Registered button {len(self.button_ids)}: {gadget_id}")
        return self.button_ids.index(gadget_id) + 1

    def button_number(self, gadget_id: str) -> Optional[int]:
        if gadget_id in self.button_ids:
            return self.button_ids.index(gadget_id) + 1
        return None

    def reset_buttons(self) -> None:
        self.button_ids = []
        self.roll_call_complete = False
        self.press_counts = {}

    def record_press(self, gadget_id: str) -> int:
        self.press_counts[gadget_id] = self.press_counts.get(gadget_id, 0) + 1
        return self.press_counts[gadget_id]

    def total_presses(self) -> int:
        return sum(self.press_counts.values())

    # ── Serialization ────────────────────────────────────────

    def to_attributes(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "activeInputHandlerId": self.active_input_handler_id,
            "expectingConfirmation": self.expecting_confirmation,
            "isRollCallComplete": self.roll_call_complete,
            "buttonIds": list(self.button_ids),
            "colorChoice": self.color_choice,
            "pressCounts": dict(self.press_counts),
        }

    @classmethod
    def from_attributes(cls, attributes: Optional[Dict[str, Any]]) -> "SessionState":
        attributes = attributes or {}
        phase_value = attributes.get("phase", SkillPhase.ROLL_CALL.value)
        try:
            phase = SkillPhase(phase_value)
        except ValueError:
            logger.warning(f"Unknown phase '{phase_value}' in session, using ROLL_CALL")
            phase = SkillPhase.ROLL_CALL

        return cls(
            phase=phase,
            active_input_handler_id=attributes.get("activeInputHandlerId"),
            expecting_confirmation=bool(attributes.get("expectingConfirmation", False)),
            roll_call_complete=bool(attributes.get("isRollCallComplete", False)),
            button_ids=list(attributes.get("buttonIds") or []),
            color_choice=attributes.get("colorChoice"),
            press_counts=dict(attributes.get("pressCounts") or {}),
        )
