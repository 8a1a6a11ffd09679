# Area: Dispatch
"""
button_skill._dispatch.input_events — Input handler event dispatcher
====================================================================

Routes the named events of a GameEngine.InputHandlerEvent batch to the
roll call or game play phase.

Batches from an input handler other than the one currently open are
stale and dropped without touching any phase. Otherwise events are
walked in arrival order through an ordered routing table; the first
route that ends dispatch wins the batch.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .request_models import Request
from .session_state import SessionState
from .._turn.context import TurnContext
from ..types import InputEvent
from ..settings import (
    SkillPhase,
    FIRST_BUTTON_CHECKED_IN,
    SECOND_BUTTON_CHECKED_IN,
    BUTTON_DOWN_EVENT,
    TIMEOUT_EVENT,
)

logger = logging.getLogger("button_skill.dispatch")

# handler(session_state, turn_context, input_events) -> None
PhaseAction = Callable[[SessionState, TurnContext, List[InputEvent]], None]

ROLL_CALL = "roll_call"
GAME_PLAY = "game_play"


@dataclass(frozen=True)
class EventRoute:
    """One row of the routing table."""
    event_name: str
    phase_handler: str                       # ROLL_CALL or GAME_PLAY
    action: str                              # method name on the phase handler
    required_phase: Optional[SkillPhase] = None
    ends_dispatch: bool = True

    def matches(self, event_name: str, phase: SkillPhase) -> bool:
        if event_name != self.event_name:
            return False
        return self.required_phase is None or self.required_phase == phase


# Order matters: the first matching row is used.
EVENT_ROUTES: Tuple[EventRoute, ...] = (
    EventRoute(FIRST_BUTTON_CHECKED_IN, ROLL_CALL, "handle_first_button_check_in"),
    EventRoute(SECOND_BUTTON_CHECKED_IN, ROLL_CALL, "handle_second_button_check_in"),
    EventRoute(BUTTON_DOWN_EVENT, GAME_PLAY, "handle_button_pressed",
               required_phase=SkillPhase.PLAY),
    EventRoute(TIMEOUT_EVENT, GAME_PLAY, "handle_timeout",
               required_phase=SkillPhase.PLAY),
    EventRoute(TIMEOUT_EVENT, ROLL_CALL, "handle_timeout", ends_dispatch=False),
)


class InputEventDispatcher:
    """
    Dispatches input handler event batches to phase handlers.

    Usage:
        dispatcher = InputEventDispatcher({"roll_call": rc, "game_play": gp})
        dispatcher.dispatch(request, session, turn)
    """

    def __init__(
        self,
        phase_handlers: Dict[str, Any],
        routes: Tuple[EventRoute, ...] = EVENT_ROUTES,
    ):
        self._phase_handlers = phase_handlers
        self._routes = routes

    def is_fresh(self, request: Request, session: SessionState) -> bool:
        """True when the batch comes from the currently open input handler."""
        if session.active_input_handler_id is None:
            return False
        return request.originating_request_id == session.active_input_handler_id

    def find_route(self, event_name: str, phase: SkillPhase) -> Optional[EventRoute]:
        for route in self._routes:
            if route.matches(event_name, phase):
                return route
        return None

    def get_action(self, route: EventRoute) -> PhaseAction:
        return getattr(self._phase_handlers[route.phase_handler], route.action)

    def dispatch(self, request: Request, session: SessionState, turn: TurnContext) -> bool:
        """
        Route one event batch.

        Returns True when a route ended dispatch, False when the batch was
        stale or no event produced a response.
        """
        if not self.is_fresh(request, session):
            logger.warning(
                f"Stale input event received from {request.originating_request_id} "
                f"(was expecting {session.active_input_handler_id})"
            )
            turn.open_microphone = False
            return False

        for event in request.events or []:
            route = self.find_route(event.name, session.phase)
            if route is None:
                logger.debug(f"Ignoring event '{event.name}' in phase {session.phase.value}")
                continue

            logger.info(
                f"Routing '{event.name}' to {route.phase_handler}.{route.action}"
            )
            turn.game_input_events = list(event.input_events or [])
            self.get_action(route)(session, turn, turn.game_input_events)

            if route.ends_dispatch:
                return True

        return False
