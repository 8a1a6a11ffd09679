"""
button_skill.skill — Skill entry point
======================================

ButtonSkill processes one request envelope at a time:

1. parse the envelope and restore SessionState from sessionAttributes
   (malformed attributes start a fresh session)
2. create an empty TurnContext (pre-turn hook)
3. hand the request to the first request handler that can handle it
4. render the TurnContext onto the response (post-turn hook)
5. return the response envelope with the updated sessionAttributes

A handler exception skips step 4: the turn's accumulated output is
dropped and the error handler's apology is returned instead.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from ._dispatch import (
    HandlerInput,
    InputEventDispatcher,
    RequestHandler,
    SessionState,
    SkillErrorHandler,
    build_request_handlers,
    parse_envelope,
)
from ._dispatch.input_events import GAME_PLAY, ROLL_CALL
from ._phases import GamePlayPhase, RollCallPhase
from ._skill_config import DEFAULT_CONFIG, validate_config
from ._turn import ResponseBuilder, assemble_response, new_turn_context
from .errors import InvalidRequestError

logger = logging.getLogger("button_skill.skill")

RESPONSE_VERSION = "1.0"


class ButtonSkill:
    """
    The Echo Buttons color skill.

    Usage:
        skill = ButtonSkill(config)
        response_envelope = skill.invoke(request_envelope)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config: Dict[str, Any] = dict(DEFAULT_CONFIG)
        self.config.update(config or {})
        validate_config(self.config)

        self.roll_call = RollCallPhase(self.config)
        self.game_play = GamePlayPhase(self.config)
        self.dispatcher = InputEventDispatcher({
            ROLL_CALL: self.roll_call,
            GAME_PLAY: self.game_play,
        })
        self.request_handlers: List[RequestHandler] = build_request_handlers(
            self.roll_call, self.game_play, self.dispatcher,
        )
        self.error_handler = SkillErrorHandler()

    def find_handler(self, handler_input: HandlerInput) -> RequestHandler:
        for handler in self.request_handlers:
            if handler.can_handle(handler_input):
                return handler
        # NoOpHandler accepts everything; only reachable with a custom handler list
        raise LookupError(f"No request handler for {handler_input.request.type}")

    def invoke(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """Process one request envelope and return the response envelope."""
        try:
            envelope = parse_envelope(event)
        except InvalidRequestError as e:
            logger.warning(f"Dropping invalid request envelope: {e.validation_errors}")
            return {"version": RESPONSE_VERSION, "response": {}}

        request = envelope.request
        logger.info(f"Handling {request.type} (requestId={request.request_id})")

        try:
            session = SessionState.from_attributes(envelope.session.attributes)
        except (TypeError, ValueError) as e:
            logger.warning(f"Malformed session attributes, starting a fresh session: {e}")
            session = SessionState()

        handler_input = HandlerInput(
            request_envelope=envelope,
            session=session,
            turn=new_turn_context(),
            response_builder=ResponseBuilder(),
            config=self.config,
        )

        try:
            handler = self.find_handler(handler_input)
            logger.debug(f"{type(handler).__name__} handling {request.type}")
            handler.handle(handler_input)
            response = assemble_response(handler_input.turn, handler_input.response_builder)
        except Exception as e:
            self.error_handler.handle(handler_input, e)
            response = handler_input.response_builder.get_response()

        return {
            "version": RESPONSE_VERSION,
            "sessionAttributes": handler_input.session.to_attributes(),
            "response": response,
        }


_skill: Optional[ButtonSkill] = None


def lambda_handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Hosted entry point; the skill is built on first use and reused.

    A broken config is logged and the defaults are used instead.
    """
    global _skill
    if _skill is None:
        from ._skill_config import load_config
        try:
            _skill = ButtonSkill(load_config())
        except ValueError as e:
            logger.error(f"Invalid skill config, using defaults: {e}")
            _skill = ButtonSkill()
    return _skill.invoke(event)
