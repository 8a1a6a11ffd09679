# Area: Turn
"""
button_skill._turn.interceptors — Pre- and post-turn hooks
==========================================================

``new_turn_context`` runs before any handler and gives the turn an
empty accumulator. ``assemble_response`` runs after the handler and
renders the accumulated TurnContext onto the outbound response.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Union

from .context import TurnContext
from .response_builder import ResponseBuilder
from .._directives.models import WireModel

logger = logging.getLogger("button_skill.turn")


def new_turn_context() -> TurnContext:
    """Pre-turn hook: a fresh, empty TurnContext."""
    logger.debug("Pre-processing: new turn context")
    return TurnContext()


def _serialize(directive: Union[WireModel, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(directive, WireModel):
        return directive.to_wire()
    return dict(directive)


def assemble_response(turn: TurnContext, builder: ResponseBuilder) -> Dict[str, Any]:
    """
    Post-turn hook: render the TurnContext onto the response builder.

    1. Speech parts joined with single spaces become the spoken output.
    2. Reprompt parts joined the same way become the reprompt.
    3. open_microphone True forces shouldEndSession False; False removes
       shouldEndSession so an open input handler keeps the session alive.
    4. Directives are appended, in order, after any already present.

    The TurnContext is read, never modified.
    """
    logger.debug(f"Post-processing turn: {turn.to_log_dict()}")

    if turn.speech_parts:
        logger.debug(f"Adding {len(turn.speech_parts)} speech parts")
        builder.speak(" ".join(turn.speech_parts))

    if turn.reprompt_parts:
        logger.debug(f"Adding {len(turn.reprompt_parts)} reprompt parts")
        builder.ask(" ".join(turn.reprompt_parts))

    if turn.open_microphone is True:
        builder.set_should_end_session(False)
        logger.debug("Open microphone -> shouldEndSession = False")
    elif turn.open_microphone is False:
        builder.set_should_end_session(None)
        logger.debug("Closed microphone -> shouldEndSession removed")

    if turn.directives:
        logger.debug(f"Adding {len(turn.directives)} directives")
    for directive in turn.directives:
        builder.add_directive(_serialize(directive))

    return builder.get_response()
