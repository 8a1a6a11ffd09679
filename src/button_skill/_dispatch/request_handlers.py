# Area: Dispatch
"""
button_skill._dispatch.request_handlers — Top-level request handlers
====================================================================

Handlers for every request type the skill receives. The skill asks
each handler in order whether it can handle the request; the first
one that can, does. ``build_request_handlers`` returns that order.
"""

from __future__ import annotations
import logging
from typing import List, Protocol

from .handler_input import HandlerInput
from .input_events import InputEventDispatcher
from .request_models import (
    INPUT_HANDLER_EVENT,
    INTENT_REQUEST,
    LAUNCH_REQUEST,
    SESSION_ENDED_REQUEST,
)
from .._directives import stop_input_handler
from .._shared.logging_config import log_handler_error
from ..settings import SkillPhase, WAITING_AUDIO

logger = logging.getLogger("button_skill.handlers")

COLOR_INTENT = "colorIntent"

ERROR_SPEECH = "An error was encountered while handling your request. Try again later"


class RequestHandler(Protocol):
    """Protocol for top-level request handlers."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        ...

    def handle(self, handler_input: HandlerInput) -> None:
        ...


def _is_intent(handler_input: HandlerInput, *names: str) -> bool:
    request = handler_input.request
    return request.type == INTENT_REQUEST and request.intent_name in names


class LaunchRequestHandler:
    def __init__(self, roll_call):
        self.roll_call = roll_call

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return handler_input.request.type == LAUNCH_REQUEST

    def handle(self, handler_input: HandlerInput) -> None:
        logger.info("LaunchRequest: starting a new session")
        self.roll_call.new_session(handler_input)


class GameEngineInputHandler:
    """Passes input handler event batches to the InputEventDispatcher."""

    def __init__(self, dispatcher: InputEventDispatcher):
        self.dispatcher = dispatcher

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return handler_input.request.type == INPUT_HANDLER_EVENT

    def handle(self, handler_input: HandlerInput) -> None:
        self.dispatcher.dispatch(
            handler_input.request, handler_input.session, handler_input.turn
        )


class HelpIntentHandler:
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return _is_intent(handler_input, "AMAZON.HelpIntent")

    def handle(self, handler_input: HandlerInput) -> None:
        logger.info("HelpIntent: handling request for help")
        session = handler_input.session
        turn = handler_input.turn

        # An open input handler would interrupt the help prompt.
        if session.active_input_handler_id:
            turn.add_directive(stop_input_handler(
                originating_request_id=session.active_input_handler_id,
            ))
            session.close_input_handler()

        if session.roll_call_complete:
            turn.reprompt(
                "Pick a color to test your buttons: red, blue, or green.",
                "Or say cancel or exit to quit.",
            )
            turn.speak(
                "Now that you have registered two buttons,",
                "you can pick a color to show when the buttons are pressed.",
                "Select one of the following colors: red, blue, or green.",
                "If you do not wish to continue, you can say exit.",
            )
        else:
            turn.reprompt("You can say yes to continue, or no or exit to quit.")
            turn.speak(
                "You will need two Echo buttons to use this skill.",
                "Each of the two buttons you plan to use",
                "must be pressed for the skill to register them.",
                "Would you like to continue and register two Echo buttons?",
            )
            session.expecting_confirmation = True


class StopIntentHandler:
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return _is_intent(handler_input, "AMAZON.StopIntent", "AMAZON.CancelIntent")

    def handle(self, handler_input: HandlerInput) -> None:
        logger.info("StopIntent: ending session")
        handler_input.turn.speak("Good Bye!")
        handler_input.response_builder.set_should_end_session(True)


class SessionEndedRequestHandler:
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return handler_input.request.type == SESSION_ENDED_REQUEST

    def handle(self, handler_input: HandlerInput) -> None:
        logger.info(f"Session ended with reason: {handler_input.request.reason}")
        handler_input.turn.speak("Good bye!")
        handler_input.response_builder.set_should_end_session(True)


class DefaultHandler:
    """Any intent nothing else claimed: the color intent, or "didn't get that"."""

    def __init__(self, game_play):
        self.game_play = game_play

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return handler_input.request.type == INTENT_REQUEST

    def handle(self, handler_input: HandlerInput) -> None:
        if handler_input.request.intent_name == COLOR_INTENT:
            self.game_play.choose_color(handler_input)
            return

        logger.info(f"Unrecognized intent: {handler_input.request.intent_name}")
        reprompt = "Please say again, or say help if you're not sure what to do."
        handler_input.turn.reprompt(reprompt)
        handler_input.turn.speak("Sorry, I didn't get that. " + reprompt)
        handler_input.turn.open_microphone = True


class YesIntentHandler:
    def __init__(self, roll_call, help_handler, session_ended_handler, default_handler):
        self.roll_call = roll_call
        self.help_handler = help_handler
        self.session_ended_handler = session_ended_handler
        self.default_handler = default_handler

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return _is_intent(handler_input, "AMAZON.YesIntent")

    def handle(self, handler_input: HandlerInput) -> None:
        logger.info("YesIntent: handling request")
        session = handler_input.session

        if session.phase == SkillPhase.ROLL_CALL and session.expecting_confirmation:
            handler_input.turn.speak(
                "Ok. Press the first button, wait for confirmation,",
                "then press the second button.",
                WAITING_AUDIO,
            )
            self.roll_call.start_roll_call(handler_input)
        elif session.phase == SkillPhase.EXIT and session.expecting_confirmation:
            self.session_ended_handler.handle(handler_input)
        elif session.phase == SkillPhase.EXIT:
            self.default_handler.handle(handler_input)
        else:
            self.help_handler.handle(handler_input)


class NoIntentHandler:
    def __init__(self, help_handler, stop_handler, default_handler):
        self.help_handler = help_handler
        self.stop_handler = stop_handler
        self.default_handler = default_handler

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return _is_intent(handler_input, "AMAZON.NoIntent")

    def handle(self, handler_input: HandlerInput) -> None:
        logger.info("NoIntent: handling request")
        session = handler_input.session
        turn = handler_input.turn

        if session.phase == SkillPhase.ROLL_CALL and session.expecting_confirmation:
            self.stop_handler.handle(handler_input)
        elif session.phase == SkillPhase.EXIT and session.expecting_confirmation:
            reprompt = "Pick a different color, red, blue, or green."
            turn.reprompt(reprompt)
            turn.speak("Ok, let's keep going.", reprompt)
            turn.open_microphone = True
            session.expecting_confirmation = False
            session.advance_phase(SkillPhase.PLAY)
        elif session.phase == SkillPhase.EXIT:
            self.default_handler.handle(handler_input)
        else:
            self.help_handler.handle(handler_input)


class NoOpHandler:
    """Fallback for request types the skill does not know: empty response."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return True

    def handle(self, handler_input: HandlerInput) -> None:
        logger.warning(f"No handler for request type: {handler_input.request.type}")


class SkillErrorHandler:
    """Turns an exception raised by a request handler into an apology."""

    def handle(self, handler_input: HandlerInput, error: Exception) -> None:
        log_handler_error(
            error,
            request_type=handler_input.request.type,
            request_id=handler_input.request.request_id,
        )
        handler_input.response_builder.speak(ERROR_SPEECH)


def build_request_handlers(roll_call, game_play, dispatcher: InputEventDispatcher) -> List[RequestHandler]:
    """Request handlers in the order they are asked."""
    help_handler = HelpIntentHandler()
    stop_handler = StopIntentHandler()
    session_ended_handler = SessionEndedRequestHandler()
    default_handler = DefaultHandler(game_play)

    return [
        LaunchRequestHandler(roll_call),
        GameEngineInputHandler(dispatcher),
        help_handler,
        stop_handler,
        YesIntentHandler(roll_call, help_handler, session_ended_handler, default_handler),
        NoIntentHandler(help_handler, stop_handler, default_handler),
        session_ended_handler,
        default_handler,
        NoOpHandler(),
    ]
