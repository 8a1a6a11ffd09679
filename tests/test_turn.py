# Area: Turn Tests
"""Tests for TurnContext, ResponseBuilder and response assembly."""

from button_skill._animations import solid_animation
from button_skill._directives import set_idle_animation, stop_input_handler
from button_skill._turn import (
    ResponseBuilder,
    TurnContext,
    assemble_response,
    new_turn_context,
)


def ssml(text):
    return {"type": "SSML", "ssml": f"<speak>{text}</speak>"}


class TestTurnContext:
    """Tests for the per-turn accumulator."""

    def test_new_turn_context_is_empty(self):
        turn = new_turn_context()
        assert turn.speech_parts == []
        assert turn.reprompt_parts == []
        assert turn.directives == []
        assert turn.open_microphone is None
        assert turn.game_input_events == []

    def test_each_turn_gets_its_own_lists(self):
        first = new_turn_context()
        first.speak("Hello.")
        assert new_turn_context().speech_parts == []

    def test_speak_and_reprompt_append_in_order(self):
        turn = TurnContext()
        turn.speak("One.").speak("Two.", "Three.")
        turn.reprompt("Again?")
        assert turn.speech_parts == ["One.", "Two.", "Three."]
        assert turn.reprompt_parts == ["Again?"]


class TestResponseBuilder:
    """Tests for ResponseBuilder."""

    def test_ask_keeps_session_open(self):
        response = ResponseBuilder().ask("Still there?").get_response()
        assert response["reprompt"] == {"outputSpeech": ssml("Still there?")}
        assert response["shouldEndSession"] is False

    def test_none_removes_should_end_session(self):
        builder = ResponseBuilder().set_should_end_session(True)
        builder.set_should_end_session(None)
        assert "shouldEndSession" not in builder.get_response()


class TestAssembleResponse:
    """Tests for the post-turn response assembler."""

    def test_empty_turn_leaves_response_empty(self):
        assert assemble_response(TurnContext(), ResponseBuilder()) == {}

    def test_speech_joined_with_spaces(self):
        turn = TurnContext().speak("Hello, button 1.", "Hello, button 2.")
        response = assemble_response(turn, ResponseBuilder())
        assert response["outputSpeech"] == ssml("Hello, button 1. Hello, button 2.")

    def test_reprompt_joined_and_session_kept_open(self):
        turn = TurnContext().reprompt("Pick a color:", "red, blue, or green.")
        response = assemble_response(turn, ResponseBuilder())
        assert response["reprompt"]["outputSpeech"] == ssml("Pick a color: red, blue, or green.")
        assert response["shouldEndSession"] is False

    def test_open_microphone_true(self):
        turn = TurnContext(open_microphone=True)
        builder = ResponseBuilder().set_should_end_session(True)
        assert assemble_response(turn, builder)["shouldEndSession"] is False

    def test_open_microphone_false_removes_flag(self):
        """Test that a closed microphone leaves continuation to the input handler."""
        turn = TurnContext(open_microphone=False).reprompt("ignored continuation")
        response = assemble_response(turn, ResponseBuilder())
        assert "shouldEndSession" not in response
        assert "reprompt" in response

    def test_undecided_microphone_keeps_handler_choice(self):
        turn = TurnContext().speak("Good Bye!")
        builder = ResponseBuilder().set_should_end_session(True)
        assert assemble_response(turn, builder)["shouldEndSession"] is True

    def test_directives_appended_after_existing(self):
        turn = TurnContext()
        turn.add_directive(stop_input_handler(originating_request_id="req-1"))
        turn.add_directive(set_idle_animation(solid_animation(1, "red", 100)))
        builder = ResponseBuilder().add_directive({"type": "Existing"})

        directives = assemble_response(turn, builder)["directives"]
        assert [d["type"] for d in directives] == [
            "Existing",
            "GameEngine.StopInputHandler",
            "GadgetController.SetLight",
        ]

    def test_assembly_does_not_modify_turn(self):
        """Test that assembling the same turn twice gives the same response."""
        turn = TurnContext(open_microphone=True)
        turn.speak("Great!").reprompt("Pick a color.")
        turn.add_directive(set_idle_animation(solid_animation(1, "red", 100)))
        before = turn.to_log_dict()

        first = assemble_response(turn, ResponseBuilder())
        second = assemble_response(turn, ResponseBuilder())
        assert first == second
        assert turn.to_log_dict() == before
