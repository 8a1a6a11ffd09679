# Area: Skill Tests
"""End-to-end tests for ButtonSkill.invoke and the hosted entry point."""

from unittest.mock import patch

import pytest

import button_skill.skill
from button_skill import ButtonSkill, lambda_handler
from button_skill._dispatch.request_handlers import ERROR_SPEECH
from button_skill._skill_config import DEFAULT_CONFIG


@pytest.fixture
def skill():
    return ButtonSkill()


def speech(result):
    return result["response"]["outputSpeech"]["ssml"]


class TestFullSession:
    """A whole session: roll call, color choice, presses, timeout, exit."""

    def test_session(self, skill, launch_envelope, input_handler_envelope, intent_envelope, press):
        result = skill.invoke(launch_envelope(request_id="launch-1"))
        attrs = result["sessionAttributes"]
        assert attrs["activeInputHandlerId"] == "launch-1"
        assert attrs["phase"] == "ROLL_CALL"
        assert "shouldEndSession" not in result["response"]
        assert [d["type"] for d in result["response"]["directives"]] == [
            "GameEngine.StartInputHandler",
            "GadgetController.SetLight",
            "GadgetController.SetLight",
        ]

        result = skill.invoke(input_handler_envelope(
            "launch-1", [press("first_button_checked_in", "g1")], attributes=attrs,
        ))
        attrs = result["sessionAttributes"]
        assert speech(result) == "<speak>Hello, button 1.</speak>"
        assert attrs["buttonIds"] == ["g1"]

        result = skill.invoke(input_handler_envelope(
            "launch-1", [press("second_button_checked_in", "g1", "g2")], attributes=attrs,
        ))
        attrs = result["sessionAttributes"]
        assert attrs["phase"] == "PLAY"
        assert attrs["isRollCallComplete"] is True
        assert attrs["activeInputHandlerId"] is None
        assert result["response"]["shouldEndSession"] is False

        result = skill.invoke(intent_envelope(
            "colorIntent", request_id="color-1", slots={"color": "red"}, attributes=attrs,
        ))
        attrs = result["sessionAttributes"]
        assert attrs["colorChoice"] == "red"
        assert attrs["activeInputHandlerId"] == "color-1"
        assert len(result["response"]["directives"]) == 4

        result = skill.invoke(input_handler_envelope(
            "color-1", [press("button_down_event", "g2")], attributes=attrs,
        ))
        attrs = result["sessionAttributes"]
        assert speech(result) == "<speak>Button 2.</speak>"
        assert attrs["pressCounts"] == {"g2": 1}

        result = skill.invoke(input_handler_envelope(
            "color-1", [{"name": "timeout"}], attributes=attrs,
        ))
        attrs = result["sessionAttributes"]
        assert attrs["phase"] == "EXIT"
        assert "You pressed the buttons 1 times." in speech(result)

        result = skill.invoke(intent_envelope("AMAZON.YesIntent", attributes=attrs))
        assert speech(result) == "<speak>Good bye!</speak>"
        assert result["response"]["shouldEndSession"] is True

    def test_stale_event_produces_empty_response(self, skill, input_handler_envelope, press):
        attrs = {"phase": "PLAY", "activeInputHandlerId": "color-2", "isRollCallComplete": True}
        result = skill.invoke(input_handler_envelope(
            "color-1", [press("button_down_event", "g1")], attributes=attrs,
        ))
        assert result["response"] == {}
        assert result["sessionAttributes"]["activeInputHandlerId"] == "color-2"


class TestInvokeEdgeCases:
    """Tests for unusual requests and handler failures."""

    def test_invalid_envelope(self, skill):
        assert skill.invoke({"version": "1.0"}) == {"version": "1.0", "response": {}}

    def test_unknown_request_type(self, skill):
        result = skill.invoke({
            "session": {"attributes": {"phase": "PLAY"}},
            "request": {"type": "CanFulfillIntentRequest", "requestId": "r1"},
        })
        assert result["response"] == {}
        assert result["sessionAttributes"]["phase"] == "PLAY"

    def test_handler_error_drops_turn_output(self, skill, launch_envelope):
        """Test that a failing handler returns only the apology."""
        def fail(handler_input):
            handler_input.turn.speak("partial speech")
            raise RuntimeError("boom")

        with patch.object(skill.roll_call, "new_session", side_effect=fail), \
                patch("button_skill._dispatch.request_handlers.log_handler_error") as mock_log:
            result = skill.invoke(launch_envelope())

        assert speech(result) == f"<speak>{ERROR_SPEECH}</speak>"
        assert "directives" not in result["response"]
        mock_log.assert_called_once()

    def test_malformed_session_attributes(self, skill, launch_envelope):
        """Test that unreadable attributes start a fresh session."""
        result = skill.invoke(launch_envelope(attributes={"pressCounts": [1, 2]}))

        attrs = result["sessionAttributes"]
        assert attrs["pressCounts"] == {}
        assert attrs["activeInputHandlerId"] == "launch-1"
        assert "Welcome to the Color Changer skill." in speech(result)

    def test_config_is_validated(self):
        with pytest.raises(ValueError):
            ButtonSkill({"play_timeout_ms": 0})


class TestLambdaHandler:
    """Tests for the hosted entry point."""

    def test_builds_skill_once(self, launch_envelope):
        with patch("button_skill.skill._skill", None), \
                patch("button_skill._skill_config.load_config", return_value=dict(DEFAULT_CONFIG)) as mock_load:
            first = lambda_handler(launch_envelope(), None)
            lambda_handler(launch_envelope(), None)

        assert mock_load.call_count == 1
        assert first["sessionAttributes"]["activeInputHandlerId"] == "launch-1"

    def test_bad_config_falls_back_to_defaults(self, launch_envelope):
        bad = ValueError("Environment variable PLAY_TIMEOUT_MS (play_timeout_ms) must be an integer")
        with patch("button_skill.skill._skill", None), \
                patch("button_skill._skill_config.load_config", side_effect=bad), \
                patch("button_skill.skill.logger") as mock_logger:
            result = lambda_handler(launch_envelope(), None)
            built = button_skill.skill._skill

        assert built.config["play_timeout_ms"] == DEFAULT_CONFIG["play_timeout_ms"]
        assert result["sessionAttributes"]["activeInputHandlerId"] == "launch-1"
        mock_logger.error.assert_called_once()
