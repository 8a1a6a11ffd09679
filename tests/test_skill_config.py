# Area: Shared Tests
"""Tests for skill configuration loading and validation."""

import json
from unittest.mock import patch

import pytest

from button_skill._skill_config import (
    DEFAULT_CONFIG,
    ENV_MAPPINGS,
    load_config,
    validate_config,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """No .env file and none of the skill's variables set."""
    for env_key in ENV_MAPPINGS:
        monkeypatch.delenv(env_key, raising=False)
    with patch("button_skill._skill_config.load_dotenv") as mock_load_dotenv:
        yield mock_load_dotenv


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, clean_environment):
        assert load_config() == DEFAULT_CONFIG
        clean_environment.assert_called_once()

    def test_json_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"play_timeout_ms": 15000}))
        config = load_config(str(path))
        assert config["play_timeout_ms"] == 15000
        assert config["roll_call_timeout_ms"] == DEFAULT_CONFIG["roll_call_timeout_ms"]

    def test_missing_file_warns(self, tmp_path):
        with patch("button_skill._skill_config.logger") as mock_logger:
            config = load_config(str(tmp_path / "missing.json"))
        assert config == DEFAULT_CONFIG
        mock_logger.warning.assert_called_once()

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"roll_call_timeout_ms": 15000}))
        monkeypatch.setenv("ROLL_CALL_TIMEOUT_MS", "5000")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = load_config(str(path))
        assert config["roll_call_timeout_ms"] == 5000
        assert config["log_level"] == "DEBUG"


    def test_non_numeric_environment_timeout(self, monkeypatch):
        monkeypatch.setenv("PLAY_TIMEOUT_MS", "sixty")
        with pytest.raises(ValueError, match="PLAY_TIMEOUT_MS"):
            load_config()


class TestValidateConfig:
    """Tests for validate_config."""

    def test_defaults_are_valid(self):
        validate_config(dict(DEFAULT_CONFIG))

    def test_missing_key(self):
        config = dict(DEFAULT_CONFIG)
        del config["roll_call_timeout_ms"]
        with pytest.raises(ValueError, match="roll_call_timeout_ms"):
            validate_config(config)

    @pytest.mark.parametrize("value", [0, -1, "30000"])
    def test_timeout_must_be_positive_int(self, value):
        config = dict(DEFAULT_CONFIG, play_timeout_ms=value)
        with pytest.raises(ValueError, match="play_timeout_ms"):
            validate_config(config)
