# Area: Shared
"""
button_skill._skill_config — Skill Configuration
=================================================

Configuration loading, validation and defaults for ButtonSkill.
Values come from (lowest to highest precedence) the defaults below,
an optional JSON config file, and environment variables (a ``.env``
file in the working directory is loaded first).
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger("button_skill.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    "roll_call_timeout_ms": 30000,
    "play_timeout_ms": 60000,
    "log_level": "INFO",
    "log_file": "button_skill.log",
}

# Environment variable -> config key
ENV_MAPPINGS = {
    "ROLL_CALL_TIMEOUT_MS": "roll_call_timeout_ms",
    "PLAY_TIMEOUT_MS": "play_timeout_ms",
    "LOG_LEVEL": "log_level",
    "LOG_FILE": "log_file",
}

INT_KEYS = {"roll_call_timeout_ms", "play_timeout_ms"}

REQUIRED_CONFIG_KEYS = [
    "roll_call_timeout_ms",
    "play_timeout_ms",
]


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from defaults, an optional JSON file and the environment.

    Raises:
        ValueError: If the config file is not valid JSON or an integer
            environment variable does not parse
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning(f"Config file not found: {config_path}")

    load_dotenv()

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key in INT_KEYS:
                try:
                    value = int(value)
                except ValueError:
                    raise ValueError(
                        f"Environment variable {env_key} ({config_key}) must be an integer, got {value!r}"
                    ) from None
            config[config_key] = value

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate required configuration keys.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If required keys are missing or timeouts are not positive
    """
    missing = [k for k in REQUIRED_CONFIG_KEYS if k not in config]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    for key in INT_KEYS:
        value = config[key]
        if not isinstance(value, int) or value <= 0:
            raise ValueError(f"Config key '{key}' must be a positive integer, got {value!r}")
