# Area: Shared
"""
button_skill.cli — Command-line interface
=========================================

Replays request envelopes through the skill and prints the responses.

Usage:
    python -m button_skill --event launch.json
    python -m button_skill --event session.json --config config.json

The event file holds one request envelope or a list of envelopes. A list
is replayed in order; the sessionAttributes of each response are copied
into the session of the next envelope, as the host would do.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ._shared.logging_config import setup_logging
from ._skill_config import load_config, validate_config
from .skill import ButtonSkill


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Echo Buttons skill engine - replay request envelopes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m button_skill --event launch.json
  python -m button_skill --event session.json --config config.json
  LOG_LEVEL=DEBUG python -m button_skill --event session.json
        """,
    )

    parser.add_argument(
        "--event",
        type=str,
        required=True,
        help="Path to a JSON request envelope, or a list of envelopes",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="Override the configured log level (DEBUG, INFO, WARNING, ...)",
    )

    return parser.parse_args(argv)


def load_events(event_path: str) -> List[Dict[str, Any]]:
    with open(Path(event_path), encoding="utf-8") as f:
        data = json.load(f)
    return data if isinstance(data, list) else [data]


def replay(skill: ButtonSkill, events: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Invoke the skill for each envelope, threading session attributes."""
    responses = []
    attributes: Optional[Dict[str, Any]] = None
    for event in events:
        if attributes is not None:
            session = dict(event.get("session") or {})
            session["attributes"] = attributes
            event = {**event, "session": session}
        response = skill.invoke(event)
        attributes = response.get("sessionAttributes")
        responses.append(response)
    return responses


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        if args.log_level:
            config["log_level"] = args.log_level
        validate_config(config)
    except (ValueError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.get("log_file"), config.get("log_level", "INFO"))

    try:
        events = load_events(args.event)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read events from {args.event}: {e}", file=sys.stderr)
        return 1

    skill = ButtonSkill(config)
    for response in replay(skill, events):
        print(json.dumps(response, indent=2))
    return 0
