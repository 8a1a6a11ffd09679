# Area: Turn
"""
Per-turn pipeline.

This package handles:
- The TurnContext accumulator
- The outbound response builder
- Pre-turn and post-turn (response assembly) hooks
"""

from .context import TurnContext
from .response_builder import ResponseBuilder
from .interceptors import new_turn_context, assemble_response

__all__ = [
    "TurnContext",
    "ResponseBuilder",
    "new_turn_context",
    "assemble_response",
]
