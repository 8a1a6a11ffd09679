# Area: Phases
"""
Phase handlers.

This package handles:
- Roll call (registering the two buttons)
- Game play (color choice, button presses, timeout)
"""

from .roll_call import RollCallPhase
from .game_play import GamePlayPhase

__all__ = [
    "RollCallPhase",
    "GamePlayPhase",
]
