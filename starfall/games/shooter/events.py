"""
Events emitted by the simulation for the host to act on after each step.
"""

from enum import Enum


class GameEvent(str, Enum):
    """Fire-and-forget notifications drained by the host."""
    SHOOT = "shoot"
    EXPLOSION = "explosion"
    GAME_OVER = "gameOver"
    LIFE_LOST = "lifeLost"
    LEVEL_UP = "levelUp"


# Events that map onto sound effects
SOUND_EVENTS = frozenset({GameEvent.SHOOT, GameEvent.EXPLOSION, GameEvent.GAME_OVER})
