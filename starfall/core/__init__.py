"""
Core abstractions for Starfall.

Provides the abstract interfaces that games and output sinks implement.
"""

from .game_interface import GameInterface, GameMetadata
from .renderer_interface import RendererInterface, AudioInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'RendererInterface',
    'AudioInterface',
]
