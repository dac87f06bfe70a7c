"""
Abstract game interface for Starfall.

Games implement GameInterface and provide GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, List


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Starfall")
    id: str                             # Unique identifier (e.g., "starfall")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version


class GameInterface(ABC):
    """
    Abstract base class for frame-driven games.

    Games handle the core logic, rules, and state management.
    Rendering and audio are separate sinks driven by the host.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def step(self, timestamp: float) -> Any:
        """
        Run one frame of simulation.

        Args:
            timestamp: Monotonic frame timestamp in milliseconds

        Returns:
            Game-specific step result
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state.

        Returns:
            Dictionary snapshot of the game state
        """
        pass

    @abstractmethod
    def render_commands(self) -> List[Any]:
        """
        Draw requests for the current frame, back to front.

        Returns:
            List of render commands
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
