"""
Abstract output sinks for Starfall.

Render and audio sinks receive fire-and-forget requests from the host after
each simulation step. Neither may block the simulation.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Tuple


class RendererInterface(ABC):
    """
    Abstract render sink.

    Renderers draw a frame's render commands plus HUD values to a surface.
    """

    @abstractmethod
    def render(self, commands: List[Any], surface: Any, hud: Any = None) -> None:
        """
        Draw one frame.

        Args:
            commands: Render commands in draw order
            surface: Target surface
            hud: Optional HUD values (score, lives, level)
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in pixels
        """
        pass


class AudioInterface(ABC):
    """
    Abstract audio sink.

    The sink decides whether to honour a request; enable flags live here,
    not in the game.
    """

    sound_enabled: bool = True
    music_enabled: bool = True

    @abstractmethod
    def play_effect(self, name: str) -> None:
        """
        Play a one-shot sound effect.

        Args:
            name: Effect name ("shoot", "explosion", "gameOver")
        """
        pass

    def start_music(self) -> None:
        """Start background music from the beginning."""
        pass

    def stop_music(self) -> None:
        """Pause background music."""
        pass
