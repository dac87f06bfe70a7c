"""
Frame loop - cooperative per-frame driver between the game and its sinks.

One tick runs one simulation step to completion, then hands the step's
events to the audio sink and the frame's render commands to the render sink.
"""

from typing import Any, Dict, Optional

from ...core.renderer_interface import AudioInterface, RendererInterface
from .events import GameEvent, SOUND_EVENTS
from .game import ShooterGame
from .simulation import StepResult


class FrameLoop:
    """
    Drives a ShooterGame one frame at a time.

    Either sink may be None; the simulation runs identically whether or not
    anything is drawn or heard.
    """

    def __init__(
        self,
        game: ShooterGame,
        renderer: Optional[RendererInterface] = None,
        surface: Any = None,
        audio: Optional[AudioInterface] = None,
    ):
        self.game = game
        self.renderer = renderer
        self.surface = surface
        self.audio = audio
        self.running = False
        self.frames = 0

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        """Stop scheduling steps. Safe to call repeatedly."""
        self.running = False

    def tick(self, timestamp: float) -> Optional[StepResult]:
        """
        Run one frame if the loop is running.

        Args:
            timestamp: Monotonic frame timestamp in milliseconds

        Returns:
            The step result, or None if no step ran
        """
        if not self.running:
            return None
        if not self.game.is_playing:
            self.stop()
            return None

        result = self.game.step(timestamp)
        self.frames += 1

        for event in result.events:
            self._play(event)
        self.draw()

        if result.game_over:
            self.stop()
        return result

    def hud(self) -> Dict[str, int]:
        return {
            "score": self.game.score,
            "lives": self.game.lives,
            "level": self.game.level,
        }

    def draw(self) -> None:
        """Send the current frame to the render sink, if there is one."""
        if self.renderer is None or self.surface is None:
            return
        self.renderer.render(self.game.render_commands(), self.surface, self.hud())

    def _play(self, event: GameEvent) -> None:
        if self.audio is None:
            return
        if event in SOUND_EVENTS:
            self.audio.play_effect(event.value)
        if event == GameEvent.GAME_OVER:
            self.audio.stop_music()
