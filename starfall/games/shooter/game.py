"""
Shooter Game Core - session lifecycle, screens and input on top of the
per-frame simulation.
"""

import random
import time
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ...core.game_interface import GameInterface, GameMetadata
from .config import ShooterConfig
from .entities import RenderCommand, RenderKind, render_command
from .events import GameEvent
from .session import Screen, SessionState
from .simulation import StepResult, step as simulation_step


class InputAction(str, Enum):
    """Discrete inputs mapped by the host from raw devices."""
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"
    FIRE = "fire"


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class ShooterGame(GameInterface):
    """
    Single-screen shooter implementing GameInterface.

    The player's ship sits at the bottom of the playfield and shoots at
    rows of enemies that bounce between the side walls and descend. Losing
    all lives ends the session; clearing a wave starts the next level.

    Screens: MENU -> PLAYING -> GAME_OVER, with SETTINGS reachable from the
    menu. Only PLAYING runs the simulation.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about the game."""
        return GameMetadata(
            name="Starfall",
            id="starfall",
            description="Destroy descending enemy waves while dodging their fire",
            version="1.0.0",
        )

    def __init__(
        self,
        config: Optional[ShooterConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize the game on the menu screen.

        Args:
            config: Gameplay configuration (defaults to ShooterConfig())
            rng: Random source for enemy fire (seed it for determinism)
            clock: Millisecond clock used for the shot cooldown when no
                explicit timestamp is given
        """
        self.config = config or ShooterConfig()
        self.rng = rng or random.Random()
        self.clock = clock or _monotonic_ms
        self.screen: Screen = Screen.MENU
        self.session: Optional[SessionState] = None
        self.last_score = 0

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def show_screen(self, screen: Screen) -> None:
        """
        Switch screens.

        PLAYING always begins a fresh session; there is no resume. MENU and
        SETTINGS discard the current session, keeping only its score.
        """
        screen = Screen(screen)
        if screen == Screen.PLAYING:
            self.start_game()
            return
        if screen in (Screen.MENU, Screen.SETTINGS) and self.session is not None:
            self.last_score = self.session.score
            self.session = None
        self.screen = screen

    def start_game(self, timestamp: Optional[float] = None) -> None:
        """Reset score, lives, level and collections, then enter PLAYING."""
        if timestamp is None:
            timestamp = self.clock()
        self.session = SessionState.new(self.config, timestamp)
        self.screen = Screen.PLAYING

    def reset(self) -> Dict[str, Any]:
        """Start a fresh session and return its state."""
        self.start_game()
        return self.get_state()

    @property
    def is_playing(self) -> bool:
        return self.screen == Screen.PLAYING and self.session is not None

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def move_left(self) -> None:
        if self.is_playing:
            self.session.player.move_left()

    def move_right(self) -> None:
        if self.is_playing:
            self.session.player.move_right()

    def stop_moving(self) -> None:
        if self.is_playing:
            self.session.player.stop_moving()

    def shoot(self, now: Optional[float] = None) -> bool:
        """
        Fire if the cooldown allows it.

        Returns:
            True if a bullet was spawned
        """
        if not self.is_playing:
            return False
        if now is None:
            now = self.clock()

        bullet = self.session.player.shoot(now, self.config)
        if bullet is None:
            return False
        self.session.player_bullets.add(bullet)
        self.session.emit(GameEvent.SHOOT)
        return True

    def press(self, action: InputAction, now: Optional[float] = None) -> None:
        """Handle an input press."""
        if action == InputAction.MOVE_LEFT:
            self.move_left()
        elif action == InputAction.MOVE_RIGHT:
            self.move_right()
        elif action == InputAction.FIRE:
            self.shoot(now)

    def release(self, action: InputAction) -> None:
        """Handle an input release; a release only cancels its own direction."""
        if not self.is_playing:
            return
        speed_x = self.session.player.speed_x
        if action == InputAction.MOVE_LEFT and speed_x < 0:
            self.stop_moving()
        elif action == InputAction.MOVE_RIGHT and speed_x > 0:
            self.stop_moving()

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def step(self, timestamp: float) -> StepResult:
        """
        Run one simulation step while PLAYING.

        Returns:
            StepResult; moves to GAME_OVER when the last life is lost
        """
        if not self.is_playing:
            return StepResult()

        result = simulation_step(self.session, timestamp, self.rng)
        if result.game_over:
            self.show_screen(Screen.GAME_OVER)
        return result

    def drain_events(self) -> List[GameEvent]:
        """Events emitted outside a step (e.g. shots) not yet delivered."""
        if self.session is None:
            return []
        return self.session.drain_events()

    def render_commands(self) -> List[RenderCommand]:
        """Background, player, enemies, then bullets."""
        commands = [
            RenderCommand(RenderKind.BACKGROUND, 0, 0, self.config.width, self.config.height)
        ]
        if self.session is None:
            return commands

        commands.append(render_command(self.session.player))
        commands.extend(render_command(e) for e in self.session.enemies)
        commands.extend(render_command(b) for b in self.session.player_bullets)
        commands.extend(render_command(b) for b in self.session.enemy_bullets)
        return commands

    # ------------------------------------------------------------------
    # HUD
    # ------------------------------------------------------------------

    @property
    def score(self) -> int:
        return self.session.score if self.session else self.last_score

    @property
    def lives(self) -> int:
        return self.session.lives if self.session else self.config.player_start_lives

    @property
    def level(self) -> int:
        return self.session.level if self.session else 1

    def get_score(self) -> int:
        """Get current game score."""
        return self.score

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for rendering or inspection."""
        state: Dict[str, Any] = self.session.to_dict() if self.session else {
            "score": self.score,
            "lives": self.lives,
            "level": 1,
            "frame": 0,
        }
        state.update({
            "screen": self.screen.value,
            "game_over": self.screen == Screen.GAME_OVER,
            "width": self.config.width,
            "height": self.config.height,
        })
        return state
