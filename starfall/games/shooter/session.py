"""
Session state - everything one playthrough owns, held in a single object.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .config import ShooterConfig
from .entities import Player
from .events import GameEvent
from .populations import BulletPool, EnemyFormation
from .waves import generate_wave


class Screen(str, Enum):
    """Top-level screens. Only PLAYING runs the simulation."""
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameOver"
    SETTINGS = "settings"


@dataclass
class SessionState:
    """Score, lives, level and live entity collections of one session."""
    config: ShooterConfig
    player: Player
    score: int = 0
    lives: int = 3
    level: int = 1
    enemies: EnemyFormation = field(default_factory=EnemyFormation)
    player_bullets: BulletPool = field(default_factory=BulletPool)
    enemy_bullets: BulletPool = field(default_factory=BulletPool)
    frame: int = 0
    last_timestamp: float = 0.0
    pending_events: List[GameEvent] = field(default_factory=list)

    @classmethod
    def new(cls, config: ShooterConfig, timestamp: float = 0.0) -> "SessionState":
        """Fresh session: full lives, level 1, first wave spawned."""
        session = cls(
            config=config,
            player=Player.spawn(config),
            lives=config.player_start_lives,
            last_timestamp=timestamp,
        )
        session.spawn_wave()
        return session

    @property
    def is_over(self) -> bool:
        return self.lives <= 0

    def spawn_wave(self) -> None:
        """Replace the enemy collection with the wave for the current level."""
        self.enemies = EnemyFormation(generate_wave(self.level, self.config))

    def advance_level(self) -> None:
        self.level += 1
        self.spawn_wave()
        self.emit(GameEvent.LEVEL_UP)

    def add_kill_score(self) -> None:
        self.score += self.config.points_per_level * self.level

    def lose_life(self) -> bool:
        """
        Take one life.

        Returns:
            True if this ended the session
        """
        if self.is_over:
            return True
        self.lives -= 1
        self.emit(GameEvent.LIFE_LOST)
        if self.is_over:
            self.emit(GameEvent.GAME_OVER)
            return True
        return False

    def emit(self, event: GameEvent) -> None:
        self.pending_events.append(event)

    def drain_events(self) -> List[GameEvent]:
        """Return and clear the events emitted since the last drain."""
        events, self.pending_events = self.pending_events, []
        return events

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": self.player.to_dict(),
            "enemies": [e.to_dict() for e in self.enemies],
            "player_bullets": [b.to_dict() for b in self.player_bullets],
            "enemy_bullets": [b.to_dict() for b in self.enemy_bullets],
            "score": self.score,
            "lives": self.lives,
            "level": self.level,
            "frame": self.frame,
        }
