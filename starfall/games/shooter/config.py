"""
Shooter game configuration.
"""

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any


@dataclass
class ShooterConfig:
    """Configuration for the shooter simulation."""

    # Playfield dimensions
    width: int = 800
    height: int = 600

    # Player settings (per-frame speeds)
    player_speed: float = 5.0
    player_width: int = 50
    player_height: int = 50
    player_bottom_margin: int = 20
    player_start_lives: int = 3
    shoot_cooldown_ms: float = 300.0

    # Bullet settings
    bullet_width: int = 3
    bullet_height: int = 15
    player_bullet_speed: float = 7.0
    enemy_bullet_speed: float = 4.0

    # Enemy settings
    enemy_width: int = 40
    enemy_height: int = 40
    enemy_speed: float = 2.0
    enemy_fire_rate: float = 0.005  # Probability per enemy per frame

    # Wave layout
    wave_spacing: int = 60
    wave_top: int = 50
    base_rows: int = 3
    base_cols: int = 5
    max_rows: int = 5
    max_cols: int = 10

    # Difficulty and scoring
    difficulty_step: float = 0.1  # Speed/fire multiplier gained per level
    points_per_level: int = 10

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Playfield must be positive, got {self.width}x{self.height}"
            )
        if self.player_start_lives < 1:
            raise ValueError(f"player_start_lives must be >= 1, got {self.player_start_lives}")
        if self.shoot_cooldown_ms <= 0:
            raise ValueError(f"shoot_cooldown_ms must be > 0, got {self.shoot_cooldown_ms}")

    def difficulty(self, level: int) -> float:
        """Linear multiplier applied to enemy speed and fire rate."""
        return 1 + level * self.difficulty_step

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShooterConfig":
        """Create config from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in names})
