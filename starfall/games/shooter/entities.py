"""
Shooter entities - Player, Bullet and Enemy footprints with per-frame rules.

Entities are plain dataclasses. Per-frame behaviour is dispatched by
``advance()`` over the ``Entity`` union rather than through overridden
methods, so population and collision code can handle each kind explicitly.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Union

from .config import ShooterConfig
from .geometry import Rect


class BulletKind(IntEnum):
    """Identifies who fired a bullet."""
    PLAYER = 0
    ENEMY = 1


class RenderKind(str, Enum):
    """Sprite kinds understood by render sinks (values match asset names)."""
    PLAYER = "player"
    ENEMY = "enemy"
    BULLET = "bullet"
    ENEMY_BULLET = "enemyBullet"
    BACKGROUND = "background"


@dataclass(frozen=True)
class RenderCommand:
    """A single draw request for a render sink."""
    kind: RenderKind
    x: float
    y: float
    width: float
    height: float


@dataclass
class Player(Rect):
    """The player's ship. Velocity is a fixed per-frame delta."""
    speed: float = 5.0
    speed_x: float = 0.0
    last_shot_time: Optional[float] = None
    shoot_cooldown_ms: float = 300.0

    @classmethod
    def spawn(cls, config: ShooterConfig) -> "Player":
        """Create a player centred horizontally near the bottom edge."""
        return cls(
            x=config.width / 2 - config.player_width / 2,
            y=config.height - config.player_height - config.player_bottom_margin,
            width=config.player_width,
            height=config.player_height,
            speed=config.player_speed,
            shoot_cooldown_ms=config.shoot_cooldown_ms,
        )

    def move_left(self) -> None:
        self.speed_x = -self.speed

    def move_right(self) -> None:
        self.speed_x = self.speed

    def stop_moving(self) -> None:
        self.speed_x = 0.0

    def can_shoot(self, now: float) -> bool:
        """Debounce check: shots inside the cooldown window are dropped."""
        if self.last_shot_time is None:
            return True
        return now - self.last_shot_time >= self.shoot_cooldown_ms

    def shoot(self, now: float, config: ShooterConfig) -> Optional["Bullet"]:
        """
        Fire one bullet upward from the centre of the top edge.

        Args:
            now: Current timestamp in milliseconds
            config: Game configuration (bullet size and speed)

        Returns:
            The new bullet, or None while the cooldown is running
        """
        if not self.can_shoot(now):
            return None

        self.last_shot_time = now
        return Bullet(
            x=self.center_x - config.bullet_width / 2,
            y=self.y,
            width=config.bullet_width,
            height=config.bullet_height,
            speed=-config.player_bullet_speed,
            kind=BulletKind.PLAYER,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["speed_x"] = self.speed_x
        return data


@dataclass
class Bullet(Rect):
    """A bullet moving vertically. Negative speed travels upward."""
    speed: float = 0.0
    kind: BulletKind = BulletKind.PLAYER

    def is_out_of_bounds(self, field_height: float) -> bool:
        return self.y < 0 or self.y > field_height

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["kind"] = int(self.kind)
        return data


@dataclass
class Enemy(Rect):
    """An enemy that side-steps and descends when it touches a side wall."""
    speed: float = 2.0
    direction: int = 1  # 1 = right, -1 = left

    def fire(self, config: ShooterConfig) -> Bullet:
        """Create a downward bullet from the centre of the bottom edge."""
        return Bullet(
            x=self.center_x - config.bullet_width / 2,
            y=self.bottom,
            width=config.bullet_width,
            height=config.bullet_height,
            speed=config.enemy_bullet_speed,
            kind=BulletKind.ENEMY,
        )

    def has_landed(self, field_height: float) -> bool:
        """True once the bottom edge has passed the playfield floor."""
        return self.bottom > field_height

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["direction"] = self.direction
        return data


Entity = Union[Player, Bullet, Enemy]


def _advance_player(player: Player, field_width: float) -> None:
    player.x += player.speed_x
    # Clamp to the playfield
    if player.x < 0:
        player.x = 0
    if player.x + player.width > field_width:
        player.x = field_width - player.width


def _advance_bullet(bullet: Bullet) -> None:
    bullet.y += bullet.speed


def _advance_enemy(enemy: Enemy, field_width: float) -> None:
    enemy.x += enemy.speed * enemy.direction
    if enemy.x <= 0 or enemy.x + enemy.width >= field_width:
        enemy.direction *= -1
        enemy.y += enemy.height / 2


def render_command(entity: Entity) -> RenderCommand:
    """Build the draw request for an entity's current footprint."""
    if isinstance(entity, Player):
        kind = RenderKind.PLAYER
    elif isinstance(entity, Enemy):
        kind = RenderKind.ENEMY
    elif isinstance(entity, Bullet):
        kind = RenderKind.BULLET if entity.kind == BulletKind.PLAYER else RenderKind.ENEMY_BULLET
    else:
        raise TypeError(f"Not an entity: {entity!r}")
    return RenderCommand(kind, entity.x, entity.y, entity.width, entity.height)


def advance(entity: Entity, dt: float, field_width: float) -> RenderCommand:
    """
    Apply one frame of motion to an entity.

    Motion is a fixed per-frame delta; ``dt`` is accepted for bookkeeping
    only and does not scale velocities.

    Args:
        entity: Player, Bullet or Enemy
        dt: Milliseconds since the previous frame
        field_width: Playfield width used for wall checks

    Returns:
        RenderCommand for the entity's new position
    """
    if isinstance(entity, Player):
        _advance_player(entity, field_width)
    elif isinstance(entity, Enemy):
        _advance_enemy(entity, field_width)
    elif isinstance(entity, Bullet):
        _advance_bullet(entity)
    else:
        raise TypeError(f"Not an entity: {entity!r}")
    return render_command(entity)
