"""
Population managers owning the live bullet and enemy collections.

Members are removed by position or identity, never by value, so two
entities with identical footprints are still distinct.
"""

import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .config import ShooterConfig
from .entities import Bullet, Enemy, advance


class BulletPool:
    """A dynamic set of live bullets of one kind."""

    def __init__(self, bullets: Optional[List[Bullet]] = None):
        self.bullets: List[Bullet] = list(bullets or [])

    def __len__(self) -> int:
        return len(self.bullets)

    def __iter__(self) -> Iterator[Bullet]:
        return iter(self.bullets)

    def add(self, bullet: Bullet) -> None:
        self.bullets.append(bullet)

    def remove(self, bullet: Bullet) -> None:
        """Remove a specific bullet instance."""
        self.bullets = [b for b in self.bullets if b is not bullet]

    def update(self, dt: float, config: ShooterConfig) -> int:
        """
        Advance every bullet and cull those that left the vertical bounds.

        Returns:
            Number of bullets culled
        """
        survivors: List[Bullet] = []
        for bullet in self.bullets:
            advance(bullet, dt, config.width)
            if not bullet.is_out_of_bounds(config.height):
                survivors.append(bullet)
        culled = len(self.bullets) - len(survivors)
        self.bullets = survivors
        return culled


@dataclass
class FormationUpdate:
    """Outcome of one enemy update pass."""
    fired: List[Bullet] = field(default_factory=list)
    landed: int = 0  # Enemies culled at the floor, each costing a life


class EnemyFormation:
    """
    The live enemies of the current wave.

    Enemies move independently; each one bounces off the side walls and
    rolls its own fire trial every frame.
    """

    def __init__(self, enemies: Optional[List[Enemy]] = None):
        self.enemies: List[Enemy] = list(enemies or [])

    def __len__(self) -> int:
        return len(self.enemies)

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self.enemies)

    @property
    def is_empty(self) -> bool:
        return not self.enemies

    def remove(self, enemy: Enemy) -> None:
        """Remove a specific enemy instance."""
        self.enemies = [e for e in self.enemies if e is not enemy]

    def fire_probability(self, level: int, config: ShooterConfig) -> float:
        """Per-enemy, per-frame chance of firing at this level."""
        return config.enemy_fire_rate * config.difficulty(level)

    def update(
        self,
        dt: float,
        level: int,
        config: ShooterConfig,
        rng: random.Random,
        max_landed: Optional[int] = None,
    ) -> FormationUpdate:
        """
        Move every enemy, roll its fire trial and cull those that landed.

        Args:
            dt: Milliseconds since the previous frame (bookkeeping only)
            level: Current level, scales fire probability
            config: Game configuration
            rng: Random source for the fire trials
            max_landed: Stop the pass once this many enemies have landed.
                Used to halt mid-frame when the session runs out of lives.

        Returns:
            FormationUpdate with new enemy bullets and the landed count
        """
        result = FormationUpdate()
        probability = self.fire_probability(level, config)
        survivors: List[Enemy] = []

        for index, enemy in enumerate(self.enemies):
            if max_landed is not None and result.landed >= max_landed:
                survivors.extend(self.enemies[index:])
                break

            advance(enemy, dt, config.width)

            if rng.random() < probability:
                result.fired.append(enemy.fire(config))

            if enemy.has_landed(config.height):
                result.landed += 1
                continue

            survivors.append(enemy)

        self.enemies = survivors
        return result
