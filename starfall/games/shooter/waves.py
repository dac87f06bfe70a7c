"""
Wave generation - enemy grid layout for a given level.
"""

from dataclasses import dataclass
from typing import List

from .config import ShooterConfig
from .entities import Enemy


@dataclass(frozen=True)
class WaveLayout:
    """Grid geometry for one wave."""
    rows: int
    cols: int
    start_x: float
    start_y: float
    step_x: float  # Enemy width plus horizontal gap
    step_y: float  # Enemy height plus vertical gap
    speed: float

    @property
    def count(self) -> int:
        return self.rows * self.cols


def wave_layout(level: int, config: ShooterConfig) -> WaveLayout:
    """
    Compute the enemy grid for a level.

    Rows and columns grow linearly with the level up to their caps. The grid
    is centred horizontally. When it would not fit at the configured spacing
    the horizontal gap shrinks, keeping two frames of enemy travel clear of
    each wall so the outer columns never start touching one.
    """
    rows = min(config.base_rows + level // 2, config.max_rows)
    cols = min(config.base_cols + level // 3, config.max_cols)
    speed = config.enemy_speed * config.difficulty(level)

    usable_width = config.width - 4 * speed  # Two frames of travel per side
    gap_x = float(config.wave_spacing)
    grid_width = cols * config.enemy_width + (cols - 1) * gap_x
    if grid_width > usable_width and cols > 1:
        gap_x = max(0.0, (usable_width - cols * config.enemy_width) / (cols - 1))
        grid_width = cols * config.enemy_width + (cols - 1) * gap_x

    return WaveLayout(
        rows=rows,
        cols=cols,
        start_x=(config.width - grid_width) / 2,
        start_y=config.wave_top,
        step_x=config.enemy_width + gap_x,
        step_y=config.enemy_height + config.wave_spacing / 2,
        speed=speed,
    )


def generate_wave(level: int, config: ShooterConfig) -> List[Enemy]:
    """Spawn the enemies of a level, all starting to move right."""
    layout = wave_layout(level, config)
    return [
        Enemy(
            x=layout.start_x + col * layout.step_x,
            y=layout.start_y + row * layout.step_y,
            width=config.enemy_width,
            height=config.enemy_height,
            speed=layout.speed,
        )
        for row in range(layout.rows)
        for col in range(layout.cols)
    ]
