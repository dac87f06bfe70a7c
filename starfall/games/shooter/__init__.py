"""
Shooter game module for Starfall.

The simulation core (geometry, entities, populations, waves, session,
simulation) has no pygame dependency; renderer and audio sinks do.
"""

from .config import ShooterConfig
from .entities import Player, Bullet, Enemy, BulletKind, RenderKind, RenderCommand
from .events import GameEvent
from .game import ShooterGame, InputAction
from .frame_loop import FrameLoop
from .geometry import Rect, overlaps
from .session import Screen, SessionState
from .simulation import StepResult, step
from .waves import WaveLayout, wave_layout, generate_wave

__all__ = [
    "ShooterConfig",
    "Player",
    "Bullet",
    "Enemy",
    "BulletKind",
    "RenderKind",
    "RenderCommand",
    "GameEvent",
    "ShooterGame",
    "InputAction",
    "FrameLoop",
    "Rect",
    "overlaps",
    "Screen",
    "SessionState",
    "StepResult",
    "step",
    "WaveLayout",
    "wave_layout",
    "generate_wave",
]
