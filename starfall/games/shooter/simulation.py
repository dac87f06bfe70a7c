"""
Per-frame simulation step and collision resolution.

The step mutates an explicitly passed SessionState and reports what
happened through the returned StepResult. It performs no I/O; sounds and
drawing are the host's job after the step.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .entities import advance
from .events import GameEvent
from .geometry import overlaps
from .session import SessionState


@dataclass
class StepResult:
    """What one step produced."""
    events: List[GameEvent] = field(default_factory=list)
    delta_ms: float = 0.0
    game_over: bool = False


def _finish(session: SessionState, delta_ms: float) -> StepResult:
    return StepResult(
        events=session.drain_events(),
        delta_ms=delta_ms,
        game_over=session.is_over,
    )


def detect_collisions(session: SessionState) -> bool:
    """
    Resolve the three collision pairs in fixed order.

    1. Player bullets vs enemies: both removed, score += points * level.
       A bullet destroys at most one enemy.
    2. Enemy bullets vs player: bullet removed, one life lost. At most one
       such hit per frame.
    3. Enemies vs player: enemy removed, one life lost per enemy.

    Returns:
        True if the session ended; remaining checks are skipped
    """
    player = session.player

    for bullet in reversed(list(session.player_bullets)):
        for enemy in reversed(list(session.enemies)):
            if overlaps(bullet, enemy):
                session.player_bullets.remove(bullet)
                session.enemies.remove(enemy)
                session.add_kill_score()
                session.emit(GameEvent.EXPLOSION)
                break

    for bullet in reversed(list(session.enemy_bullets)):
        if overlaps(bullet, player):
            session.enemy_bullets.remove(bullet)
            if session.lose_life():
                return True
            break

    for enemy in reversed(list(session.enemies)):
        if overlaps(enemy, player):
            session.enemies.remove(enemy)
            if session.lose_life():
                return True

    return False


def step(session: SessionState, timestamp: float, rng: random.Random) -> StepResult:
    """
    Advance the session by one frame.

    Order: player, player bullets, enemies (move, fire, floor check), enemy
    bullets, collisions, then wave-clear. Velocities are per-frame; the
    elapsed time is computed for bookkeeping only.

    Args:
        session: Session to mutate
        timestamp: Monotonic frame timestamp in milliseconds
        rng: Random source for enemy fire trials

    Returns:
        StepResult with the events emitted during this step
    """
    config = session.config
    delta_ms = timestamp - session.last_timestamp
    session.last_timestamp = timestamp

    if session.is_over:
        return _finish(session, delta_ms)

    session.frame += 1

    advance(session.player, delta_ms, config.width)
    session.player_bullets.update(delta_ms, config)

    outcome = session.enemies.update(
        delta_ms, session.level, config, rng, max_landed=session.lives
    )
    for bullet in outcome.fired:
        session.enemy_bullets.add(bullet)
    for _ in range(outcome.landed):
        if session.lose_life():
            return _finish(session, delta_ms)

    session.enemy_bullets.update(delta_ms, config)

    if detect_collisions(session):
        return _finish(session, delta_ms)

    if session.enemies.is_empty:
        session.advance_level()

    return _finish(session, delta_ms)
