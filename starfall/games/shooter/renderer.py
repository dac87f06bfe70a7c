"""
Shooter Renderer - Pygame-based render sink implementing RendererInterface.

Draws sprite assets per render kind when available and falls back to solid
rectangles (and a starfield for the background) when they are not.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pygame

from ...core.renderer_interface import RendererInterface
from .entities import RenderCommand, RenderKind


BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
CYAN = (85, 255, 255)
RED = (255, 85, 85)

# Fallback colours per kind
FALLBACK_COLORS = {
    RenderKind.PLAYER: CYAN,
    RenderKind.ENEMY: RED,
    RenderKind.BULLET: CYAN,
    RenderKind.ENEMY_BULLET: RED,
    RenderKind.BACKGROUND: BLACK,
}
HUD_COLOR = WHITE

SPRITE_EXTENSIONS = (".png", ".svg")


class ShooterRenderer(RendererInterface):
    """
    Renders shooter frames using Pygame.

    Commands are drawn in the order given, scaled from playfield units to
    the render area set with set_render_area().
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        assets_dir: Optional[str] = "assets",
        star_count: int = 100,
        seed: Optional[int] = None,
    ):
        """
        Initialize the renderer.

        Args:
            width: Playfield width in game units
            height: Playfield height in game units
            assets_dir: Directory holding <kind>.png/.svg sprites, or None
            star_count: Stars drawn when there is no background sprite
            seed: Seed for the starfield layout
        """
        self._base_width = width
        self._base_height = height
        self._scale = 1.0
        self._offset_x = 0
        self._offset_y = 0
        self._render_width = width
        self._render_height = height
        self._font: Optional[Any] = None
        self._sprites: Dict[RenderKind, Any] = {}
        self._scaled: Dict[Tuple[RenderKind, int, int], Any] = {}
        self.stars = self._make_starfield(star_count, seed)

        if assets_dir is not None:
            self.load_sprites(Path(assets_dir))

    def _make_starfield(self, count: int, seed: Optional[int]) -> np.ndarray:
        """Rows of (x, y, size) in playfield units."""
        rng = np.random.default_rng(seed)
        stars = np.empty((count, 3))
        stars[:, 0] = rng.uniform(0, self._base_width, count)
        stars[:, 1] = rng.uniform(0, self._base_height, count)
        stars[:, 2] = rng.uniform(1, 3, count)
        return stars

    def load_sprites(self, assets_dir: Path) -> None:
        """Load one sprite per render kind; missing or broken files are skipped."""
        for kind in RenderKind:
            for ext in SPRITE_EXTENSIONS:
                path = assets_dir / f"{kind.value}{ext}"
                if not path.exists():
                    continue
                try:
                    self._sprites[kind] = pygame.image.load(str(path))
                    break
                except (pygame.error, FileNotFoundError) as e:
                    print(f"[Renderer] Could not load {path.name}: {e}")

    def has_sprite(self, kind: RenderKind) -> bool:
        return kind in self._sprites

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._base_width, self._base_height)

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area where this renderer should draw."""
        self._offset_x = x
        self._offset_y = y
        scale_x = width / self._base_width
        scale_y = height / self._base_height
        self._scale = min(scale_x, scale_y)
        self._render_width = int(self._base_width * self._scale)
        self._render_height = int(self._base_height * self._scale)
        self._scaled.clear()

    def _scale_x(self, x: float) -> int:
        """Scale X coordinate."""
        return int(self._offset_x + x * self._scale)

    def _scale_y(self, y: float) -> int:
        """Scale Y coordinate."""
        return int(self._offset_y + y * self._scale)

    def _scale_size(self, size: float) -> int:
        """Scale a size value."""
        return max(1, int(size * self._scale))

    def _to_rect(self, command: RenderCommand) -> Any:
        return pygame.Rect(
            self._scale_x(command.x),
            self._scale_y(command.y),
            self._scale_size(command.width),
            self._scale_size(command.height),
        )

    def render(
        self,
        commands: List[RenderCommand],
        surface: Any,
        hud: Optional[Dict[str, int]] = None,
    ) -> None:
        """
        Render one frame to a surface.

        Args:
            commands: Render commands in draw order
            surface: Pygame surface to draw on
            hud: Optional score/lives/level values
        """
        for command in commands:
            if command.kind == RenderKind.BACKGROUND and not self.has_sprite(command.kind):
                self._draw_starfield(surface, command)
            else:
                self._draw_command(surface, command)

        if hud is not None:
            self._draw_hud(surface, hud.get("score", 0), hud.get("lives", 0), hud.get("level", 1))

    def _draw_command(self, surface: Any, command: RenderCommand) -> None:
        """Blit the kind's sprite, or fill a rectangle in its fallback colour."""
        rect = self._to_rect(command)
        sprite = self._sprites.get(command.kind)
        if sprite is None:
            pygame.draw.rect(surface, FALLBACK_COLORS[command.kind], rect)
            return

        key = (command.kind, rect.width, rect.height)
        scaled = self._scaled.get(key)
        if scaled is None:
            scaled = pygame.transform.smoothscale(sprite, (rect.width, rect.height))
            self._scaled[key] = scaled
        surface.blit(scaled, (rect.x, rect.y))

    def _draw_starfield(self, surface: Any, command: RenderCommand) -> None:
        """Black backdrop with small white squares."""
        pygame.draw.rect(surface, BLACK, self._to_rect(command))
        for x, y, size in self.stars:
            star = pygame.Rect(
                self._scale_x(x), self._scale_y(y),
                self._scale_size(size), self._scale_size(size),
            )
            pygame.draw.rect(surface, WHITE, star)

    def _draw_hud(self, surface: Any, score: int, lives: int, level: int) -> None:
        """Draw the heads-up display (score, lives, level)."""
        if self._font is None:
            try:
                self._font = pygame.font.Font(None, self._scale_size(28))
            except pygame.error:
                return

        score_text = self._font.render(f"SCORE: {score}", True, HUD_COLOR)
        surface.blit(score_text, (self._scale_x(10), self._scale_y(10)))

        level_text = self._font.render(f"LEVEL: {level}", True, HUD_COLOR)
        level_rect = level_text.get_rect()
        level_rect.centerx = self._scale_x(self._base_width / 2)
        level_rect.top = self._scale_y(10)
        surface.blit(level_text, level_rect)

        lives_text = self._font.render(f"LIVES: {lives}", True, HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.right = self._scale_x(self._base_width - 10)
        lives_rect.top = self._scale_y(10)
        surface.blit(lives_text, lives_rect)
