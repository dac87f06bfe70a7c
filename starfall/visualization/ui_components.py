"""
Reusable UI components for the menu screens.

Provides Button and Toggle widgets driven by pygame mouse and key events.
"""
import pygame
from typing import Callable, Optional


# UI Theme Colors
BG_COLOR = (8, 8, 20)
TEXT_COLOR = (220, 220, 235)
ACCENT_COLOR = (85, 255, 255)
DANGER_COLOR = (255, 85, 85)
BUTTON_COLOR = (30, 30, 55)
BUTTON_HOVER = (50, 50, 90)
BORDER_COLOR = (85, 255, 255)
TRACK_OFF_COLOR = (60, 60, 80)


class Button:
    """Clickable button with hover highlight and an optional hotkey."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        callback: Optional[Callable[[], None]] = None,
        hotkey: Optional[int] = None,
        font_size: int = 32
    ):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.callback = callback
        self.hotkey = hotkey
        self.font_size = font_size
        self.hovered = False
        self._font = None

    @property
    def font(self):
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def set_position(self, x: int, y: int):
        """Update button position."""
        self.rect.x = x
        self.rect.y = y

    def draw(self, surface: pygame.Surface):
        """Draw the button."""
        color = BUTTON_HOVER if self.hovered else BUTTON_COLOR
        pygame.draw.rect(surface, color, self.rect, border_radius=6)
        pygame.draw.rect(surface, BORDER_COLOR, self.rect, 2, border_radius=6)

        text_surf = self.font.render(self.text, True, TEXT_COLOR)
        text_rect = text_surf.get_rect(center=self.rect.center)
        surface.blit(text_surf, text_rect)

    def activate(self) -> None:
        if self.callback:
            self.callback()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle pygame event.

        Returns:
            True if the button was clicked or its hotkey pressed
        """
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.activate()
                return True
        elif event.type == pygame.KEYDOWN and self.hotkey is not None:
            if event.key == self.hotkey:
                self.activate()
                return True
        return False


class Toggle:
    """On/off switch that reports changes through a callback."""

    def __init__(
        self,
        x: int,
        y: int,
        label: str,
        initial_state: bool = False,
        on_change: Optional[Callable[[bool], None]] = None,
        font_size: int = 28
    ):
        self.x = x
        self.y = y
        self.label = label
        self.state = initial_state
        self.on_change = on_change
        self.font_size = font_size

        self.toggle_width = 50
        self.toggle_height = 26
        self._font = None

    @property
    def font(self):
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    @property
    def toggle_rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.toggle_width, self.toggle_height)

    @property
    def full_rect(self) -> pygame.Rect:
        """Switch plus label, all clickable."""
        label_width = self.font.size(self.label)[0] + 10
        return pygame.Rect(self.x, self.y, self.toggle_width + label_width, self.toggle_height)

    def draw(self, surface: pygame.Surface):
        """Draw the toggle switch."""
        track = self.toggle_rect
        track_color = ACCENT_COLOR if self.state else TRACK_OFF_COLOR
        pygame.draw.rect(surface, track_color, track, border_radius=13)

        knob_radius = 10
        knob_x = track.right - knob_radius - 3 if self.state else track.left + knob_radius + 3
        pygame.draw.circle(surface, TEXT_COLOR, (knob_x, track.centery), knob_radius)

        label_surf = self.font.render(self.label, True, TEXT_COLOR)
        surface.blit(label_surf, (track.right + 10, self.y + 3))

    def set_state(self, state: bool) -> None:
        """Set the state, notifying on_change if it changed."""
        if state == self.state:
            return
        self.state = state
        if self.on_change:
            self.on_change(state)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle pygame event.

        Returns:
            True if state changed, False otherwise
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.full_rect.collidepoint(event.pos):
                self.set_state(not self.state)
                return True
        return False
