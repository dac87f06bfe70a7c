"""
Menu, settings and game-over screens.

Screens only translate clicks and keys into action names; the app decides
what each action does.
"""
import pygame
from typing import Callable, Dict, List, Optional

from .ui_components import Button, Toggle, BG_COLOR, TEXT_COLOR, ACCENT_COLOR, DANGER_COLOR


BUTTON_WIDTH = 220
BUTTON_HEIGHT = 56
BUTTON_GAP = 24


class ButtonScreen:
    """
    A titled screen with a vertical stack of centred buttons.

    Layout:
    +------------------------------+
    |            TITLE             |
    |           subtitle           |
    |          [button 1]          |
    |          [button 2]          |
    +------------------------------+
    """

    title = ""
    title_color = ACCENT_COLOR

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.buttons: Dict[str, Button] = {}
        self._title_font = None
        self._text_font = None

    def add_button(self, action: str, text: str, hotkey: Optional[int] = None) -> Button:
        button = Button(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT, text, hotkey=hotkey)
        self.buttons[action] = button
        self._layout()
        return button

    def _first_button_y(self) -> int:
        return self.height // 2 - 20

    def _layout(self) -> None:
        x = self.width // 2 - BUTTON_WIDTH // 2
        y = self._first_button_y()
        for button in self.buttons.values():
            button.set_position(x, y)
            y += BUTTON_HEIGHT + BUTTON_GAP

    @property
    def title_font(self):
        if self._title_font is None:
            self._title_font = pygame.font.Font(None, 80)
        return self._title_font

    @property
    def text_font(self):
        if self._text_font is None:
            self._text_font = pygame.font.Font(None, 36)
        return self._text_font

    def subtitle_lines(self) -> List[str]:
        return []

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """
        Handle pygame event.

        Returns:
            The action name of the activated button, or None
        """
        for action, button in self.buttons.items():
            if button.handle_event(event):
                return action
        return None

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BG_COLOR)
        cx = self.width // 2

        title = self.title_font.render(self.title, True, self.title_color)
        surface.blit(title, title.get_rect(centerx=cx, y=self.height // 6))

        y = self.height // 6 + 90
        for line in self.subtitle_lines():
            text = self.text_font.render(line, True, TEXT_COLOR)
            surface.blit(text, text.get_rect(centerx=cx, y=y))
            y += 40

        for button in self.buttons.values():
            button.draw(surface)


class MenuScreen(ButtonScreen):
    """Main menu: Start, Settings, Quit."""

    title = "STARFALL"

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.add_button("start", "Start", hotkey=pygame.K_RETURN)
        self.add_button("settings", "Settings")
        self.add_button("quit", "Quit", hotkey=pygame.K_ESCAPE)

    def subtitle_lines(self) -> List[str]:
        return ["Arrow keys to move, Space to fire"]


class GameOverScreen(ButtonScreen):
    """Final score with Replay and Menu."""

    title = "GAME OVER"
    title_color = DANGER_COLOR

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.final_score = 0
        self.add_button("replay", "Replay", hotkey=pygame.K_RETURN)
        self.add_button("menu", "Menu", hotkey=pygame.K_ESCAPE)

    def subtitle_lines(self) -> List[str]:
        return [f"Final score: {self.final_score}"]


class SettingsScreen(ButtonScreen):
    """Sound and music toggles plus Back."""

    title = "SETTINGS"

    def __init__(
        self,
        width: int,
        height: int,
        sound_enabled: bool = True,
        music_enabled: bool = True,
        on_sound_change: Optional[Callable[[bool], None]] = None,
        on_music_change: Optional[Callable[[bool], None]] = None,
    ):
        super().__init__(width, height)
        toggle_x = width // 2 - 80
        self.sound_toggle = Toggle(
            toggle_x, height // 3, "Sound effects", sound_enabled, on_sound_change
        )
        self.music_toggle = Toggle(
            toggle_x, height // 3 + 50, "Music", music_enabled, on_music_change
        )
        self.add_button("back", "Back", hotkey=pygame.K_ESCAPE)

    def _first_button_y(self) -> int:
        return self.height // 3 + 130

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        self.sound_toggle.handle_event(event)
        self.music_toggle.handle_event(event)
        return super().handle_event(event)

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)
        self.sound_toggle.draw(surface)
        self.music_toggle.draw(surface)
