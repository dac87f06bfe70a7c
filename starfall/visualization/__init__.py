from .ui_components import (
    Button, Toggle,
    BG_COLOR, TEXT_COLOR, ACCENT_COLOR, DANGER_COLOR
)
from .screens import ButtonScreen, MenuScreen, SettingsScreen, GameOverScreen

__all__ = [
    "Button",
    "Toggle",
    "ButtonScreen",
    "MenuScreen",
    "SettingsScreen",
    "GameOverScreen",
    "BG_COLOR",
    "TEXT_COLOR",
    "ACCENT_COLOR",
    "DANGER_COLOR",
]
