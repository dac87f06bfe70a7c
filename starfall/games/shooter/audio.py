"""
Pygame mixer audio sink.

Sound effects and background music are optional: any mixer or file failure
turns the affected channel off instead of reaching the game loop.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import pygame

from ...core.renderer_interface import AudioInterface


EFFECT_FILES = {
    "shoot": "shoot.wav",
    "explosion": "explosion.wav",
    "gameOver": "game_over.wav",
}
MUSIC_FILE = "background_music.mp3"


class PygameAudioSink(AudioInterface):
    """Plays effects through pygame.mixer.Sound and music through mixer.music."""

    def __init__(
        self,
        assets_dir: str = "assets",
        sound_enabled: bool = True,
        music_enabled: bool = True,
        volume: float = 1.0,
    ):
        self.sound_enabled = sound_enabled
        self.music_enabled = music_enabled
        self.volume = min(max(volume, 0.0), 1.0)
        self.effects: Dict[str, Any] = {}
        self.music_path: Optional[Path] = None
        self.mixer_ready = self._init_mixer()

        if self.mixer_ready:
            self.load_assets(Path(assets_dir))

    def _init_mixer(self) -> bool:
        try:
            pygame.mixer.init()
        except pygame.error as e:
            print(f"[Audio] Mixer unavailable, audio disabled: {e}")
            self.sound_enabled = False
            self.music_enabled = False
            return False
        return True

    def load_assets(self, assets_dir: Path) -> None:
        """Load effects and locate the music track."""
        for name, filename in EFFECT_FILES.items():
            path = assets_dir / filename
            if not path.exists():
                continue
            try:
                sound = pygame.mixer.Sound(str(path))
            except pygame.error as e:
                print(f"[Audio] Failed to load {filename}, sound disabled: {e}")
                self.sound_enabled = False
                continue
            sound.set_volume(self.volume)
            self.effects[name] = sound

        music = assets_dir / MUSIC_FILE
        if music.exists():
            self.music_path = music
        else:
            self.music_enabled = False

    def play_effect(self, name: str) -> None:
        """Play an effect if sound is on and the effect was loaded."""
        if not self.sound_enabled:
            return
        sound = self.effects.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            print(f"[Audio] Could not play {name}: {e}")

    def start_music(self) -> None:
        """Restart background music from the beginning, looping."""
        if not self.music_enabled or self.music_path is None:
            return
        try:
            pygame.mixer.music.load(str(self.music_path))
            pygame.mixer.music.set_volume(self.volume)
            pygame.mixer.music.play(loops=-1)
        except pygame.error as e:
            print(f"[Audio] Background music failed, music disabled: {e}")
            self.music_enabled = False

    def stop_music(self) -> None:
        if not self.mixer_ready:
            return
        try:
            pygame.mixer.music.pause()
        except pygame.error as e:
            print(f"[Audio] Could not pause music, music disabled: {e}")
            self.music_enabled = False

    def set_sound_enabled(self, enabled: bool) -> None:
        self.sound_enabled = enabled

    def set_music_enabled(self, enabled: bool) -> None:
        """Toggle music, starting or pausing the track to match."""
        self.music_enabled = enabled
        if enabled:
            self.start_music()
        else:
            self.stop_music()
