"""
Starfall App - pygame host for the shooter.

Owns the window, maps keyboard input onto game inputs, routes between the
menu, settings, playing and game-over screens, and paces frames.
"""
import random
from typing import Optional

import pygame

from .games.shooter.audio import PygameAudioSink
from .games.shooter.events import GameEvent
from .games.shooter.frame_loop import FrameLoop
from .games.shooter.game import InputAction, ShooterGame
from .games.shooter.renderer import ShooterRenderer
from .games.shooter.session import Screen
from .utils.config_loader import Config
from .visualization.screens import GameOverScreen, MenuScreen, SettingsScreen


KEY_ACTIONS = {
    pygame.K_LEFT: InputAction.MOVE_LEFT,
    pygame.K_RIGHT: InputAction.MOVE_RIGHT,
    pygame.K_SPACE: InputAction.FIRE,
}


class ShooterApp:
    """
    Windowed shooter.

    The simulation only runs while the game is on the PLAYING screen; every
    other screen is a static menu drawn each frame.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        seed: Optional[int] = None,
        mute: bool = False,
        screen: Optional[pygame.Surface] = None,
    ):
        """
        Initialize pygame, sinks and screens.

        Args:
            config: Application configuration (defaults to Config())
            seed: Seed for enemy fire and the starfield
            mute: Start with sound effects and music off
            screen: Optional existing surface to draw on
        """
        self.config = config or Config()
        game_config = self.config.game
        vis = self.config.visualization
        audio = self.config.audio

        pygame.init()
        self.window_size = (int(game_config.width * vis.scale), int(game_config.height * vis.scale))
        self.owns_screen = screen is None
        if screen is None:
            self.screen = pygame.display.set_mode(self.window_size)
            pygame.display.set_caption(vis.title)
        else:
            self.screen = screen

        self.game = ShooterGame(game_config, rng=random.Random(seed), clock=pygame.time.get_ticks)

        self.renderer = ShooterRenderer(
            game_config.width,
            game_config.height,
            assets_dir=vis.assets_dir,
            star_count=vis.star_count,
            seed=seed,
        )
        self.renderer.set_render_area(0, 0, *self.window_size)

        self.audio = PygameAudioSink(
            assets_dir=audio.assets_dir,
            sound_enabled=audio.sound_enabled and not mute,
            music_enabled=audio.music_enabled and not mute,
            volume=audio.volume,
        )

        self.loop = FrameLoop(self.game, self.renderer, self.screen, self.audio)

        width, height = self.window_size
        self.menu_screen = MenuScreen(width, height)
        self.settings_screen = SettingsScreen(
            width,
            height,
            sound_enabled=self.audio.sound_enabled,
            music_enabled=self.audio.music_enabled,
            on_sound_change=self.audio.set_sound_enabled,
            on_music_change=self.audio.set_music_enabled,
        )
        self.game_over_screen = GameOverScreen(width, height)

        self.clock = pygame.time.Clock()
        self.fps = vis.render_fps
        self.running = False

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_game(self) -> None:
        """Fresh session, music from the top, loop running."""
        self.game.start_game(pygame.time.get_ticks())
        self.audio.start_music()
        self.loop.start()
        print(f"[Game] Started at level {self.game.level} with {self.game.lives} lives")

    def show_menu(self) -> None:
        """Back to the menu; tears down the running loop."""
        self.loop.stop()
        self.game.show_screen(Screen.MENU)

    def show_settings(self) -> None:
        self.game.show_screen(Screen.SETTINGS)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event according to the current screen."""
        if event.type == pygame.QUIT:
            self.running = False
            return

        screen = self.game.screen
        if screen == Screen.PLAYING:
            self._handle_play_event(event)
        elif screen == Screen.MENU:
            action = self.menu_screen.handle_event(event)
            if action == "start":
                self.start_game()
            elif action == "settings":
                self.show_settings()
            elif action == "quit":
                self.running = False
        elif screen == Screen.SETTINGS:
            if self.settings_screen.handle_event(event) == "back":
                self.show_menu()
        elif screen == Screen.GAME_OVER:
            action = self.game_over_screen.handle_event(event)
            if action == "replay":
                self.start_game()
            elif action == "menu":
                self.show_menu()

    def _handle_play_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.show_menu()
                return
            action = KEY_ACTIONS.get(event.key)
            if action is not None:
                self.game.press(action, now=pygame.time.get_ticks())
        elif event.type == pygame.KEYUP:
            action = KEY_ACTIONS.get(event.key)
            if action is not None:
                self.game.release(action)

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------

    def run_frame(self) -> None:
        """Process input, then either step the game or draw the current menu."""
        for event in pygame.event.get():
            self.handle_event(event)

        if self.game.screen == Screen.PLAYING:
            result = self.loop.tick(pygame.time.get_ticks())
            if result is not None:
                if GameEvent.LEVEL_UP in result.events:
                    print(f"[Game] Level {self.game.level}")
                if result.game_over:
                    self.game_over_screen.final_score = self.game.score
                    print(f"[Game] Game over - final score {self.game.score}")
        elif self.game.screen == Screen.MENU:
            self.menu_screen.draw(self.screen)
        elif self.game.screen == Screen.SETTINGS:
            self.settings_screen.draw(self.screen)
        elif self.game.screen == Screen.GAME_OVER:
            self.game_over_screen.draw(self.screen)

        pygame.display.flip()
        self.clock.tick(self.fps)

    def run(self) -> int:
        """
        Run until the window is closed or Quit is chosen.

        Returns:
            The score of the last session
        """
        self.running = True
        while self.running:
            self.run_frame()

        self.close()
        return self.game.score

    def close(self) -> None:
        """Clean up resources."""
        self.loop.stop()
        if self.owns_screen:
            pygame.quit()
