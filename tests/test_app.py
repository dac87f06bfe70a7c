"""
Tests for the pygame host app and the play script, with pygame mocked.
"""

from unittest.mock import MagicMock

import pytest


def key(pygame, event_type, code):
    return MagicMock(type=event_type, key=code)


@pytest.fixture
def app(mock_pygame_module, mock_screen, monkeypatch, tmp_path):
    """App on a mock surface with no assets and no queued events."""
    from starfall.app import ShooterApp
    from starfall.utils.config_loader import Config

    monkeypatch.setattr(mock_pygame_module.event, "get", MagicMock(return_value=[]))
    config = Config()
    config.game.enemy_fire_rate = 0.0
    config.audio.assets_dir = str(tmp_path)
    config.visualization.assets_dir = str(tmp_path)
    return ShooterApp(config, seed=1, screen=mock_screen)


class TestShooterApp:
    """Tests for ShooterApp screen routing and input mapping."""

    def test_starts_on_menu(self, app):
        """Test the app opens on the menu without a session."""
        from starfall.games.shooter.session import Screen

        assert app.game.screen == Screen.MENU
        assert not app.loop.running

    def test_enter_starts_game(self, app, mock_pygame_module):
        """Test Enter on the menu starts a session and the loop."""
        from starfall.games.shooter.session import Screen

        app.handle_event(key(mock_pygame_module, mock_pygame_module.KEYDOWN, mock_pygame_module.K_RETURN))

        assert app.game.screen == Screen.PLAYING
        assert app.loop.running

    def test_arrow_keys(self, app, mock_pygame_module):
        """Test arrows move and a release only stops its own direction."""
        pg = mock_pygame_module
        app.start_game()
        player = app.game.session.player

        app.handle_event(key(pg, pg.KEYDOWN, pg.K_LEFT))
        assert player.speed_x == -5

        app.handle_event(key(pg, pg.KEYUP, pg.K_RIGHT))
        assert player.speed_x == -5

        app.handle_event(key(pg, pg.KEYUP, pg.K_LEFT))
        assert player.speed_x == 0

    def test_space_fires(self, app, mock_pygame_module):
        """Test Space spawns a bullet."""
        pg = mock_pygame_module
        app.start_game()

        app.handle_event(key(pg, pg.KEYDOWN, pg.K_SPACE))

        assert len(app.game.session.player_bullets) == 1

    def test_escape_returns_to_menu(self, app, mock_pygame_module):
        """Test Escape while playing stops the loop and shows the menu."""
        from starfall.games.shooter.session import Screen

        pg = mock_pygame_module
        app.start_game()

        app.handle_event(key(pg, pg.KEYDOWN, pg.K_ESCAPE))

        assert app.game.screen == Screen.MENU
        assert not app.loop.running

    def test_quit_event(self, app, mock_pygame_module):
        """Test closing the window ends the run loop."""
        app.running = True

        app.handle_event(MagicMock(type=mock_pygame_module.QUIT))

        assert app.running is False

    def test_settings_and_back(self, app, mock_pygame_module):
        """Test the settings screen returns to the menu on Escape."""
        from starfall.games.shooter.session import Screen

        pg = mock_pygame_module
        app.show_settings()
        assert app.game.screen == Screen.SETTINGS

        app.handle_event(key(pg, pg.KEYDOWN, pg.K_ESCAPE))

        assert app.game.screen == Screen.MENU

    def test_run_frame_game_over(self, app):
        """Test a fatal frame moves to the game-over screen with the score."""
        from starfall.games.shooter.entities import Enemy
        from starfall.games.shooter.populations import EnemyFormation
        from starfall.games.shooter.session import Screen

        app.start_game()
        app.game.session.score = 70
        app.game.session.lives = 1
        app.game.session.enemies = EnemyFormation([Enemy(x=380, y=520, width=40, height=40)])

        app.run_frame()

        assert app.game.screen == Screen.GAME_OVER
        assert app.game_over_screen.final_score == 70
        assert not app.loop.running

    def test_replay_after_game_over(self, app, mock_pygame_module):
        """Test Enter on the game-over screen starts a fresh session."""
        from starfall.games.shooter.session import Screen

        pg = mock_pygame_module
        app.game.show_screen(Screen.GAME_OVER)

        app.handle_event(key(pg, pg.KEYDOWN, pg.K_RETURN))

        assert app.game.screen == Screen.PLAYING
        assert app.game.score == 0

    def test_mute(self, mock_pygame_module, mock_screen, tmp_path):
        """Test --mute starts with both audio channels off."""
        from starfall.app import ShooterApp
        from starfall.utils.config_loader import Config

        config = Config()
        config.audio.assets_dir = str(tmp_path)

        app = ShooterApp(config, mute=True, screen=mock_screen)

        assert not app.audio.sound_enabled
        assert not app.audio.music_enabled
        assert app.settings_screen.sound_toggle.state is False


class TestPlayScript:
    """Tests for scripts/play.py argument handling."""

    def test_parse_args_defaults(self, mock_pygame_module):
        """Test defaults leave everything to the config file."""
        import play

        args = play.parse_args([])

        assert args.config is None
        assert args.fps is None
        assert args.mute is False
        assert args.seed is None

    def test_parse_args_options(self, mock_pygame_module):
        """Test every option is parsed."""
        import play

        args = play.parse_args(["-c", "x.yaml", "--fps", "30", "--mute", "--seed", "7"])

        assert (args.config, args.fps, args.mute, args.seed) == ("x.yaml", 30, True, 7)

    def test_invalid_fps_exits(self, mock_pygame_module, tmp_path):
        """Test a non-positive --fps exits with an error."""
        import play

        with pytest.raises(SystemExit) as exc:
            play.main(["--config", str(tmp_path / "none.yaml"), "--fps", "0"])

        assert exc.value.code == 1

    def test_invalid_config_exits(self, mock_pygame_module, tmp_path):
        """Test a malformed config exits with an error."""
        import play

        path = tmp_path / "bad.yaml"
        path.write_text("game:\n  width: -5\n")

        with pytest.raises(SystemExit) as exc:
            play.main(["--config", str(path)])

        assert exc.value.code == 1
