"""
Tests for the pygame mixer audio sink with pygame mocked.
"""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def assets(tmp_path):
    """Asset directory with every effect and the music track."""
    for name in ("shoot.wav", "explosion.wav", "game_over.wav", "background_music.mp3"):
        (tmp_path / name).write_bytes(b"data")
    return tmp_path


@pytest.fixture
def music(mock_pygame_module, monkeypatch):
    """Fresh mixer.music mock per test."""
    music = MagicMock()
    monkeypatch.setattr(mock_pygame_module.mixer, "music", music)
    return music


class TestPygameAudioSink:
    """Tests for PygameAudioSink."""

    def test_loads_effects(self, mock_pygame_module, assets):
        """Test each effect file is loaded under its event name."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(assets))

        assert set(sink.effects) == {"shoot", "explosion", "gameOver"}
        assert sink.mixer_ready

    def test_play_effect(self, mock_pygame_module, assets):
        """Test play_effect plays the named sound."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(assets))
        sink.play_effect("explosion")

        sink.effects["explosion"].play.assert_called_once()
        sink.effects["shoot"].play.assert_not_called()

    def test_sound_disabled(self, mock_pygame_module, assets):
        """Test nothing plays while sound is off."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(assets), sound_enabled=False)
        sink.play_effect("shoot")

        sink.effects["shoot"].play.assert_not_called()

    def test_unknown_effect_ignored(self, mock_pygame_module, tmp_path):
        """Test a missing effect is silently skipped."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(tmp_path))
        sink.play_effect("shoot")

        assert sink.effects == {}

    def test_volume_clamped(self, mock_pygame_module, tmp_path):
        """Test volume is kept within [0, 1]."""
        from starfall.games.shooter.audio import PygameAudioSink

        assert PygameAudioSink(assets_dir=str(tmp_path), volume=2.5).volume == 1.0
        assert PygameAudioSink(assets_dir=str(tmp_path), volume=-1).volume == 0.0

    def test_mixer_failure_disables_audio(self, mock_pygame_module, monkeypatch, assets, capsys):
        """Test an unavailable mixer turns both channels off."""
        from starfall.games.shooter.audio import PygameAudioSink

        monkeypatch.setattr(
            mock_pygame_module.mixer, "init",
            MagicMock(side_effect=mock_pygame_module.error("no device")),
        )

        sink = PygameAudioSink(assets_dir=str(assets))
        sink.play_effect("shoot")

        assert not sink.mixer_ready
        assert not sink.sound_enabled
        assert not sink.music_enabled
        assert "[Audio]" in capsys.readouterr().out

    def test_effect_load_failure_disables_sound(self, mock_pygame_module, monkeypatch, assets):
        """Test a broken effect file turns sound off."""
        from starfall.games.shooter.audio import PygameAudioSink

        monkeypatch.setattr(
            mock_pygame_module.mixer, "Sound",
            MagicMock(side_effect=mock_pygame_module.error("corrupt")),
        )

        sink = PygameAudioSink(assets_dir=str(assets))

        assert not sink.sound_enabled
        assert sink.music_enabled


class TestMusic:
    """Tests for background music control."""

    def test_start_music_loops(self, mock_pygame_module, music, assets):
        """Test music restarts from the top and loops forever."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(assets), volume=0.5)
        sink.start_music()

        music.load.assert_called_once_with(str(assets / "background_music.mp3"))
        music.set_volume.assert_called_once_with(0.5)
        music.play.assert_called_once_with(loops=-1)

    def test_missing_track_disables_music(self, mock_pygame_module, music, tmp_path):
        """Test no track means no music."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(tmp_path))
        sink.start_music()

        assert not sink.music_enabled
        music.play.assert_not_called()

    def test_playback_failure_disables_music(self, mock_pygame_module, music, assets):
        """Test a failing track turns music off instead of raising."""
        from starfall.games.shooter.audio import PygameAudioSink

        music.load.side_effect = mock_pygame_module.error("codec")
        sink = PygameAudioSink(assets_dir=str(assets))

        sink.start_music()

        assert not sink.music_enabled

    def test_stop_music_pauses(self, mock_pygame_module, music, assets):
        """Test stop_music pauses the track."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(assets))
        sink.stop_music()

        music.pause.assert_called_once()

    def test_pause_failure_disables_music(self, mock_pygame_module, music, assets, capsys):
        """Test a failing pause turns music off instead of raising."""
        from starfall.games.shooter.audio import PygameAudioSink

        music.pause.side_effect = mock_pygame_module.error("mixer gone")
        sink = PygameAudioSink(assets_dir=str(assets))

        sink.stop_music()

        assert not sink.music_enabled
        assert "[Audio]" in capsys.readouterr().out

    def test_toggle_music(self, mock_pygame_module, music, assets):
        """Test toggling music off pauses and on restarts it."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(assets))

        sink.set_music_enabled(False)
        music.pause.assert_called_once()

        sink.set_music_enabled(True)
        music.play.assert_called_once_with(loops=-1)

    def test_toggle_sound(self, mock_pygame_module, assets):
        """Test toggling sound gates effects."""
        from starfall.games.shooter.audio import PygameAudioSink

        sink = PygameAudioSink(assets_dir=str(assets))
        sink.set_sound_enabled(False)
        sink.play_effect("shoot")

        sink.effects["shoot"].play.assert_not_called()
