"""
Configuration Loader - Load and validate configuration from YAML.

Sections:
- game: gameplay constants (ShooterConfig)
- audio: sound/music flags and asset location
- visualization: window and frame-rate settings
"""
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

from ..games.shooter.config import ShooterConfig


@dataclass
class AudioConfig:
    """Audio settings."""
    sound_enabled: bool = True
    music_enabled: bool = True
    assets_dir: str = "assets"
    volume: float = 1.0


@dataclass
class VisualizationConfig:
    """Window and frame pacing settings."""
    render_fps: int = 60
    scale: float = 1.0
    title: str = "Starfall"
    assets_dir: str = "assets"
    star_count: int = 100


@dataclass
class Config:
    """Complete application configuration."""
    game: ShooterConfig = field(default_factory=ShooterConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping for {cls.__name__}, got {type(data).__name__}")

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Look for config.yaml in the usual places."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
        Path.cwd() / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to project root config.yaml)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If a section is malformed or a value is out of range
    """
    path = Path(config_path) if config_path else _find_config_file()

    if path is None or not path.exists():
        print("[Config] No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], ShooterConfig)

    if 'audio' in data:
        config.audio = _dict_to_dataclass(data['audio'], AudioConfig)

    if 'visualization' in data:
        config.visualization = _dict_to_dataclass(data['visualization'], VisualizationConfig)

    if config.visualization.render_fps <= 0:
        raise ValueError(f"render_fps must be > 0, got {config.visualization.render_fps}")

    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
