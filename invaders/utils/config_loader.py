"""
Configuration Loader - Load and validate configuration from YAML.

Supports hierarchical configuration:
- config/default.yaml - Global settings
- config/games/{game_id}.yaml - Per-game settings

Game-specific settings override defaults.
"""
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict
from copy import deepcopy

from ..game.config import SpaceInvadersConfig


@dataclass
class GameConfig:
    """Simulation settings."""
    seed: Optional[int] = None
    player_start_lives: int = 3
    speed: int = 1
    end_on_clear: bool = True


@dataclass
class SessionConfig:
    """Pacing of an interactive session."""
    tick_interval_ms: int = 34


@dataclass
class RewardsConfig:
    """Reward shaping configuration."""
    per_point: float = 0.1
    death: float = -10.0
    game_over: float = -50.0
    wave_clear: float = 20.0
    step_penalty: float = -0.001


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    rewards: RewardsConfig = field(default_factory=RewardsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_game_config(self) -> SpaceInvadersConfig:
        """Flatten into the config object the game modules take."""
        return SpaceInvadersConfig.from_dict({
            **asdict(self.game),
            "tick_interval_ms": self.session.tick_interval_ms,
            "rewards": asdict(self.rewards),
        })


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _build_config(data: Dict) -> Config:
    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], GameConfig)

    if 'session' in data:
        config.session = _dict_to_dataclass(data['session'], SessionConfig)

    if 'rewards' in data:
        config.rewards = _dict_to_dataclass(data['rewards'], RewardsConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to project root config.yaml)

    Returns:
        Config object with all settings
    """
    if config_path is None:
        possible_paths = [
            Path("config.yaml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]

        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break

    if config_path is None or not Path(config_path).exists():
        print("[Config] No config file found, using defaults")
        return Config()

    data = _load_yaml_file(Path(config_path))
    return _build_config(data)


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


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_dir() -> Path:
    """Find the config directory."""
    possible_paths = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]

    for path in possible_paths:
        if path.exists() and path.is_dir():
            return path

    return Path(__file__).parent.parent.parent / "config"


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    return data if data else {}


def load_game_config(game_id: str = "space_invaders", config_dir: Optional[Path] = None) -> Config:
    """
    Load configuration for a specific game.

    Merges default settings with game-specific settings.

    Args:
        game_id: The game identifier
        config_dir: Directory holding default.yaml and games/ (auto-detected if None)

    Returns:
        Config object with merged settings
    """
    config_dir = config_dir if config_dir is not None else _find_config_dir()

    default_data = _load_yaml_file(config_dir / "default.yaml")
    game_data = _load_yaml_file(config_dir / "games" / f"{game_id}.yaml")

    merged_data = _deep_merge(default_data, game_data)

    if not merged_data:
        print(f"[Config] No config found for game '{game_id}', using defaults")
        return Config()

    return _build_config(merged_data)
