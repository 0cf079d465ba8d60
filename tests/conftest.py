"""
Pytest configuration and fixtures for the Space Invaders engine tests.

Provides random sources with fixed outcomes so alien fire can be switched
off (or forced on) and the simulation stays deterministic.
"""

import random
import sys
from pathlib import Path

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


class FixedRandom(random.Random):
    """random.Random whose random() always returns the same value."""

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def never_fire_rng():
    """Random source under which no alien ever fires."""
    return FixedRandom(0.999)


@pytest.fixture
def always_fire_rng():
    """Random source under which every alien fires every tick."""
    return FixedRandom(0.0)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def quiet_field(never_fire_rng):
    """A fresh play field where the aliens hold their fire."""
    from invaders.engine import PlayField

    return PlayField(rng=never_fire_rng)


@pytest.fixture
def config_dir(tmp_path):
    """Create a temporary config directory with default and game files."""
    config_dir = tmp_path / "config"
    (config_dir / "games").mkdir(parents=True)

    (config_dir / "default.yaml").write_text(
        "game:\n"
        "  seed: 7\n"
        "  player_start_lives: 3\n"
        "session:\n"
        "  tick_interval_ms: 34\n"
        "rewards:\n"
        "  per_point: 0.1\n"
        "  death: -10.0\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    (config_dir / "games" / "space_invaders.yaml").write_text(
        "game:\n"
        "  player_start_lives: 5\n"
        "rewards:\n"
        "  death: -20.0\n"
    )

    return config_dir
