"""
Space Invaders Environment - Gym-like wrapper implementing EnvInterface.
Provides a 24-dimensional state encoding suitable for neural network input.
"""

import numpy as np
from typing import Tuple, Dict, Any, Optional

from ..core.env_interface import EnvInterface
from ..engine import PlayField, Aliens, Bunker, Cannon
from .game import SpaceInvadersGame, Action
from .config import SpaceInvadersConfig


class SpaceInvadersEnv(EnvInterface):
    """
    Gym-like environment wrapper for the Space Invaders game.

    - reset() -> initial state
    - step(action) -> (next_state, reward, done, info)

    State is a 24-dimensional feature vector encoding the cannon, incoming
    fire, the formation's lowest alien per column and bunker durability.
    """

    ZONES = 3

    def __init__(
        self,
        reward_config: Optional[Dict[str, float]] = None,
        config: Optional[SpaceInvadersConfig] = None,
    ):
        """
        Initialize the environment.

        Args:
            reward_config: Optional reward configuration dictionary
            config: Optional SpaceInvadersConfig object
        """
        game_config = {}
        if config:
            game_config = config.to_dict()
            game_config.pop("rewards", None)
            if reward_config is None:
                reward_config = config.get_reward_config()

        self.game = SpaceInvadersGame(reward_config=reward_config, config=game_config)

    @property
    def state_size(self) -> int:
        """Get the state size (24 features)."""
        return 24

    @property
    def action_size(self) -> int:
        return len(Action)

    def reset(self) -> np.ndarray:
        self.game.reset()
        return self._get_state()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, Dict[str, Any]]:
        _, reward, done, info = self.game.step(action)
        return self._get_state(), reward, done, info

    def _get_state(self) -> np.ndarray:
        """
        Get 24-dimensional state vector.

        Features:
        [0]:     Cannon X position (normalized 0-1)
        [1]:     Lives remaining (normalized 0-1)
        [2-4]:   Nearest alien bullet distance per zone (0-1, 1 = none)
        [5]:     Player bullets in flight (normalized, capped at 1)
        [6]:     Aliens alive ratio (0-1)
        [7-17]:  Lowest alive alien per column (0 = empty column, else y/height)
        [18-21]: Bunker durability ratios (0-1)
        [22]:    Incoming fire aligned with the cannon (0-1)
        [23]:    Column above the cannon still has aliens (0/1)

        Returns:
            State as numpy array of shape (24,)
        """
        field = self.game.play_field
        cannon = field.cannon

        state = np.zeros(self.state_size, dtype=np.float32)
        state[0] = cannon.position.x / (PlayField.WIDTH - Cannon.WIDTH)
        state[1] = field.lives / max(1, self.game.player_start_lives)
        state[2:5] = self._nearest_bullet_per_zone()
        state[5] = min(1.0, sum(1 for b in field.bullets if not b.is_alien_bullet()) / 10.0)
        state[6] = field.aliens.alive_count / len(field.aliens)
        state[7:18] = self._lowest_alien_per_column()
        state[18:22] = self._bunker_ratios()
        state[22] = self._fire_threat()
        state[23] = self._column_above_cannon()
        return state

    def _nearest_bullet_per_zone(self) -> np.ndarray:
        """Normalized distance from the bottom to the lowest alien bullet in each zone."""
        field = self.game.play_field
        zone_width = PlayField.WIDTH / self.ZONES
        distances = np.ones(self.ZONES, dtype=np.float32)

        for bullet in field.bullets:
            if not bullet.is_alien_bullet():
                continue
            zone = min(self.ZONES - 1, int(bullet.position.x // zone_width))
            dist = (PlayField.HEIGHT - bullet.position.y) / PlayField.HEIGHT
            distances[zone] = min(distances[zone], dist)

        return distances

    def _lowest_alien_per_column(self) -> np.ndarray:
        aliens = self.game.play_field.aliens
        lowest = np.zeros(Aliens.COLUMNS, dtype=np.float32)

        for col in range(Aliens.COLUMNS):
            for row in range(Aliens.ROWS - 1, -1, -1):
                alien = aliens.get(col, row)
                if alien is not None:
                    lowest[col] = (alien.position.y + alien.HEIGHT) / PlayField.HEIGHT
                    break

        return lowest

    def _bunker_ratios(self) -> np.ndarray:
        """Remaining durability as ratio of the initial durability."""
        full = sum(sum(row) for row in Bunker.STABILITY)
        return np.array(
            [
                bunker.durability / full if bunker is not None else 0.0
                for bunker in self.game.play_field.bunkers
            ],
            dtype=np.float32,
        )

    def _fire_threat(self) -> float:
        """How close the nearest alien bullet above the cannon is (1 = about to hit)."""
        field = self.game.play_field
        cannon = field.cannon
        threat = 0.0

        for bullet in field.bullets:
            if not bullet.is_alien_bullet():
                continue
            if cannon.position.x <= bullet.position.x < cannon.position.x + Cannon.WIDTH:
                threat = max(threat, bullet.position.y / cannon.position.y)

        return min(1.0, threat)

    def _column_above_cannon(self) -> float:
        field = self.game.play_field
        center = field.cannon.position.x + Cannon.WIDTH // 2
        for alien in field.aliens:
            if alien is not None and alien.position.x <= center < alien.position.x + alien.WIDTH:
                return 1.0
        return 0.0

    def get_game_state(self) -> Dict[str, Any]:
        return self.game.get_state()

    def get_score(self) -> int:
        """Get current game score."""
        return self.game.score

    def seed(self, seed: Optional[int] = None) -> None:
        """Set random seed."""
        if seed is not None:
            self.game.seed(seed)
