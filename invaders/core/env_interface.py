"""
Abstract RL environment interface (Gym-like).
"""

from abc import ABC, abstractmethod
from typing import Tuple, Dict, Any, Optional
import numpy as np


class EnvInterface(ABC):
    """
    Environments wrap games and encode their state as observations.
    """

    @property
    @abstractmethod
    def state_size(self) -> int:
        """
        Dimension of the observation vector.

        Returns:
            Size of the state vector
        """
        pass

    @property
    @abstractmethod
    def action_size(self) -> int:
        pass

    @abstractmethod
    def reset(self) -> np.ndarray:
        """
        Reset the environment to initial state.

        Returns:
            Initial observation as numpy array
        """
        pass

    @abstractmethod
    def step(self, action: int) -> Tuple[np.ndarray, float, bool, Dict[str, Any]]:
        """
        Execute one environment step.

        Args:
            action: The action to take

        Returns:
            Tuple of (observation, reward, done, info)
        """
        pass

    @abstractmethod
    def get_game_state(self) -> Dict[str, Any]:
        pass

    def close(self) -> None:
        """Clean up any resources."""
        pass

    def seed(self, seed: Optional[int] = None) -> None:
        """
        Set random seed for reproducibility.

        Args:
            seed: Random seed value
        """
        pass
