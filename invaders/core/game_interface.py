"""
Abstract game interface.

Games wrap the simulation with rules about actions, rewards and game over.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Tuple, List


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Space Invaders")
    id: str                             # Unique identifier (e.g., "space_invaders")
    description: str                    # Brief description
    version: str = "1.0.0"
    min_players: int = 1
    max_players: int = 1


class GameInterface(ABC):
    """
    Abstract base class for games.

    Games handle the rules and state management on top of the simulation.
    They are separate from the RL environment wrapper.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def step(self, action: int) -> Tuple[Dict[str, Any], float, bool, Dict[str, Any]]:
        """
        Execute one game step with the given action.

        Args:
            action: The action to take (game-specific encoding)

        Returns:
            Tuple of (state, reward, done, info)
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """Get the current game state as a plain dictionary."""
        pass

    @abstractmethod
    def is_valid_action(self, action: int) -> bool:
        pass

    @property
    @abstractmethod
    def action_space_size(self) -> int:
        pass

    @property
    @abstractmethod
    def action_names(self) -> List[str]:
        """Human-readable names for each action."""
        pass

    def get_score(self) -> int:
        return 0
