"""
Space Invaders game module: rules, RL environment and input session
built on top of the engine.
"""

from .game import SpaceInvadersGame, Action
from .env import SpaceInvadersEnv
from .config import SpaceInvadersConfig
from .session import GameSession, GameState

__all__ = [
    "SpaceInvadersGame",
    "SpaceInvadersEnv",
    "SpaceInvadersConfig",
    "GameSession",
    "GameState",
    "Action",
]
