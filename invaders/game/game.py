"""
Space Invaders Game - rules on top of the PlayField simulation.

Decodes discrete actions into cannon input, turns score changes into
rewards and decides when a game is over.
"""

import logging
import random
from enum import IntEnum
from typing import List, Tuple, Optional, Dict, Any

from ..core.game_interface import GameInterface, GameMetadata
from ..engine import PlayField, Instruction

logger = logging.getLogger(__name__)


class Action(IntEnum):
    """Actions combining movement and firing."""
    STAY_NO_FIRE = 0
    STAY_FIRE = 1
    LEFT_NO_FIRE = 2
    LEFT_FIRE = 3
    RIGHT_NO_FIRE = 4
    RIGHT_FIRE = 5

    @property
    def instruction(self) -> Instruction:
        if self in (Action.LEFT_NO_FIRE, Action.LEFT_FIRE):
            return Instruction.MOVE_LEFT
        if self in (Action.RIGHT_NO_FIRE, Action.RIGHT_FIRE):
            return Instruction.MOVE_RIGHT
        return Instruction.NONE

    @property
    def fire(self) -> bool:
        return self in (Action.STAY_FIRE, Action.LEFT_FIRE, Action.RIGHT_FIRE)


class SpaceInvadersGame(GameInterface):
    """
    Space Invaders game logic implementing GameInterface.

    The PlayField itself never ends a game; this wrapper does, either when
    the cannon has no lives left or (with end_on_clear) when the whole
    alien formation has been destroyed.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about Space Invaders game."""
        return GameMetadata(
            name="Space Invaders",
            id="space_invaders",
            description="Classic arcade shooter - destroy the alien formation before it destroys you",
            version="1.0.0",
        )

    def __init__(
        self,
        reward_config: Optional[Dict[str, float]] = None,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the game.

        Args:
            reward_config: Optional reward configuration dictionary
            config: Optional full configuration dictionary
            rng: Optional random source shared by every field this game creates
        """
        config = config or {}
        self.player_start_lives = config.get("player_start_lives", PlayField.PLAYER_LIVES)
        self.speed = config.get("speed", 1)
        self.end_on_clear = config.get("end_on_clear", True)

        reward_config = reward_config or {}
        self.reward_per_point = reward_config.get("per_point", 0.1)
        self.reward_death = reward_config.get("death", -10.0)
        self.reward_game_over = reward_config.get("game_over", -50.0)
        self.reward_wave_clear = reward_config.get("wave_clear", 20.0)
        self.reward_step_penalty = reward_config.get("step_penalty", -0.001)

        self.rng = rng if rng is not None else random.Random(config.get("seed"))

        self.play_field: PlayField = PlayField(rng=self.rng)
        self.frame_count: int = 0
        self.game_over: bool = False
        self.cleared: bool = False

        self.reset()

    @property
    def action_space_size(self) -> int:
        """Number of possible actions (6 combinations of movement and firing)."""
        return len(Action)

    @property
    def action_names(self) -> List[str]:
        return [
            "Stay",
            "Stay+Fire",
            "Left",
            "Left+Fire",
            "Right",
            "Right+Fire",
        ]

    @property
    def score(self) -> int:
        return self.play_field.score

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the random source used by the current and future fields."""
        self.rng.seed(seed)

    def reset(self) -> Dict[str, Any]:
        """
        Replace the play field and return the initial state.

        Returns:
            Dictionary containing the initial game state
        """
        self.play_field = PlayField(
            rng=self.rng,
            lives=self.player_start_lives,
            speed=self.speed,
        )
        self.frame_count = 0
        self.game_over = False
        self.cleared = False
        logger.info("New game started")
        return self.get_state()

    def step(self, action: int) -> Tuple[Dict[str, Any], float, bool, Dict[str, Any]]:
        """
        Execute one game step.

        Args:
            action: 0-5 representing movement and firing combinations

        Returns:
            Tuple of (state, reward, done, info)
        """
        if self.game_over:
            return self.get_state(), 0.0, True, {"score": self.score}

        decoded = Action(action)
        self.frame_count += 1
        score_before = self.play_field.score

        survived = self.play_field.step(decoded.instruction, decoded.fire)

        reward = self.reward_step_penalty
        reward += (self.play_field.score - score_before) * self.reward_per_point
        if not survived:
            reward += self.reward_death

        if self.play_field.is_over:
            self.game_over = True
            reward += self.reward_game_over
            logger.info("Game over after %d frames, score %d", self.frame_count, self.score)
        elif not self.play_field.aliens_alive and not self.cleared:
            self.cleared = True
            reward += self.reward_wave_clear
            if self.end_on_clear:
                self.game_over = True

        info = {
            "score": self.score,
            "lives": self.play_field.lives,
            "survived": survived,
            "cleared": self.cleared,
        }
        return self.get_state(), reward, self.game_over, info

    def is_valid_action(self, action: int) -> bool:
        """Check if an action is valid."""
        return 0 <= action < len(Action)

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for rendering or AI."""
        state = self.play_field.to_dict()
        state.update({
            "game_over": self.game_over,
            "cleared": self.cleared,
            "frame": self.frame_count,
            "total_aliens": len(self.play_field.aliens),
        })
        return state

    def get_score(self) -> int:
        """Get current game score."""
        return self.score
