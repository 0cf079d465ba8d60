"""
Space Invaders game configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class SpaceInvadersConfig:
    """Configuration for the Space Invaders game wrapper."""

    # Simulation
    seed: Optional[int] = None
    player_start_lives: int = 3
    speed: int = 1

    # Pacing (about 30 ticks per second)
    tick_interval_ms: int = 34

    # Treat a cleared formation as the end of the game
    end_on_clear: bool = True

    # Rewards
    reward_per_point: float = 0.1
    reward_death: float = -10.0
    reward_game_over: float = -50.0
    reward_wave_clear: float = 20.0
    reward_step_penalty: float = -0.001

    def get_reward_config(self) -> Dict[str, float]:
        """Get reward configuration dictionary."""
        return {
            "per_point": self.reward_per_point,
            "death": self.reward_death,
            "game_over": self.reward_game_over,
            "wave_clear": self.reward_wave_clear,
            "step_penalty": self.reward_step_penalty,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "seed": self.seed,
            "player_start_lives": self.player_start_lives,
            "speed": self.speed,
            "tick_interval_ms": self.tick_interval_ms,
            "end_on_clear": self.end_on_clear,
            "rewards": self.get_reward_config(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpaceInvadersConfig":
        """Create config from dictionary."""
        rewards = data.get("rewards", {})
        return cls(
            seed=data.get("seed"),
            player_start_lives=data.get("player_start_lives", 3),
            speed=data.get("speed", 1),
            tick_interval_ms=data.get("tick_interval_ms", 34),
            end_on_clear=data.get("end_on_clear", True),
            reward_per_point=rewards.get("per_point", 0.1),
            reward_death=rewards.get("death", -10.0),
            reward_game_over=rewards.get("game_over", -50.0),
            reward_wave_clear=rewards.get("wave_clear", 20.0),
            reward_step_penalty=rewards.get("step_penalty", -0.001),
        )
