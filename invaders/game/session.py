"""
Game session - the input and pacing surface a front end drives.

Raw key-down events are folded into one Instruction plus a shoot flag,
sampled once per tick and cleared after the field has consumed them.
"""

import logging
from enum import IntEnum
from typing import Optional

from ..engine import PlayField, Instruction
from .config import SpaceInvadersConfig

logger = logging.getLogger(__name__)


class GameState(IntEnum):
    """Run state owned by the session, not the simulation."""
    NONE = 0
    RUNNING = 1
    PAUSED = 2


class GameSession:
    """Drives a PlayField from debounced key input at a fixed cadence."""

    KEY_LEFT = "ArrowLeft"
    KEY_RIGHT = "ArrowRight"
    KEY_SHOOT = " "

    def __init__(self, config: Optional[SpaceInvadersConfig] = None):
        self.config = config or SpaceInvadersConfig()
        self.play_field = self._new_field()
        self.instruction = Instruction.NONE
        self.shoot = False
        self.state = GameState.RUNNING

    def _new_field(self) -> PlayField:
        return PlayField(
            seed=self.config.seed,
            lives=self.config.player_start_lives,
            speed=self.config.speed,
        )

    @property
    def tick_interval_ms(self) -> int:
        """Delay between ticks, shortened by the field's speed multiplier."""
        return max(1, self.config.tick_interval_ms // max(1, self.play_field.speed))

    def press(self, key: str) -> None:
        """Record a key-down event; unknown keys are ignored."""
        if key == self.KEY_LEFT:
            self.instruction = Instruction.MOVE_LEFT
        elif key == self.KEY_RIGHT:
            self.instruction = Instruction.MOVE_RIGHT
        elif key == self.KEY_SHOOT:
            self.shoot = True

    def start(self) -> None:
        if self.state == GameState.NONE:
            self.state = GameState.RUNNING

    def toggle_pause(self) -> None:
        if self.state == GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state == GameState.PAUSED:
            self.state = GameState.RUNNING

    def reset(self) -> None:
        """Throw the field away and wait for start()."""
        self.play_field = self._new_field()
        self.instruction = Instruction.NONE
        self.shoot = False
        self.state = GameState.NONE
        logger.info("Session reset")

    def tick(self) -> Optional[bool]:
        """
        Step the field once if running.

        Returns:
            The field's survival flag, or None if no step was taken
        """
        if self.state != GameState.RUNNING:
            return None

        survived = self.play_field.step(self.instruction, self.shoot)
        self.instruction = Instruction.NONE
        self.shoot = False
        return survived
