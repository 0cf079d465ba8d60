"""
PlayField - the single entry point of the simulation.

Owns the cannon, the alien formation, the bunkers and the live bullets,
and advances all of them one tick at a time.
"""

import logging
import random
from enum import IntEnum
from typing import List, Optional, Tuple, Dict, Any

from .alien import Aliens
from .bullet import Bullet
from .bunker import Bunkers
from .cannon import Cannon
from .constants import FIELD_WIDTH, FIELD_HEIGHT, PLAYER_LIVES
from .geometry import in_field
from .results import Target

logger = logging.getLogger(__name__)


class Instruction(IntEnum):
    """Movement input sampled once per tick."""
    NONE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2


class PlayField:
    """
    The whole game world.

    A PlayField is created once per game and replaced wholesale on reset.
    Randomness (alien fire, mystery points) comes from an injected
    random.Random so a seeded field replays identically.
    """

    WIDTH = FIELD_WIDTH
    HEIGHT = FIELD_HEIGHT
    PLAYER_LIVES = PLAYER_LIVES

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        lives: int = PLAYER_LIVES,
        speed: int = 1,
    ):
        """
        Initialize a fresh field.

        Args:
            rng: Random source used when step() is not given one
            seed: Seed for a new random source if rng is not provided
            lives: Starting lives
            speed: Tick-rate multiplier reported to the caller
        """
        self.rng = rng if rng is not None else random.Random(seed)

        self._aliens = Aliens()
        self._bunkers = Bunkers()
        self._bullets: List[Bullet] = []
        self._cannon = Cannon()

        self._score = 0
        self._lives = max(0, lives)
        self._speed = speed
        self._aliens_alive = True

    @property
    def aliens(self) -> Aliens:
        return self._aliens

    @property
    def bunkers(self) -> Bunkers:
        return self._bunkers

    @property
    def bullets(self) -> Tuple[Bullet, ...]:
        return tuple(self._bullets)

    @property
    def cannon(self) -> Cannon:
        return self._cannon

    @property
    def score(self) -> int:
        return self._score

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def aliens_alive(self) -> bool:
        """
        Whether at least one alien survived the last tick.

        The field does not act on a cleared formation; what happens next is
        up to the caller.
        """
        return self._aliens_alive

    @property
    def is_over(self) -> bool:
        return self._lives == 0

    def step(
        self,
        instruction: Instruction = Instruction.NONE,
        shoot: bool = False,
        rng: Optional[random.Random] = None,
    ) -> bool:
        """
        Advance the simulation by one tick.

        Args:
            instruction: Cannon movement for this tick
            shoot: Whether the cannon fires this tick
            rng: Random source for this tick (defaults to the field's own)

        Returns:
            False if the cannon was hit during this tick, True otherwise
        """
        rng = rng if rng is not None else self.rng
        logger.debug("step: %s | shoot: %s", instruction.name, shoot)

        if instruction == Instruction.MOVE_LEFT:
            self._cannon.move_left()
        elif instruction == Instruction.MOVE_RIGHT:
            self._cannon.move_right()

        if shoot:
            self._bullets.append(self._cannon.shoot())

        aliens_result = self._aliens.step(rng)
        if self._aliens_alive and not aliens_result.survived:
            logger.info("All aliens destroyed (score %d)", self._score)
        self._aliens_alive = aliens_result.survived

        survived = True
        live: List[Bullet] = []

        for bullet in self._bullets:
            # Out of the field: a wasted shot costs a point
            if not bullet.step() or not in_field(bullet):
                self._score -= 1
                continue

            target = self._find_target(bullet)
            if target is None:
                live.append(bullet)
                continue

            kind, index = target
            if kind == Target.CANNON:
                self._lives = max(0, self._lives - 1)
                survived = False
                logger.info("Cannon hit, %d lives left", self._lives)
            elif not self._resolve(kind, index, bullet, rng):
                live.append(bullet)

        live.extend(aliens_result.shots)
        self._bullets = live

        logger.debug("player survived: %s", survived)
        return survived

    def _find_target(self, bullet: Bullet) -> Optional[Tuple[Target, int]]:
        """Find what a bullet hits, tested in fixed order: first match wins."""
        if self._cannon.would_hit(bullet):
            return Target.CANNON, 0

        alien_index = self._aliens.would_hit(bullet)
        if alien_index is not None:
            return Target.ALIEN, alien_index

        bunker_index = self._bunkers.would_hit(bullet)
        if bunker_index is not None:
            return Target.BUNKER, bunker_index

        return None

    def _resolve(self, kind: Target, index: int, bullet: Bullet, rng: random.Random) -> bool:
        """
        Apply a hit on an alien or bunker.

        Returns:
            True if the bullet was absorbed
        """
        if kind == Target.ALIEN:
            result, points = self._aliens.hit(index, bullet, rng)
            self._score += points
            return result.absorbed_bullet

        return self._bunkers.hit(index, bullet).absorbed_bullet

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of everything a presentation layer needs."""
        return {
            "cannon": self._cannon.to_dict(),
            "aliens": self._aliens.to_list(),
            "bunkers": self._bunkers.to_list(),
            "bullets": [bullet.to_dict() for bullet in self._bullets],
            "score": self._score,
            "lives": self._lives,
            "speed": self._speed,
            "aliens_alive": self._aliens.alive_count,
            "width": self.WIDTH,
            "height": self.HEIGHT,
        }
