"""
Aliens and the fixed formation grid that holds them.
"""

import random
from enum import IntEnum
from typing import List, Optional, Iterator, Tuple, Dict, Any

from .bullet import Bullet
from .constants import FIELD_WIDTH
from .geometry import GameObject, Position, in_field
from .results import StepResult, HitResult


class AlienType(IntEnum):
    """Types of aliens with different point values and aggression."""
    MYSTERY = 0
    HARD = 1     # 30 points - top row
    MEDIUM = 2   # 20 points - rows 1-2
    EASY = 3     # 10 points - rows 3-4

    @classmethod
    def from_row(cls, row: int) -> "AlienType":
        """Determine the alien type from its row in the formation."""
        if row == 0:
            return cls.HARD
        if 1 <= row <= 2:
            return cls.MEDIUM
        if 3 <= row <= 4:
            return cls.EASY
        raise ValueError(f"There may only be 5 rows of aliens, got row {row}")

    def points(self, rng: random.Random) -> int:
        """Return point value; the mystery alien is worth a random amount."""
        if self == AlienType.MYSTERY:
            return rng.randrange(10, 100)
        return {
            AlienType.HARD: 30,
            AlienType.MEDIUM: 20,
            AlienType.EASY: 10,
        }[self]

    @property
    def shoot_probability(self) -> float:
        """Chance of firing on any single tick."""
        return {
            AlienType.MYSTERY: 0.0,
            AlienType.HARD: 0.5,
            AlienType.MEDIUM: 0.3,
            AlienType.EASY: 0.2,
        }[self]


class Alien(GameObject):
    """A single alien occupying one slot of the formation."""

    WIDTH = 12
    HEIGHT = 8

    def __init__(self, alien_type: AlienType, position: Position):
        self.alien_type = alien_type
        self.position = position

    def step(self, rng: random.Random) -> StepResult:
        """
        Advance the alien by one tick.

        The mystery alien drifts to the right and leaves play once it is off
        the field. Every other alien stays put and may fire one bullet.
        """
        if self.alien_type == AlienType.MYSTERY:
            self.position = Position(self.position.x + 1, self.position.y)
            return StepResult(survived=in_field(self))

        shots: List[Bullet] = []
        if rng.random() < self.alien_type.shoot_probability:
            shots.append(Bullet.alien_at(
                Position(
                    x=self.position.x + self.WIDTH // 2,
                    y=self.position.y + self.HEIGHT,
                ),
                self.alien_type,
            ))
        return StepResult(survived=True, shots=shots)

    def would_hit(self, bullet: Bullet) -> bool:
        # The bullet's top edge must be inside, so a downward bullet has to
        # fully enter the alien before it registers.
        return self.contains_point(bullet.position)

    def hit(self, bullet: Bullet, rng: random.Random) -> Tuple[HitResult, int]:
        """
        Resolve a bullet hitting this alien.

        Returns:
            Tuple of (hit result, points awarded)
        """
        if bullet.is_alien_bullet():
            return HitResult(survived=True, absorbed_bullet=False), 0
        return HitResult(survived=False, absorbed_bullet=True), self.alien_type.points(rng)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.position.x,
            "y": self.position.y,
            "type": int(self.alien_type),
            "width": self.WIDTH,
            "height": self.HEIGHT,
        }


class Aliens(GameObject):
    """
    Fixed COLUMNS x ROWS formation of alien slots.

    Slots are stored column-major in a flat list; a destroyed alien leaves
    an empty (None) slot so indices stay stable for iteration and rendering.
    """

    COLUMNS = 11
    ROWS = 5
    GRID_GAP = 4
    TOP = 32

    WIDTH = Alien.WIDTH * COLUMNS + (COLUMNS - 1) * GRID_GAP
    HEIGHT = Alien.HEIGHT * ROWS + (ROWS - 1) * GRID_GAP

    def __init__(self):
        self.position = Position(x=(FIELD_WIDTH - self.WIDTH) // 2, y=self.TOP)
        self.slots: List[Optional[Alien]] = []

        for col in range(self.COLUMNS):
            for row in range(self.ROWS):
                self.slots.append(Alien(
                    AlienType.from_row(row),
                    Position(
                        x=self.position.x + col * (Alien.WIDTH + self.GRID_GAP),
                        y=self.position.y + row * (Alien.HEIGHT + self.GRID_GAP),
                    ),
                ))

    @classmethod
    def index(cls, col: int, row: int) -> int:
        """Flat slot index for a grid cell."""
        if not (0 <= col < cls.COLUMNS and 0 <= row < cls.ROWS):
            raise IndexError(f"No alien slot at column {col}, row {row}")
        return col * cls.ROWS + row

    def get(self, col: int, row: int) -> Optional[Alien]:
        return self.slots[self.index(col, row)]

    def __iter__(self) -> Iterator[Optional[Alien]]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    @property
    def alive_count(self) -> int:
        return sum(1 for alien in self.slots if alien is not None)

    def step(self, rng: random.Random) -> StepResult:
        """
        Step every living alien and gather the bullets they fired.

        Returns:
            StepResult whose `survived` is True while at least one alien lives
        """
        one_survived = False
        shots: List[Bullet] = []

        for i, alien in enumerate(self.slots):
            if alien is None:
                continue
            result = alien.step(rng)
            if result.survived:
                one_survived = True
                shots.extend(result.shots)
            else:
                self.slots[i] = None

        return StepResult(survived=one_survived, shots=shots)

    def would_hit(self, bullet: Bullet) -> Optional[int]:
        """Return the slot index of the first alien the bullet would hit."""
        for i, alien in enumerate(self.slots):
            if alien is not None and alien.would_hit(bullet):
                return i
        return None

    def hit(self, index: int, bullet: Bullet, rng: random.Random) -> Tuple[HitResult, int]:
        """Apply a hit to the alien in a slot, clearing it if destroyed."""
        alien = self.slots[index]
        if alien is None:
            return HitResult(survived=False, absorbed_bullet=False), 0

        result, points = alien.hit(bullet, rng)
        if not result.survived:
            self.slots[index] = None
        return result, points

    def to_list(self) -> List[List[Optional[Dict[str, Any]]]]:
        """Snapshot as rows of columns, None for empty slots."""
        return [
            [
                alien.to_dict() if alien is not None else None
                for alien in (self.get(col, row) for col in range(self.COLUMNS))
            ]
            for row in range(self.ROWS)
        ]
