"""
Destructible bunkers shielding the cannon.
"""

from typing import List, Optional, Iterator, Tuple, Dict, Any

from .bullet import Bullet
from .cannon import Cannon
from .constants import FIELD_WIDTH, FIELD_HEIGHT
from .geometry import GameObject, Position
from .results import HitResult


class Bunker(GameObject):
    """
    A bunker split into a 3x3 grid of cells, each with its own durability.

    The bunker is destroyed once every cell is worn down to zero.
    """

    WIDTH = 24
    HEIGHT = 18
    CELLS = 3
    CELL_WIDTH = WIDTH // CELLS
    CELL_HEIGHT = HEIGHT // CELLS

    # Indexed [row][col]; the zeros are the arch
    STABILITY = (
        (2, 2, 2),
        (2, 0, 2),
        (2, 0, 2),
    )

    def __init__(self, position: Position):
        self.position = position
        self.stability: List[List[int]] = [list(row) for row in self.STABILITY]

    @property
    def is_destroyed(self) -> bool:
        return all(cell == 0 for row in self.stability for cell in row)

    @property
    def durability(self) -> int:
        """Total remaining hit points over all cells."""
        return sum(sum(row) for row in self.stability)

    def cell_for(self, bullet: Bullet) -> Optional[Tuple[int, int]]:
        """
        Map a bullet's contact point to a (col, row) cell.

        Returns:
            The cell index, or None if the bullet does not touch the bunker
        """
        if not self.overlaps(bullet) or bullet.position.y < self.position.y:
            return None

        point = bullet.directional_position()
        col = (point.x - self.position.x) // self.CELL_WIDTH
        row = (point.y - self.position.y) // self.CELL_HEIGHT
        if not (0 <= col < self.CELLS and 0 <= row < self.CELLS):
            return None
        return col, row

    def would_hit(self, bullet: Bullet) -> bool:
        cell = self.cell_for(bullet)
        if cell is None:
            return False
        col, row = cell
        return self.stability[row][col] > 0

    def hit(self, bullet: Bullet) -> HitResult:
        """Wear down the struck cell. Bunkers stop every bullet they are hit by."""
        cell = self.cell_for(bullet)
        if cell is not None:
            col, row = cell
            self.stability[row][col] = max(0, self.stability[row][col] - 1)

        return HitResult(survived=not self.is_destroyed, absorbed_bullet=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.position.x,
            "y": self.position.y,
            "width": self.WIDTH,
            "height": self.HEIGHT,
            "stability": [list(row) for row in self.stability],
        }


class Bunkers(GameObject):
    """Fixed row of evenly spaced bunker slots."""

    COUNT = 4
    GRID_GAP = Bunker.WIDTH

    WIDTH = Bunker.WIDTH * COUNT + (COUNT - 1) * GRID_GAP
    HEIGHT = Bunker.HEIGHT

    def __init__(self):
        self.position = Position(
            x=(FIELD_WIDTH - self.WIDTH) // 2,
            y=FIELD_HEIGHT - Cannon.HEIGHT * 5,
        )
        self.slots: List[Optional[Bunker]] = [
            Bunker(Position(
                x=self.position.x + i * (Bunker.WIDTH + self.GRID_GAP),
                y=self.position.y,
            ))
            for i in range(self.COUNT)
        ]

    def __iter__(self) -> Iterator[Optional[Bunker]]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> Optional[Bunker]:
        return self.slots[index]

    @property
    def alive_count(self) -> int:
        return sum(1 for bunker in self.slots if bunker is not None)

    def would_hit(self, bullet: Bullet) -> Optional[int]:
        """Return the slot index of the first bunker the bullet would hit."""
        for i, bunker in enumerate(self.slots):
            if bunker is not None and bunker.would_hit(bullet):
                return i
        return None

    def hit(self, index: int, bullet: Bullet) -> HitResult:
        """Apply a hit to a bunker slot, emptying the slot once it is destroyed."""
        bunker = self.slots[index]
        if bunker is None:
            return HitResult(survived=False, absorbed_bullet=False)

        result = bunker.hit(bullet)
        if not result.survived:
            self.slots[index] = None
        return result

    def to_list(self) -> List[Optional[Dict[str, Any]]]:
        return [bunker.to_dict() if bunker is not None else None for bunker in self.slots]
