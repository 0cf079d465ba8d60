"""
Bullets fired by the cannon or by aliens.
"""

from enum import IntEnum
from typing import Optional, Dict, Any, TYPE_CHECKING

from .geometry import GameObject, Position

if TYPE_CHECKING:
    from .alien import AlienType


class BulletDirection(IntEnum):
    """Direction of travel, fixed at creation."""
    UPWARD = 0
    DOWNWARD = 1


class Bullet(GameObject):
    """A projectile that travels one unit per tick in a straight line."""

    WIDTH = 1
    HEIGHT = 3

    def __init__(
        self,
        position: Position,
        direction: BulletDirection,
        alien_type: Optional["AlienType"] = None,
    ):
        self.position = position
        self.direction = direction
        # None means the player fired it
        self.alien_type = alien_type

    @classmethod
    def player_at(cls, position: Position) -> "Bullet":
        """Create an upward bullet fired by the cannon."""
        return cls(position, BulletDirection.UPWARD)

    @classmethod
    def alien_at(cls, position: Position, alien_type: "AlienType") -> "Bullet":
        """Create a downward bullet fired by an alien of the given type."""
        return cls(position, BulletDirection.DOWNWARD, alien_type)

    def is_alien_bullet(self) -> bool:
        return self.alien_type is not None

    def directional_position(self) -> Position:
        """The edge of the bullet that leads in its direction of travel."""
        if self.direction == BulletDirection.DOWNWARD:
            return Position(self.position.x, self.position.y + self.HEIGHT - 1)
        return self.position

    def step(self) -> bool:
        """
        Move one unit towards the bullet's direction.

        Returns:
            False if an upward bullet is already at y=0 and cannot move
        """
        if self.direction == BulletDirection.UPWARD:
            if self.position.y == 0:
                return False
            self.position = Position(self.position.x, self.position.y - 1)
        else:
            self.position = Position(self.position.x, self.position.y + 1)
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.position.x,
            "y": self.position.y,
            "direction": int(self.direction),
            "alien_type": int(self.alien_type) if self.alien_type is not None else None,
            "width": self.WIDTH,
            "height": self.HEIGHT,
        }

    def __repr__(self) -> str:
        return (
            f"Bullet(x={self.position.x}, y={self.position.y}, "
            f"direction={self.direction.name}, alien_type={self.alien_type!r})"
        )
