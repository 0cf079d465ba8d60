"""
The player's laser cannon.
"""

from typing import Dict, Any

from .bullet import Bullet
from .constants import FIELD_WIDTH, FIELD_HEIGHT
from .geometry import GameObject, Position


class Cannon(GameObject):
    """Player cannon, movable horizontally along the bottom of the field."""

    WIDTH = 15
    HEIGHT = 8

    START_POSITION = Position(
        x=(FIELD_WIDTH - WIDTH) // 2,
        y=FIELD_HEIGHT - HEIGHT,
    )

    def __init__(self, position: Position = START_POSITION):
        self.position = position

    def move_left(self) -> None:
        if self.position.x > 0:
            self.position = Position(self.position.x - 1, self.position.y)

    def move_right(self) -> None:
        if self.position.x + self.WIDTH < FIELD_WIDTH:
            self.position = Position(self.position.x + 1, self.position.y)

    def shoot(self) -> Bullet:
        """Fire an upward bullet from the cannon's horizontal center."""
        return Bullet.player_at(Position(
            x=self.position.x + self.WIDTH // 2,
            y=self.position.y + 1,
        ))

    def would_hit(self, bullet: Bullet) -> bool:
        """Only alien bullets can hit the cannon."""
        return bullet.is_alien_bullet() and self.overlaps(bullet)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.position.x,
            "y": self.position.y,
            "width": self.WIDTH,
            "height": self.HEIGHT,
        }
