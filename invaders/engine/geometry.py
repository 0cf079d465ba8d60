"""
Geometry primitives shared by every entity on the play field.

Coordinates are non-negative integers; (0, 0) is the top-left corner and
y grows downwards.
"""

from dataclasses import dataclass
from typing import Dict, Any

from .constants import FIELD_WIDTH, FIELD_HEIGHT


@dataclass(frozen=True)
class Position:
    """Integer position of the top-left corner of a bounding box."""
    x: int
    y: int

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}


def overlaps(
    a: Position,
    a_width: int,
    a_height: int,
    b: Position,
    b_width: int,
    b_height: int,
) -> bool:
    """AABB intersection, inclusive of edges (top-left based coordinates)."""
    overlaps_on_x = a.x <= b.x + b_width - 1 and a.x + a_width - 1 >= b.x
    overlaps_on_y = a.y <= b.y + b_height - 1 and a.y + a_height - 1 >= b.y
    return overlaps_on_x and overlaps_on_y


class GameObject:
    """
    Anything with a fixed size and a position on the field.

    Subclasses set WIDTH and HEIGHT as class constants and store their
    current position in `position`.
    """

    WIDTH: int = 0
    HEIGHT: int = 0

    position: Position

    def overlaps(self, other: "GameObject") -> bool:
        """Check whether this object's box intersects another's."""
        return overlaps(
            self.position,
            self.WIDTH,
            self.HEIGHT,
            other.position,
            other.WIDTH,
            other.HEIGHT,
        )

    def contains_point(self, point: Position) -> bool:
        """Check whether a single point lies inside this object's box."""
        return overlaps(self.position, self.WIDTH, self.HEIGHT, point, 1, 1)


def in_field(obj: GameObject) -> bool:
    """Check whether an object still overlaps the play field."""
    return overlaps(
        Position(0, 0),
        FIELD_WIDTH,
        FIELD_HEIGHT,
        obj.position,
        obj.WIDTH,
        obj.HEIGHT,
    )
