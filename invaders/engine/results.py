"""
Outcome types returned by entity steps and hits.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .bullet import Bullet


class Target(IntEnum):
    """The closed set of things a bullet can hit."""
    CANNON = 0
    ALIEN = 1
    BUNKER = 2


@dataclass
class StepResult:
    """Result of advancing an entity (or a collection) by one tick."""
    survived: bool = True
    shots: List["Bullet"] = field(default_factory=list)


@dataclass
class HitResult:
    """Result of a bullet hitting something."""
    survived: bool = False
    absorbed_bullet: bool = True
