"""
Deterministic tick-based Space Invaders simulation.

Create a PlayField and call step(instruction, shoot) once per tick.
"""

from .geometry import Position, GameObject, overlaps, in_field
from .results import StepResult, HitResult, Target
from .bullet import Bullet, BulletDirection
from .cannon import Cannon
from .alien import Alien, Aliens, AlienType
from .bunker import Bunker, Bunkers
from .play_field import PlayField, Instruction

__all__ = [
    "Position",
    "GameObject",
    "overlaps",
    "in_field",
    "StepResult",
    "HitResult",
    "Target",
    "Bullet",
    "BulletDirection",
    "Cannon",
    "Alien",
    "Aliens",
    "AlienType",
    "Bunker",
    "Bunkers",
    "PlayField",
    "Instruction",
]
