# chandrayaan/core/facing.py
"""Craft facings, the horizontal turn cycle and the move axis table."""

from enum import Enum
from typing import Union

from chandrayaan.utils.errors import ValidationError


class Facing(Enum):
    """Orientation of the craft."""
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"
    UP = "Up"
    DOWN = "Down"

    @property
    def is_horizontal(self) -> bool:
        return self in HORIZONTAL_CYCLE

    @property
    def is_vertical(self) -> bool:
        return not self.is_horizontal

    @classmethod
    def parse(cls, value: Union["Facing", str, None]) -> "Facing":
        """Resolve a facing from its name, case-insensitively.

        ``None`` yields North.
        """
        if value is None:
            return cls.NORTH
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for facing in cls:
                if facing.value.lower() == wanted:
                    return facing
        valid = ", ".join(f.value for f in cls)
        raise ValidationError(f"Unknown facing {value!r} (expected one of: {valid})")

    def __str__(self):
        return self.value


# Clockwise order; right turn = +1, left turn = -1
HORIZONTAL_CYCLE = (Facing.NORTH, Facing.EAST, Facing.SOUTH, Facing.WEST)

# Axis and sign of a forward step for every facing
MOVE_AXIS = {
    Facing.NORTH: ("y", 1),
    Facing.SOUTH: ("y", -1),
    Facing.EAST: ("x", 1),
    Facing.WEST: ("x", -1),
    Facing.UP: ("z", 1),
    Facing.DOWN: ("z", -1),
}


def rotate_horizontal(facing: Facing, steps: int) -> Facing:
    """Step ``facing`` around the horizontal cycle.

    Args:
        facing: Horizontal facing to rotate from
        steps: +1 for a right turn, -1 for a left turn

    Returns:
        Facing: the resulting horizontal facing
    """
    if not facing.is_horizontal:
        raise ValueError(f"{facing} is not a horizontal facing")
    index = HORIZONTAL_CYCLE.index(facing)
    return HORIZONTAL_CYCLE[(index + steps) % len(HORIZONTAL_CYCLE)]


def turn_left(facing: Facing) -> Facing:
    return rotate_horizontal(facing, -1)


def turn_right(facing: Facing) -> Facing:
    return rotate_horizontal(facing, 1)


def seed_horizontal(facing: Facing) -> Facing:
    """Horizontal facing a craft starts with; vertical starts fall back to North."""
    return facing if facing.is_horizontal else Facing.NORTH
