# chandrayaan/core/vector.py
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from chandrayaan.utils.errors import ValidationError

AXES = ("x", "y", "z")


def _as_int(axis: str, value) -> int:
    # bool is an int subclass but never a valid grid offset
    if isinstance(value, bool):
        raise ValidationError(f"Coordinate {axis} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"Coordinate {axis} must be an integer, got {value!r}")


@dataclass
class Coordinate:
    x: int = 0  # east (+) / west (-)
    y: int = 0  # north (+) / south (-)
    z: int = 0  # up (+) / down (-)

    def add(self, other: 'Coordinate') -> 'Coordinate':
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: 'Coordinate') -> 'Coordinate':
        return Coordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def shift(self, axis: str, delta: int):
        """Add ``delta`` to one axis in place."""
        setattr(self, axis, getattr(self, axis) + delta)

    def copy(self) -> 'Coordinate':
        return Coordinate(self.x, self.y, self.z)

    def as_tuple(self):
        return (self.x, self.y, self.z)

    def as_dict(self):
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def parse(cls, value: Union['Coordinate', Mapping, Sequence, str, None]) -> 'Coordinate':
        """Build a coordinate from a tuple, an {x, y, z} mapping or an "x,y,z" string.

        ``None`` yields the origin. A new object is always returned so callers
        never share state with the value they passed in.
        """
        if value is None:
            return cls()
        if isinstance(value, Coordinate):
            return value.copy()
        if isinstance(value, Mapping):
            missing = [axis for axis in AXES if axis not in value]
            if missing:
                raise ValidationError(f"Coordinate is missing axis: {', '.join(missing)}")
            return cls(*(_as_int(axis, value[axis]) for axis in AXES))
        if isinstance(value, str):
            value = [part for part in value.replace(" ", "").split(",") if part != ""]
        if isinstance(value, Sequence):
            if len(value) != 3:
                raise ValidationError(f"Coordinate needs exactly 3 components, got {len(value)}")
            return cls(*(_as_int(axis, v) for axis, v in zip(AXES, value)))
        raise ValidationError(f"Cannot build a coordinate from {type(value).__name__}")

    def __str__(self):
        return f"({self.x},{self.y},{self.z})"
