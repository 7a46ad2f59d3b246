# chandrayaan/core/craft.py
"""
Craft state machine.

A craft holds an immutable snapshot of where it started and a mutable
current state. Commands are folded over the current state strictly in
order, each one fully applied before the next.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

from chandrayaan.core.command import Command, decode_commands
from chandrayaan.core.facing import (
    Facing,
    MOVE_AXIS,
    seed_horizontal,
    turn_left,
    turn_right,
)
from chandrayaan.core.vector import Coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitialState:
    coordinates: Tuple[int, int, int]
    facing: Facing

    @classmethod
    def capture(cls, position: Coordinate, facing: Facing) -> "InitialState":
        return cls(coordinates=position.as_tuple(), facing=facing)

    @property
    def position(self) -> Coordinate:
        """A fresh Coordinate on every access; the snapshot itself never changes."""
        return Coordinate(*self.coordinates)

    def as_dict(self):
        return {"position": self.position.as_dict(), "facing": self.facing.value}


@dataclass
class CraftState:
    position: Coordinate
    facing: Facing
    # Only turn commands write this; it never holds Up or Down
    last_horizontal_facing: Facing

    @classmethod
    def from_initial(cls, initial: InitialState) -> "CraftState":
        return cls(
            position=initial.position,
            facing=initial.facing,
            last_horizontal_facing=seed_horizontal(initial.facing),
        )

    def as_dict(self):
        return {
            "position": self.position.as_dict(),
            "facing": self.facing.value,
            "last_horizontal_facing": self.last_horizontal_facing.value,
        }


@dataclass
class BatchResult:
    applied: int = 0
    ignored: List[str] = field(default_factory=list)


class Craft:
    """A single craft on the integer grid."""

    def __init__(self, position=None, facing: Union[Facing, str, None] = None):
        """
        Args:
            position: Starting coordinate (tuple, {x, y, z} dict, "x,y,z" or
                Coordinate). Defaults to the origin.
            facing: Starting facing. Defaults to North.
        """
        self.initial = InitialState.capture(Coordinate.parse(position), Facing.parse(facing))
        self.state = CraftState.from_initial(self.initial)
        logger.debug(f"Craft created at {self.initial.position} facing {self.initial.facing}")

    @property
    def position(self) -> Coordinate:
        return self.state.position

    @property
    def facing(self) -> Facing:
        return self.state.facing

    @property
    def last_horizontal_facing(self) -> Facing:
        return self.state.last_horizontal_facing

    def apply_commands(self, commands: Union[str, Iterable], strict: bool = False) -> BatchResult:
        """
        Apply a batch of commands in order.

        Unknown symbols are skipped and reported in the result. With
        ``strict`` the batch is decoded first and an unknown symbol raises
        CommandError before anything is applied.

        Args:
            commands: Command members, symbols, or a string of symbols
            strict (bool): Reject batches containing unknown symbols

        Returns:
            BatchResult: number of commands applied and the skipped symbols
        """
        decoded = decode_commands(commands, strict=strict)
        for command in decoded.commands:
            self._apply(command)

        if decoded.unrecognized:
            logger.warning(f"Ignored unknown command symbols: {decoded.unrecognized}")
        return BatchResult(applied=len(decoded.commands), ignored=list(decoded.unrecognized))

    move = apply_commands

    def _apply(self, command: Command):
        state = self.state
        if command in (Command.FORWARD, Command.BACKWARD):
            axis, sign = MOVE_AXIS[state.facing]
            delta = sign if command == Command.FORWARD else -sign
            state.position.shift(axis, delta)
        elif command in (Command.LEFT, Command.RIGHT):
            turn = turn_left if command == Command.LEFT else turn_right
            state.last_horizontal_facing = turn(state.last_horizontal_facing)
            state.facing = state.last_horizontal_facing
        elif command == Command.UP:
            state.facing = Facing.UP
        elif command == Command.DOWN:
            state.facing = Facing.DOWN

        logger.debug(f"{command.value}: position={state.position} facing={state.facing}")

    def reset(self):
        """Return to the construction snapshot."""
        self.state = CraftState.from_initial(self.initial)

    def is_at_initial(self) -> bool:
        return (self.state.position == self.initial.position
                and self.state.facing == self.initial.facing)

    def displacement(self) -> Coordinate:
        """Per-axis offset of the current position from the start."""
        return self.state.position.subtract(self.initial.position)

    def get_state(self) -> dict:
        state = self.state.as_dict()
        state["initial"] = self.initial.as_dict()
        return state

    def __repr__(self):
        return (f"Craft(position={self.state.position}, facing={self.state.facing}, "
                f"last_horizontal_facing={self.state.last_horizontal_facing})")
