"""Craft state machine and its value types."""

from chandrayaan.core.command import Command, DecodeResult, decode_commands
from chandrayaan.core.craft import BatchResult, Craft, CraftState, InitialState
from chandrayaan.core.facing import Facing, HORIZONTAL_CYCLE
from chandrayaan.core.vector import Coordinate

__all__ = [
    'BatchResult', 'Command', 'Coordinate', 'Craft', 'CraftState',
    'DecodeResult', 'Facing', 'HORIZONTAL_CYCLE', 'InitialState',
    'decode_commands',
]
