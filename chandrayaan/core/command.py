# chandrayaan/core/command.py
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Union

from chandrayaan.utils.errors import CommandError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")


class Command(Enum):
    FORWARD = "f"
    BACKWARD = "b"
    LEFT = "l"
    RIGHT = "r"
    UP = "u"
    DOWN = "d"

    @classmethod
    def symbols(cls) -> List[str]:
        return [c.value for c in cls]

    @classmethod
    def from_symbol(cls, symbol) -> "Command":
        """Look up a command by its one-letter symbol; returns None when unknown."""
        if isinstance(symbol, cls):
            return symbol
        for command in cls:
            if command.value == symbol:
                return command
        return None


@dataclass
class DecodeResult:
    commands: List[Command] = field(default_factory=list)
    unrecognized: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.unrecognized


def split_symbols(symbols) -> list:
    """Break a string into one-letter symbols.

    Commas and whitespace are optional separators, so "fr ub", "f,r,u,b" and
    "frub" all give the same four symbols. Non-string iterables pass through
    unchanged: each item is one symbol, and a multi-letter item stays unknown.
    """
    if isinstance(symbols, str):
        return [letter for token in _SEPARATORS.split(symbols) for letter in token]
    return list(symbols)


def decode_commands(symbols: Union[str, Iterable], strict: bool = False) -> DecodeResult:
    """
    Decode a batch of command symbols.

    Accepts Command members, one-letter strings, or a single string such as
    "frubl" or "f, r, u, b, l". Symbols are case-sensitive.

    Args:
        symbols: Commands to decode
        strict (bool): Raise CommandError on any unknown symbol

    Returns:
        DecodeResult: known commands in order plus the unknown symbols
    """
    result = DecodeResult()
    for symbol in split_symbols(symbols):
        command = Command.from_symbol(symbol)
        if command is None:
            result.unrecognized.append(symbol)
        else:
            result.commands.append(command)

    if result.unrecognized:
        if strict:
            listed = ", ".join(repr(s) for s in result.unrecognized)
            raise CommandError(
                f"Unknown command symbol(s): {listed} (valid: {' '.join(Command.symbols())})")
        logger.debug(f"Unrecognized command symbols: {result.unrecognized}")
    return result
