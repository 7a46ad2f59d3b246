# chandrayaan/utils/validators.py
"""Validation helpers for values read from config and scenario files."""

from chandrayaan.utils.errors import ValidationError

TRUTHY = ("1", "true", "yes", "on")
FALSY = ("0", "false", "no", "off", "")


def parse_bool(value, name="value"):
    """Read a yes/no switch.

    Real bools pass through; strings are matched against TRUTHY/FALSY
    case-insensitively. Anything else is rejected rather than guessed.

    Args:
        value: Value from a file or the environment
        name (str): Setting name, for the error message

    Returns:
        bool: parsed switch
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUTHY:
            return True
        if text in FALSY:
            return False
    raise ValidationError(f"{name} must be true or false, got {value!r}")


def require_mapping(value, name):
    """Treat a missing block as empty and reject anything that is not a mapping."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError(f"{name} must be a mapping, got {type(value).__name__}")
    return value
