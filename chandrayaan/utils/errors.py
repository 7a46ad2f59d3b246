# chandrayaan/utils/errors.py
"""Error types and formatting utilities."""

class UserError(Exception):
    """Errors shown to user - must be clear and actionable."""
    pass

class ValidationError(UserError):
    """Bad coordinate, facing or config input."""
    pass

class CommandError(UserError):
    """Command decoding errors (strict mode only)."""
    pass

class ScenarioError(UserError):
    """Malformed scenario file."""
    pass

def format_error(error_type, message, hint=None):
    """One-line CLI error, optionally followed by an indented hint.

    Args:
        error_type (str): Code from error_type_for, e.g. "INVALID_INPUT"
        message (str): What was wrong with the input
        hint (str, optional): How to fix it, e.g. "Use one of: f b l r u d"

    Returns:
        str: e.g. "⚠ UNKNOWN_COMMAND: Unknown command symbol(s): 'x'"
    """
    lines = [f"⚠ {error_type}: {message}"]
    if hint:
        lines.append(f"  → {hint}")
    return "\n".join(lines)

def format_success(message, details=None):
    """Check-marked CLI line plus one indented "key: value" line per detail."""
    lines = [f"✓ {message}"]
    lines.extend(f"  {key}: {value}" for key, value in (details or {}).items())
    return "\n".join(lines)

def error_type_for(error):
    """Map an exception onto the short code used in CLI and JSON output."""
    if isinstance(error, CommandError):
        return "UNKNOWN_COMMAND"
    if isinstance(error, ScenarioError):
        return "BAD_SCENARIO"
    if isinstance(error, ValidationError):
        return "INVALID_INPUT"
    return "ERROR"

def success_dict(status, **fields):
    """JSON body for a finished run.

    Args:
        status (str): Short outcome, e.g. "moved"
        **fields: Payload such as applied, ignored and telemetry

    Returns:
        dict: {"ok": True, "status": status, **fields}
    """
    return {"ok": True, "status": status, **fields}

def error_dict(error_type, message, **fields):
    """JSON body for a rejected run.

    Args:
        error_type (str): Code from error_type_for, e.g. "BAD_SCENARIO"
        message (str): Error text
        **fields: Extra context

    Returns:
        dict: {"ok": False, "error": error_type, "message": message, **fields}
    """
    return {"ok": False, "error": error_type, "message": message, **fields}
