"""
Navigator configuration.

Defines the default start state and runtime switches. Values can come
from defaults, environment variables or a YAML/JSON config file.
"""

from dataclasses import dataclass, field
from typing import Optional
import json
import os

import yaml

from chandrayaan.core.craft import Craft
from chandrayaan.core.facing import Facing
from chandrayaan.core.vector import Coordinate
from chandrayaan.utils.errors import ValidationError
from chandrayaan.utils.validators import TRUTHY, parse_bool, require_mapping


# Start state defaults
DEFAULT_START_POSITION = (0, 0, 0)
DEFAULT_START_FACING = Facing.NORTH

# Logging defaults
DEFAULT_LOG_LEVEL = "INFO"

ENV_PREFIX = "CHANDRAYAAN_"


@dataclass
class NavigatorConfig:
    """
    Navigator configuration container.

    Can be constructed from CLI args, environment, or config file.
    """

    # Start state
    start_position: Coordinate = field(default_factory=lambda: Coordinate(*DEFAULT_START_POSITION))
    start_facing: Facing = DEFAULT_START_FACING

    # Reject unknown command symbols instead of skipping them
    strict_commands: bool = False

    # Logging
    log_file: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        """Normalise start values given as plain strings, tuples or dicts."""
        self.start_position = Coordinate.parse(self.start_position)
        self.start_facing = Facing.parse(self.start_facing)

    @classmethod
    def from_env(cls) -> "NavigatorConfig":
        """Create config from environment variables."""
        return cls(
            start_position=os.environ.get(f"{ENV_PREFIX}START", "0,0,0"),
            start_facing=os.environ.get(f"{ENV_PREFIX}FACING", DEFAULT_START_FACING.value),
            strict_commands=os.environ.get(f"{ENV_PREFIX}STRICT", "").lower() in TRUTHY,
            log_file=os.environ.get(f"{ENV_PREFIX}LOG_FILE"),
            log_level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "NavigatorConfig":
        """Load config from a YAML or JSON file.

        Args:
            filepath: Path to config file (.yaml, .yml or .json)

        Returns:
            NavigatorConfig: config with file values over defaults
        """
        _, ext = os.path.splitext(filepath)

        if ext not in ['.yaml', '.yml', '.json']:
            raise ValueError(f"Unsupported file format: {ext}")

        with open(filepath, 'r') as f:
            try:
                if ext == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f) or {}
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ValidationError(f"Config file {filepath} could not be parsed: {e}") from e

        if not isinstance(data, dict):
            raise ValidationError(f"Config file {filepath} must contain a mapping")

        start = require_mapping(data.get("start"), "start")
        logging_cfg = require_mapping(data.get("logging"), "logging")
        return cls(
            start_position=start.get("position", DEFAULT_START_POSITION),
            start_facing=start.get("facing", DEFAULT_START_FACING),
            strict_commands=parse_bool(data.get("strict_commands", False), "strict_commands"),
            log_file=logging_cfg.get("file"),
            log_level=logging_cfg.get("level", DEFAULT_LOG_LEVEL),
        )

    def create_craft(self) -> Craft:
        """Build a craft at the configured start state."""
        return Craft(self.start_position, self.start_facing)

    def as_dict(self) -> dict:
        return {
            "start": {
                "position": self.start_position.as_dict(),
                "facing": self.start_facing.value,
            },
            "strict_commands": self.strict_commands,
            "logging": {"file": self.log_file, "level": self.log_level},
        }


def get_default_config() -> NavigatorConfig:
    """Get the default navigator configuration."""
    return NavigatorConfig()
