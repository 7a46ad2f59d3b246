# chandrayaan/scenarios/loader.py
"""Scenario loader for command-sequence definitions."""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from chandrayaan.core.craft import Craft
from chandrayaan.core.facing import Facing
from chandrayaan.core.vector import Coordinate
from chandrayaan.telemetry import get_craft_telemetry
from chandrayaan.utils.errors import ScenarioError, ValidationError
from chandrayaan.utils.validators import parse_bool

logger = logging.getLogger(__name__)

SCENARIO_EXTENSIONS = ('.yaml', '.yml', '.json')


@dataclass
class ScenarioResult:
    name: str
    telemetry: Dict[str, Any]
    ignored: List[str] = field(default_factory=list)
    # None when the scenario has no expectation
    passed: Optional[bool] = None
    mismatches: List[str] = field(default_factory=list)


@dataclass
class Scenario:
    name: str
    start_position: Coordinate
    start_facing: Facing
    commands: Any
    description: str = ""
    expected_position: Optional[Coordinate] = None
    expected_facing: Optional[Facing] = None
    strict: bool = False
    source: Optional[str] = None

    @property
    def has_expectation(self) -> bool:
        return self.expected_position is not None or self.expected_facing is not None

    def create_craft(self) -> Craft:
        return Craft(self.start_position, self.start_facing)

    def run(self) -> ScenarioResult:
        """Apply the scenario's commands to a fresh craft and check the outcome."""
        craft = self.create_craft()
        batch = craft.apply_commands(self.commands, strict=self.strict)
        result = ScenarioResult(
            name=self.name,
            telemetry=get_craft_telemetry(craft),
            ignored=batch.ignored,
        )

        if self.has_expectation:
            if self.expected_position is not None and craft.position != self.expected_position:
                result.mismatches.append(
                    f"position {craft.position} != expected {self.expected_position}")
            if self.expected_facing is not None and craft.facing != self.expected_facing:
                result.mismatches.append(
                    f"facing {craft.facing} != expected {self.expected_facing}")
            result.passed = not result.mismatches

        logger.info(f"Scenario '{self.name}': {craft!r} passed={result.passed}")
        return result


class ScenarioLoader:
    """Loads scenarios from YAML or JSON files."""

    @staticmethod
    def load(filepath: str) -> Scenario:
        """Load a scenario from file.

        Args:
            filepath: Path to scenario file (.yaml or .json)

        Returns:
            Scenario: parsed scenario
        """
        _, ext = os.path.splitext(filepath)

        if ext not in SCENARIO_EXTENSIONS:
            raise ValueError(f"Unsupported file format: {ext}")

        with open(filepath, 'r') as f:
            try:
                if ext == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ScenarioError(f"Scenario {filepath} could not be parsed: {e}") from e

        if not isinstance(data, dict):
            raise ScenarioError(f"Scenario {filepath} must contain a mapping")

        scenario = ScenarioLoader.parse(data, source=filepath)
        logger.info(f"Loaded scenario: {scenario.name}")
        return scenario

    @staticmethod
    def parse(data: Dict, source: Optional[str] = None) -> Scenario:
        """Build a Scenario from already-decoded data.

        Args:
            data: Scenario mapping
            source: File the data came from, for messages

        Returns:
            Scenario: parsed scenario
        """
        default_name = os.path.splitext(os.path.basename(source))[0] if source else "Untitled Scenario"
        name = data.get("name", default_name)

        if "commands" not in data:
            raise ScenarioError(f"Scenario '{name}' has no commands")
        commands = data["commands"]
        if commands is None:
            commands = []
        if not isinstance(commands, (str, list)):
            raise ScenarioError(f"Scenario '{name}' commands must be a string or a list")

        start = data.get("start", {}) or {}
        expect = data.get("expect", {}) or {}
        if not isinstance(start, dict) or not isinstance(expect, dict):
            raise ScenarioError(f"Scenario '{name}' start/expect blocks must be mappings")

        try:
            return Scenario(
                name=name,
                description=data.get("description", ""),
                start_position=Coordinate.parse(start.get("position")),
                start_facing=Facing.parse(start.get("facing")),
                commands=commands,
                expected_position=ScenarioLoader._optional(expect.get("position"), Coordinate.parse),
                expected_facing=ScenarioLoader._optional(expect.get("facing"), Facing.parse),
                strict=parse_bool(data.get("strict", False), "strict"),
                source=source,
            )
        except ValidationError as e:
            raise ScenarioError(f"Scenario '{name}': {e}") from e

    @staticmethod
    def _optional(value, parser):
        return None if value is None else parser(value)


def load_scenario_dir(directory: str) -> List[Scenario]:
    """Load every scenario file in a directory, sorted by file name."""
    scenarios = []
    for filename in sorted(os.listdir(directory)):
        if filename.endswith(SCENARIO_EXTENSIONS):
            scenarios.append(ScenarioLoader.load(os.path.join(directory, filename)))
    return scenarios
