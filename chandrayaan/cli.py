# chandrayaan/cli.py
"""
Command-line interface for the craft navigator.
Applies command batches to a craft, or runs scenario files, and prints telemetry.
"""

import argparse
import dataclasses
import json
import logging
import os
import sys

from chandrayaan.config import NavigatorConfig
from chandrayaan.core.command import Command, split_symbols
from chandrayaan.scenarios.loader import ScenarioLoader, load_scenario_dir
from chandrayaan.telemetry import format_telemetry, get_craft_telemetry
from chandrayaan.utils.errors import (
    UserError,
    error_dict,
    error_type_for,
    format_error,
    format_success,
    success_dict,
)
from chandrayaan.utils.logger import LOG_FORMAT, DATE_FORMAT, resolve_level, setup_logging

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="chandrayaan",
        description="Move a craft around a 3-D grid with f/b/l/r/u/d commands",
    )
    parser.add_argument("--log-file", help="Also write logs to this file (or directory)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="action", required=True)

    move = sub.add_parser("move", help="Apply a batch of commands")
    move.add_argument("commands", nargs="*",
                      help=f"Command symbols ({' '.join(Command.symbols())}), e.g. 'f r u b l' or 'frubl'")
    move.add_argument("--start", help="Start position as x,y,z")
    move.add_argument("--facing", help="Start facing (North, South, East, West, Up, Down)")
    move.add_argument("--strict", action="store_true", default=None,
                      help="Fail on unknown command symbols instead of skipping them")
    move.add_argument("--config", help="YAML or JSON config file")
    move.add_argument("--json", action="store_true", help="Print JSON instead of text")

    scenario = sub.add_parser("scenario", help="Run a scenario file or a directory of them")
    scenario.add_argument("path", help="Scenario file or directory")
    scenario.add_argument("--json", action="store_true", help="Print JSON instead of text")

    return parser


def configure_logging(args, config=None):
    level = logging.DEBUG if args.verbose else resolve_level(config.log_level if config else "WARNING")
    log_file = args.log_file or (config.log_file if config else None)
    if log_file:
        return setup_logging(log_file=log_file, level=level)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    return None


def load_config(args) -> NavigatorConfig:
    """Defaults, then environment, then --config file, then explicit flags."""
    config = NavigatorConfig.from_file(args.config) if args.config else NavigatorConfig.from_env()
    overrides = {}
    if args.start is not None:
        overrides["start_position"] = args.start
    if args.facing is not None:
        overrides["start_facing"] = args.facing
    if args.strict is not None:
        overrides["strict_commands"] = args.strict
    return dataclasses.replace(config, **overrides)


def run_move(args) -> int:
    config = load_config(args)
    configure_logging(args, config)

    craft = config.create_craft()
    symbols = [symbol for arg in args.commands for symbol in split_symbols(arg)]
    batch = craft.apply_commands(symbols, strict=config.strict_commands)
    snapshot = get_craft_telemetry(craft)

    if args.json:
        print(json.dumps(success_dict("moved", applied=batch.applied,
                                      ignored=batch.ignored, telemetry=snapshot), indent=2))
    else:
        print(format_success(f"Applied {batch.applied} command(s)"))
        for line in format_telemetry(snapshot):
            print(line)
        if batch.ignored:
            print(f"Ignored: {' '.join(batch.ignored)}")
    return 0


def run_scenarios(args) -> int:
    configure_logging(args)

    if os.path.isdir(args.path):
        scenarios = load_scenario_dir(args.path)
    else:
        scenarios = [ScenarioLoader.load(args.path)]

    results = [scenario.run() for scenario in scenarios]
    failed = [r for r in results if r.passed is False]

    if args.json:
        print(json.dumps([
            {
                "name": r.name,
                "passed": r.passed,
                "mismatches": r.mismatches,
                "ignored": r.ignored,
                "telemetry": r.telemetry,
            }
            for r in results
        ], indent=2))
    else:
        for r in results:
            status = "no expectation" if r.passed is None else ("PASS" if r.passed else "FAIL")
            print(f"[{status}] {r.name}")
            for line in format_telemetry(r.telemetry):
                print(f"    {line}")
            for mismatch in r.mismatches:
                print(f"    ✗ {mismatch}")
        print(f"{len(results) - len(failed)}/{len(results)} scenario(s) ok")

    return 1 if failed else 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.action == "move":
            return run_move(args)
        return run_scenarios(args)
    except (UserError, ValueError, OSError) as e:
        error_type = error_type_for(e)
        logger.debug(f"{error_type}: {e}")
        if getattr(args, "json", False):
            print(json.dumps(error_dict(error_type, str(e)), indent=2))
        else:
            print(format_error(error_type, str(e)), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
