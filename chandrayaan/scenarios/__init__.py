"""Scenario files: a start state, a batch of commands and an expected end."""

from chandrayaan.scenarios.loader import Scenario, ScenarioLoader, ScenarioResult, load_scenario_dir

__all__ = ['Scenario', 'ScenarioLoader', 'ScenarioResult', 'load_scenario_dir']
