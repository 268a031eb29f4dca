"""Scenario files describing a data-center configuration."""

import json
from pathlib import Path

import yaml
from loguru import logger

from ..core.models import SimulationConfig


def load_scenario(scenario_path: Path) -> SimulationConfig:
    """
    Load a simulation configuration from a YAML or JSON file.

    The fields may sit at the top level of the file or under a
    ``simulation`` key, using camelCase or snake_case names.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the format is unsupported or fields are missing
    """
    scenario_path = Path(scenario_path)

    if not scenario_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {scenario_path}")

    logger.info(f"Loading scenario from {scenario_path}")

    with open(scenario_path, 'r') as f:
        if scenario_path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif scenario_path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported scenario file format: {scenario_path.suffix}")

    if not isinstance(data, dict):
        raise ValueError(f"Scenario file must contain a mapping: {scenario_path}")

    if 'simulation' in data:
        data = data['simulation']

    config = SimulationConfig.from_dict(data)

    logger.info(f"Scenario loaded: {config.host_count} hosts, {config.vm_count} VMs, "
                f"{config.cloudlet_count} cloudlets")

    return config
