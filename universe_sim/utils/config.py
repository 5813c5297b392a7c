"""Configuration management."""

import json
import yaml
from typing import Dict, Any
from pathlib import Path
from dataclasses import dataclass, field, asdict
from universe_sim.physics.settings import GenerationSettings, SimulationSettings

YAML_SUFFIXES = ('.yaml', '.yml')


@dataclass
class Config:
    """Run configuration."""
    generation: GenerationSettings = field(default_factory=GenerationSettings)
    simulation: SimulationSettings = field(default_factory=SimulationSettings)

    # Stepping parameters
    dt: float = 0.01
    steps: int = 1000
    solver: str = "vectorized"

    # Rendering parameters
    render: bool = False
    render_every: int = 1

    def __post_init__(self):
        if isinstance(self.generation, dict):
            self.generation = GenerationSettings(**self.generation)
        if isinstance(self.simulation, dict):
            self.simulation = SimulationSettings(**self.simulation)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        # Tuples become lists so JSON and YAML round-trip the same way
        for key in ('position_range', 'velocity_range', 'mass_range'):
            data['generation'][key] = list(data['generation'][key])
        return data


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in YAML_SUFFIXES:
            data = yaml.safe_load(f)
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    return Config(**(data or {}))


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    if output_path.suffix not in YAML_SUFFIXES and output_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")

    data = config.to_dict()
    with open(output_path, 'w') as f:
        if output_path.suffix in YAML_SUFFIXES:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
