"""Configuration management."""

import json
import yaml
from typing import Tuple
from pathlib import Path
from dataclasses import dataclass, asdict
from nbody_sim.physics.vector import Vector2
from nbody_sim.physics.region import Region
from nbody_sim.physics.barnes_hut import OPENING_THRESHOLD


@dataclass
class Config:
    """Simulation configuration."""
    # Strategy
    method: str = "barnes_hut"
    theta: float = OPENING_THRESHOLD

    # Bounding region for Barnes-Hut
    region_center: Tuple[float, float] = (0.0, 0.0)
    region_length: float = 1e12

    # Stepping
    dt: float = 0.1
    n_steps: int = 100

    log_level: str = "INFO"

    def __post_init__(self):
        self.region_center = tuple(float(c) for c in self.region_center)
        if len(self.region_center) != 2:
            raise ValueError(f"region_center must have two components, got {self.region_center}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.region_length <= 0:
            raise ValueError(f"region_length must be positive, got {self.region_length}")

    def region(self) -> Region:
        """Bounding region described by this configuration."""
        return Region(Vector2(*self.region_center), float(self.region_length))


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
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
    data = asdict(config)
    data['region_center'] = list(data['region_center'])

    if output_path.suffix not in ('.yaml', '.yml', '.json'):
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")

    with open(output_path, 'w') as f:
        if output_path.suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, default_flow_style=False)
