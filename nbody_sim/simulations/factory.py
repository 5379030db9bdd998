"""Simulation factory for creating force-computation strategies."""

from typing import List, Optional
from nbody_sim.physics.region import Region
from nbody_sim.physics.barnes_hut import OPENING_THRESHOLD
from nbody_sim.simulations.base import Simulation
from nbody_sim.simulations.brute_force import BruteForce
from nbody_sim.simulations.barnes_hut import BarnesHut
from nbody_sim.utils.config import Config

_SIMULATIONS = {
    "brute_force": BruteForce,
    "barnes_hut": BarnesHut,
}


def list_available_simulations() -> List[str]:
    """List all strategy names accepted by :func:`get_simulation`."""
    return list(_SIMULATIONS.keys())


def get_simulation(
    name: str,
    region: Optional[Region] = None,
    theta: float = OPENING_THRESHOLD,
) -> Simulation:
    """Get a simulation strategy instance.

    Args:
        name: Strategy name ('brute_force' or 'barnes_hut')
        region: Bounding region, required for 'barnes_hut'
        theta: Opening threshold for 'barnes_hut'

    Returns:
        Simulation instance

    Raises:
        ValueError: If the strategy is unknown or misconfigured
    """
    name_lower = name.lower().replace("-", "_")

    if name_lower == "brute_force":
        return BruteForce()
    elif name_lower == "barnes_hut":
        if region is None:
            raise ValueError("Barnes-Hut simulation requires a bounding region")
        return BarnesHut(region, theta=theta)
    else:
        available = list_available_simulations()
        raise ValueError(f"Unknown simulation '{name}'. Available: {available}")


def simulation_from_config(config: Config) -> Simulation:
    """Build the strategy described by a Config."""
    return get_simulation(config.method, region=config.region(), theta=config.theta)
