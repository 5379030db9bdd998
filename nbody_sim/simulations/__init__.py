"""Force-computation strategies for N-body simulations."""

from nbody_sim.simulations.base import Simulation
from nbody_sim.simulations.brute_force import BruteForce
from nbody_sim.simulations.barnes_hut import BarnesHut
from nbody_sim.simulations.factory import (
    get_simulation,
    list_available_simulations,
    simulation_from_config,
)

__all__ = [
    "Simulation",
    "BruteForce",
    "BarnesHut",
    "get_simulation",
    "list_available_simulations",
    "simulation_from_config",
]
