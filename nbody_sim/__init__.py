"""
N-body Simulator - 2D Newtonian gravity with interchangeable force strategies.

Features:
- Exact pairwise (brute-force) force summation
- Barnes-Hut quadtree approximation
- Semi-implicit Euler integration
- NumPy diagnostics for rendering and analysis
"""

__version__ = "0.1.0"

from nbody_sim.physics import Vector2, Body, Region, BarnesHutTree, G
from nbody_sim.simulations import (
    Simulation,
    BruteForce,
    BarnesHut,
    get_simulation,
    list_available_simulations,
)
from nbody_sim.simulator import Simulator

__all__ = [
    "Vector2",
    "Body",
    "Region",
    "BarnesHutTree",
    "G",
    "Simulation",
    "BruteForce",
    "BarnesHut",
    "get_simulation",
    "list_available_simulations",
    "Simulator",
]
