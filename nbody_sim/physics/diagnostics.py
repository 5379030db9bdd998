"""Diagnostics over a body collection.

Conversion to NumPy happens only here, at the boundary where renderers and
analysis code read simulation state.
"""

import numpy as np
from typing import Sequence
from nbody_sim.physics.body import Body


def positions_array(bodies: Sequence[Body]) -> np.ndarray:
    """Positions as an (n, 2) array."""
    return np.array([[b.position.x, b.position.y] for b in bodies], dtype=float).reshape(-1, 2)


def velocities_array(bodies: Sequence[Body]) -> np.ndarray:
    """Velocities as an (n, 2) array."""
    return np.array([[b.velocity.x, b.velocity.y] for b in bodies], dtype=float).reshape(-1, 2)


def forces_array(bodies: Sequence[Body]) -> np.ndarray:
    """Accumulated forces as an (n, 2) array."""
    return np.array([[b.force.x, b.force.y] for b in bodies], dtype=float).reshape(-1, 2)


def masses_array(bodies: Sequence[Body]) -> np.ndarray:
    return np.array([b.mass for b in bodies], dtype=float)


def center_of_mass(bodies: Sequence[Body]) -> np.ndarray:
    """Mass-weighted centroid (2,)."""
    masses = masses_array(bodies)
    return np.sum(masses[:, np.newaxis] * positions_array(bodies), axis=0) / np.sum(masses)


def total_momentum(bodies: Sequence[Body]) -> np.ndarray:
    """Total linear momentum (2,)."""
    masses = masses_array(bodies)
    return np.sum(masses[:, np.newaxis] * velocities_array(bodies), axis=0)


def kinetic_energy(bodies: Sequence[Body]) -> float:
    """K = 0.5 * sum(m_i * v_i^2)."""
    v_sq = np.sum(velocities_array(bodies) ** 2, axis=1)
    return float(0.5 * np.sum(masses_array(bodies) * v_sq))


def net_force(bodies: Sequence[Body]) -> np.ndarray:
    """Sum of all accumulated forces (2,); zero for exact pairwise forces."""
    return np.sum(forces_array(bodies), axis=0)
