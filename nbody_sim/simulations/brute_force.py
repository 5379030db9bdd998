"""Exact pairwise force summation (O(N^2))."""

import logging
from typing import MutableSequence
from nbody_sim.physics.body import Body
from nbody_sim.simulations.base import Simulation

logger = logging.getLogger(__name__)


class BruteForce(Simulation):
    """Sums the exact contribution of every other body.

    Self-interaction is skipped by index, not by position.
    """

    @property
    def name(self) -> str:
        return "brute_force"

    def step(self, bodies: MutableSequence[Body], dt: float):
        n = len(bodies)
        for i, body in enumerate(bodies):
            body.reset_force()
            for j in range(n):
                if j == i:
                    continue
                body.add_force(bodies[j])

        # Positions are only touched once every force is known
        for body in bodies:
            body.update(dt)

        logger.debug("brute_force step: n=%d pairs=%d dt=%g", n, n * (n - 1), dt)
