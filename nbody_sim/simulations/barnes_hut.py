"""Barnes-Hut approximation (O(N log N)) over a fixed bounding region."""

import logging
from typing import MutableSequence
from nbody_sim.physics.body import Body
from nbody_sim.physics.region import Region
from nbody_sim.physics.barnes_hut import build_tree, OPENING_THRESHOLD
from nbody_sim.simulations.base import Simulation

logger = logging.getLogger(__name__)


class BarnesHut(Simulation):
    """Builds a fresh quadtree each step and queries it once per body.

    Bodies outside ``region`` are left untouched: they are not inserted,
    their force is not reset and they are not integrated.
    """

    def __init__(self, region: Region, theta: float = OPENING_THRESHOLD):
        """Initialize strategy.

        Args:
            region: Bounding region for the tree
            theta: Opening threshold (0 forces exact traversal)
        """
        self.region = region
        self.theta = theta

    @property
    def name(self) -> str:
        return "barnes_hut"

    def step(self, bodies: MutableSequence[Body], dt: float):
        # The tree holds snapshots, so integrating one body never moves another's source
        tree, inserted = build_tree(self.region, bodies)
        included = [body for body in bodies if self.region.contains(body.position)]

        for body in included:
            body.reset_force()
            tree.update_force(body, self.theta)

        for body in included:
            body.update(dt)

        excluded = len(bodies) - inserted
        if excluded:
            logger.debug("barnes_hut step: %d bodies outside region excluded", excluded)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "barnes_hut step: n=%d depth=%d theta=%g dt=%g",
                inserted,
                tree.depth(),
                self.theta,
                dt,
            )
