"""Physics engine: vectors, bodies, regions and the Barnes-Hut quadtree."""

from nbody_sim.physics.vector import Vector2
from nbody_sim.physics.body import Body, G
from nbody_sim.physics.region import Region
from nbody_sim.physics.barnes_hut import BarnesHutTree, OPENING_THRESHOLD

__all__ = ["Vector2", "Body", "G", "Region", "BarnesHutTree", "OPENING_THRESHOLD"]
