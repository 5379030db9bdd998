"""Axis-aligned square regions used to partition space."""

from dataclasses import dataclass
from typing import Tuple
from nbody_sim.physics.vector import Vector2


@dataclass(frozen=True)
class Region:
    """Square of side ``length`` centred at ``center``.

    Containment is inclusive on every edge, so a point on a shared boundary
    belongs to several subdivisions; callers resolve that by trying
    :meth:`subdivisions` in order.
    """
    center: Vector2
    length: float

    def contains(self, point: Vector2) -> bool:
        half_length = self.length / 2.0
        return (
            self.center.x - half_length <= point.x <= self.center.x + half_length
            and self.center.y - half_length <= point.y <= self.center.y + half_length
        )

    def northwest(self) -> "Region":
        quarter = self.length / 4.0
        return Region(self.center + Vector2(-quarter, quarter), self.length / 2.0)

    def northeast(self) -> "Region":
        quarter = self.length / 4.0
        return Region(self.center + Vector2(quarter, quarter), self.length / 2.0)

    def southwest(self) -> "Region":
        quarter = self.length / 4.0
        return Region(self.center - Vector2(quarter, quarter), self.length / 2.0)

    def southeast(self) -> "Region":
        quarter = self.length / 4.0
        return Region(self.center + Vector2(quarter, -quarter), self.length / 2.0)

    def subdivisions(self) -> Tuple["Region", "Region", "Region", "Region"]:
        """Return (NW, NE, SW, SE), the order used to break boundary ties."""
        return self.northwest(), self.northeast(), self.southwest(), self.southeast()
