"""Point mass participating in the gravitational simulation."""

from typing import Optional
from nbody_sim.physics.vector import Vector2


G = 6.67408e-11  # Gravitational constant (SI units)


class Body:
    """A point mass with position, velocity and an accumulated force.

    ``force`` is a per-step accumulator: strategies reset it at the start of a
    step, accumulate contributions with :meth:`add_force`, then integrate with
    :meth:`update`. Mass is fixed after construction and must be non-zero;
    integration divides by it.

    Bodies compare by value and are therefore unhashable; strategies track
    them by identity.
    """

    __slots__ = ("position", "velocity", "force", "_mass")

    def __init__(self, position: Vector2, velocity: Optional[Vector2] = None, mass: float = 1.0):
        self.position = position
        self.velocity = velocity if velocity is not None else Vector2.zero()
        self.force = Vector2.zero()
        self._mass = float(mass)

    @property
    def mass(self) -> float:
        return self._mass

    def reset_force(self):
        """Zero the force accumulator."""
        self.force = Vector2.zero()

    def add_force(self, other: "Body"):
        """Accumulate the gravitational force exerted by ``other`` on this body.

        Magnitude is G * m1 * m2 / d^2, directed along the vector from
        ``other`` to this body. Coincident positions raise ZeroDivisionError.

        Args:
            other: Body (or aggregate) exerting the force
        """
        diff = self.position - other.position
        dist = self.position.distance(other.position)
        magnitude = (G * self._mass * other.mass) / dist ** 2
        self.force = self.force + diff * magnitude / dist

    def update(self, dt: float):
        """Semi-implicit Euler step: velocity first, then position with the new velocity.

        Args:
            dt: Time step
        """
        self.velocity = self.velocity + self.force * dt / self._mass
        self.position = self.position + self.velocity * dt

    def combine(self, other: "Body") -> "Body":
        """Return the mass-weighted aggregate of this body and ``other``.

        The aggregate carries the summed mass and the centre of mass of both
        operands. Its velocity is taken from ``self`` and is never read for
        aggregate nodes.
        """
        total_mass = self._mass + other.mass
        position = (self.position * self._mass + other.position * other.mass) / total_mass
        return Body(position, self.velocity, total_mass)

    def copy(self) -> "Body":
        """Snapshot of the current state, force included."""
        clone = Body(self.position, self.velocity, self._mass)
        clone.force = self.force
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, Body):
            return NotImplemented
        return (
            self.position == other.position
            and self.velocity == other.velocity
            and self.force == other.force
            and self._mass == other.mass
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Body(position={self.position!r}, velocity={self.velocity!r}, "
            f"mass={self._mass!r}, force={self.force!r})"
        )
