"""Abstract base class for force-computation strategies."""

from abc import ABC, abstractmethod
from typing import MutableSequence
from nbody_sim.physics.body import Body


class Simulation(ABC):
    """Abstract interface for advancing a body collection by one time step."""

    @abstractmethod
    def step(self, bodies: MutableSequence[Body], dt: float):
        """Advance every body by one interval.

        Forces are computed from a single position snapshot before any body
        is integrated. Bodies are mutated in place; nothing is returned.

        Args:
            bodies: Body collection owned by the caller
            dt: Time step
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this strategy."""
        pass
