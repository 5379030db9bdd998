"""Main simulator controller."""

import logging
import time
from typing import Callable, List, Optional, Sequence
import numpy as np
from nbody_sim.physics.body import Body
from nbody_sim.physics.diagnostics import positions_array
from nbody_sim.simulations.base import Simulation
from nbody_sim.simulations.factory import simulation_from_config
from nbody_sim.utils.config import Config

logger = logging.getLogger(__name__)


class Simulator:
    """Main simulation controller.

    Owns the body collection, the active strategy and the timestep. It is a
    convenience for drivers; the strategies can be used directly.
    """

    def __init__(self, simulation: Simulation, bodies: Sequence[Body], dt: float = 0.1):
        """Initialize simulator.

        Args:
            simulation: Force-computation strategy
            bodies: Initial bodies (the list is copied, the bodies are not)
            dt: Time step
        """
        self.simulation = simulation
        self.bodies: List[Body] = list(bodies)
        self.dt = dt
        self.time = 0.0
        self.step_count = 0

        # Profiling: last step timing (ms)
        self._last_step_ms: Optional[float] = None
        self._profile: bool = False

        self.on_step_callback: Optional[Callable] = None

        logger.info(
            "Simulator initialized: strategy=%s bodies=%d dt=%g",
            simulation.name,
            len(self.bodies),
            dt,
        )

    @classmethod
    def from_config(cls, config: Config, bodies: Sequence[Body]) -> "Simulator":
        return cls(simulation_from_config(config), bodies, dt=config.dt)

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step timing in ms."""
        return {"step_ms": self._last_step_ms}

    def step(self):
        """Perform one simulation step."""
        if self._profile:
            t0 = time.perf_counter()
        self.simulation.step(self.bodies, self.dt)
        if self._profile:
            self._last_step_ms = (time.perf_counter() - t0) * 1000.0

        self.time += self.dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()
        logger.debug("ran %d steps, t=%g", n_steps, self.time)

    def positions(self) -> np.ndarray:
        """Current positions (n, 2), the state a renderer reads each frame."""
        return positions_array(self.bodies)
