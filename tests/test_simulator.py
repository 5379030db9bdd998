"""Tests for the simulator controller."""

import numpy as np
from nbody_sim.physics.body import Body
from nbody_sim.physics.region import Region
from nbody_sim.physics.vector import Vector2
from nbody_sim.simulations import BarnesHut, BruteForce
from nbody_sim.simulator import Simulator
from nbody_sim.utils.config import Config


def _bodies():
    return [
        Body(Vector2(10.0, 9.0), Vector2.unit(), 10.0),
        Body(Vector2(7.0, 2.0), Vector2.unit(), 12.0),
        Body(Vector2(5.0, 7.0), Vector2(2.0, 1.5), 8.0),
    ]


def test_simulator_basic():
    """Test stepping advances time and mutates the bodies."""
    bodies = _bodies()
    sim = Simulator(BruteForce(), bodies, dt=0.5)
    initial = sim.positions()

    for _ in range(10):
        sim.step()

    assert sim.step_count == 10
    assert abs(sim.time - 5.0) < 1e-12
    assert sim.bodies[0] is bodies[0]
    assert not np.allclose(sim.positions(), initial)


def test_simulator_matches_direct_strategy_calls():
    """Test the controller is a thin wrapper over Simulation.step."""
    region = Region(Vector2.zero(), 100.0)
    direct = _bodies()
    sim = Simulator(BarnesHut(region), _bodies(), dt=0.1)

    strategy = BarnesHut(region)
    for _ in range(3):
        strategy.step(direct, 0.1)
    sim.run(3)

    for a, b in zip(sim.bodies, direct):
        assert a.position == b.position
        assert a.velocity == b.velocity


def test_simulator_callback_and_profiling():
    """Test the step callback and timing."""
    seen = []
    sim = Simulator(BruteForce(), _bodies(), dt=0.1)
    sim.on_step_callback = lambda s: seen.append(s.step_count)

    assert sim.get_timing() == {"step_ms": None}
    sim.set_profiling(True)
    sim.run(3)

    assert seen == [1, 2, 3]
    assert sim.get_timing()["step_ms"] >= 0.0


def test_simulator_from_config():
    """Test construction from a Config."""
    config = Config(method="barnes_hut", dt=0.25, region_length=100.0, theta=0.0)
    sim = Simulator.from_config(config, _bodies())

    assert isinstance(sim.simulation, BarnesHut)
    assert sim.simulation.theta == 0.0
    assert sim.dt == 0.25
    assert sim.positions().shape == (3, 2)
