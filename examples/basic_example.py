"""Basic example of driving the N-body simulator."""

import argparse
import numpy as np
from nbody_sim import Body, Vector2, Simulator
from nbody_sim.physics import diagnostics
from nbody_sim.utils import Config, load_config, setup_logging


def make_bodies(n: int, radius: float, seed: int = 42):
    """Scatter bodies uniformly in a disk with small random velocities."""
    rng = np.random.default_rng(seed)
    r = radius * np.sqrt(rng.uniform(0.0, 1.0, size=n))
    phi = rng.uniform(0.0, 2.0 * np.pi, size=n)
    velocities = rng.normal(0.0, 1e3, size=(n, 2))
    masses = rng.uniform(1e28, 1e30, size=n)
    return [
        Body(Vector2(ri * np.cos(pi), ri * np.sin(pi)), Vector2(*v), m)
        for ri, pi, v, m in zip(r, phi, velocities, masses)
    ]


def main():
    """Run a short simulation and print diagnostics."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", help="Path to a .json or .yaml config file")
    parser.add_argument("--bodies", type=int, default=200)
    args = parser.parse_args()

    config = load_config(args.config) if args.config else Config(dt=1e4, n_steps=50)
    setup_logging(config.log_level)

    bodies = make_bodies(args.bodies, radius=config.region_length / 4.0)
    sim = Simulator.from_config(config, bodies)

    print(f"Running {config.method} with {len(bodies)} bodies...")
    print(f"Initial kinetic energy: {diagnostics.kinetic_energy(sim.bodies):.6e}")

    for step in range(config.n_steps):
        sim.step()
        if step % 10 == 0:
            com = diagnostics.center_of_mass(sim.bodies)
            print(f"Step {step}: Time={sim.time:.2e}, COM=({com[0]:.3e}, {com[1]:.3e})")

    print(f"Final kinetic energy: {diagnostics.kinetic_energy(sim.bodies):.6e}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
