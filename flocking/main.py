"""
Main entry point for the flocking simulation.

Run with:
    python -m flocking.main                          # Windowed simulation
    python -m flocking.main --headless --ticks 1000  # No display, print summary
    python -m flocking.main --seed 42                # Reproducible flock
"""

import random
from typing import Optional


def run_interactive(seed: Optional[int] = None):
    """Run the windowed simulation."""
    from .simulation.interactive import Simulation
    from .core.config import SimulationConfig

    print("=" * 60)
    print("Boids Flocking Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print("\nStarting simulation...")

    config = SimulationConfig(seed=seed)
    sim = Simulation(config, random.Random(seed))
    sim.run()


def run_headless(ticks: int = 1000, seed: Optional[int] = None):
    """
    Run the simulation without a display and print a summary.

    Args:
        ticks: Number of ticks to run
        seed: Random seed for the initial flock

    Returns:
        Result dictionary from HeadlessSimulation.run
    """
    from .simulation.headless import HeadlessSimulation
    from .core.config import SimulationConfig

    config = SimulationConfig(seed=seed)

    print("=" * 60)
    print("HEADLESS FLOCKING RUN")
    print("=" * 60)
    print(f"Boids: {config.boidCount}")
    print(f"Ticks: {ticks}")
    if seed is not None:
        print(f"Seed: {seed}")
    print()

    sim = HeadlessSimulation(config, random.Random(seed))
    result = sim.run(ticks)

    initial = result["initial_stats"]
    final = result["final_stats"]
    agg = result["aggregates"]

    print(f"Avg Speed: {initial['avg_speed']:.2f} -> {final['avg_speed']:.2f}")
    print(f"Cohesion: {initial['flock_cohesion']:.1f} -> {final['flock_cohesion']:.1f}")
    print(f"Out of bounds (final): {final['out_of_bounds']}")
    if agg:
        print(f"Mean cohesion over run: {agg['flock_cohesion_mean']:.1f} "
              f"± {agg['flock_cohesion_std']:.1f}")
    print(f"\nElapsed: {result['elapsed_time_seconds']:.2f}s")

    return result


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Boids Flocking Simulation")
    parser.add_argument("--headless", action="store_true", help="Run without a display")
    parser.add_argument("--ticks", type=int, default=1000, help="Number of ticks for a headless run")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the initial flock")

    args = parser.parse_args(argv)

    if args.headless:
        run_headless(ticks=args.ticks, seed=args.seed)
    else:
        run_interactive(seed=args.seed)


if __name__ == "__main__":
    main()
