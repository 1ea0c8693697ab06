#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Water Canvas - Command Line Interface
================================================================================

Project:        Water Canvas
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

Command line interface for running and testing the water simulation.
"""

import argparse
import numpy as np
import matplotlib.pyplot as plt
import time
from typing import Optional, Tuple

from water_canvas.physics import (
    SimulationConstants, calculate_total_momentum, check_containment
)
from water_canvas.simulation import create_water_simulation
from water_canvas.utils import setup_logging, load_constants
from water_canvas.visualization import (
    VisualizationConfig, render_particles_matplotlib, render_energy_plot,
    create_live_animation
)


def run_benchmark(
    constants: SimulationConstants,
    bounds: Tuple[float, float],
    n_particles: int = 500,
    n_steps: int = 1000,
    seed: Optional[int] = None
):
    """
    Run the simulation headless and report throughput and diagnostics.

    Args:
        constants: Simulation constants
        bounds: (width, height) of the viewport
        n_particles: Number of particles
        n_steps: Number of ticks
        seed: Random seed
    """
    print("=" * 60)
    print("Water Canvas - Headless Run")
    print("=" * 60)

    print(f"\nScattering {n_particles} particles over {bounds[0]:.0f}x{bounds[1]:.0f}...")
    sim = create_water_simulation(
        n_particles=n_particles,
        bounds=bounds,
        constants=constants,
        seed=seed
    )

    # First call compiles the kernel
    t_compile = time.time()
    sim.step()
    print(f"Kernel ready in {time.time() - t_compile:.2f} seconds")

    print(f"Running {n_steps} ticks...")

    ticks = []
    kinetic_energies = []
    contained = True

    t_start = time.time()

    for tick in range(n_steps):
        state = sim.step()

        if tick % 10 == 0:
            ticks.append(state.tick)
            kinetic_energies.append(state.kinetic_energy)
            contained = contained and check_containment(state.positions, bounds)

        if tick % 200 == 0:
            print(f"  Tick {state.tick:5d}: KE = {state.kinetic_energy:.2f}")

    t_end = time.time()

    print(f"\nSimulation completed in {t_end - t_start:.2f} seconds")
    print(f"Ticks per second: {n_steps / max(t_end - t_start, 1e-9):.1f}")

    state = sim.state
    momentum = calculate_total_momentum(state.velocities)
    mean_height = float(np.mean(state.positions[:, 1]))

    print(f"\nFinal State:")
    print(f"  Particles:       {state.n_particles}")
    print(f"  Kinetic Energy:  {state.kinetic_energy:.2f}")
    print(f"  Momentum:        ({momentum[0]:.2f}, {momentum[1]:.2f})")
    print(f"  Mean y:          {mean_height:.1f} of {bounds[1]:.0f}")

    if contained:
        print("  ✓ All particles stayed inside the viewport")
    else:
        print("  ⚠ Particles escaped the viewport")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    render_energy_plot(ticks, kinetic_energies, ax=axes[0])

    vis_config = VisualizationConfig(particle_radius=constants.particle_radius)
    render_particles_matplotlib(state.positions, bounds, vis_config, ax=axes[1])
    axes[1].set_title('Final Configuration')

    plt.tight_layout()
    plt.savefig('water_benchmark.png', dpi=150)
    print(f"\nPlot saved to water_benchmark.png")
    plt.show()


def run_live(
    constants: SimulationConstants,
    bounds: Tuple[float, float],
    n_particles: int = 500,
    seed: Optional[int] = None
):
    """Open a window and animate the simulation until it is closed."""
    sim = create_water_simulation(
        n_particles=n_particles,
        bounds=bounds,
        constants=constants,
        seed=seed
    )

    ani = create_live_animation(sim)
    plt.show()
    return ani


def run_animation(
    constants: SimulationConstants,
    bounds: Tuple[float, float],
    n_particles: int = 500,
    n_frames: int = 300,
    seed: Optional[int] = None
):
    """
    Save an animation of the simulation as a GIF.

    Args:
        constants: Simulation constants
        bounds: (width, height) of the viewport
        n_particles: Number of particles
        n_frames: Number of frames (one tick per frame)
        seed: Random seed
    """
    print("=" * 60)
    print("Water Canvas - Animation")
    print("=" * 60)

    print(f"\nInitializing {n_particles} particles...")
    sim = create_water_simulation(
        n_particles=n_particles,
        bounds=bounds,
        constants=constants,
        seed=seed
    )

    print(f"Creating animation with {n_frames} frames...")
    ani = create_live_animation(sim, n_frames=n_frames, interval_ms=33)

    print("Saving animation (this may take a while)...")
    ani.save('water_animation.gif', writer='pillow', fps=30)
    print("Animation saved to water_animation.gif")


def build_constants(args: argparse.Namespace) -> SimulationConstants:
    """Constants from an optional JSON file, overridden by CLI flags."""
    constants = load_constants(args.config) if args.config else SimulationConstants()
    return constants.with_overrides(
        gravity=args.gravity,
        damping=args.damping,
        interaction_radius=args.interaction_radius,
        interaction_force=args.interaction_force
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Water Canvas - 2D Particle Water Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --run               Open a live simulation window
  python main.py --test              Run headless and report diagnostics
  python main.py --animate           Save an animation
  python main.py --app               Launch Streamlit app
        """
    )

    parser.add_argument('--run', action='store_true',
                       help='Open a live simulation window')
    parser.add_argument('--test', action='store_true',
                       help='Run headless benchmark and diagnostics')
    parser.add_argument('--animate', action='store_true',
                       help='Save an animation to water_animation.gif')
    parser.add_argument('--app', action='store_true',
                       help='Launch Streamlit web app')
    parser.add_argument('--particles', '-n', type=int, default=500,
                       help='Number of particles (default: 500)')
    parser.add_argument('--steps', '-s', type=int, default=1000,
                       help='Number of ticks for --test (default: 1000)')
    parser.add_argument('--width', type=float, default=800.0,
                       help='Viewport width (default: 800)')
    parser.add_argument('--height', type=float, default=600.0,
                       help='Viewport height (default: 600)')
    parser.add_argument('--gravity', type=float, default=None,
                       help='Gravity per tick (default: 0.5)')
    parser.add_argument('--damping', type=float, default=None,
                       help='Velocity kept after a wall bounce (default: 0.5)')
    parser.add_argument('--interaction-radius', type=float, default=None,
                       help='Repulsion radius (default: 10)')
    parser.add_argument('--interaction-force', type=float, default=None,
                       help='Repulsion per unit overlap (default: 0.05)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for the initial layout')
    parser.add_argument('--config', type=str, default=None,
                       help='JSON file with simulation constants')
    parser.add_argument('--log-level', type=str, default='INFO',
                       help='Logging level (default: INFO)')

    return parser


def main():
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.log_level)

    constants = build_constants(args)
    bounds = (args.width, args.height)

    if args.run:
        run_live(constants, bounds, n_particles=args.particles, seed=args.seed)
    elif args.test:
        run_benchmark(constants, bounds, n_particles=args.particles,
                      n_steps=args.steps, seed=args.seed)
    elif args.animate:
        run_animation(constants, bounds, n_particles=args.particles, seed=args.seed)
    elif args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --run, --test, --animate, or --app")


if __name__ == "__main__":
    main()
