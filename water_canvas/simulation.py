#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Water Simulation Engine
================================================================================

Project:        Water Canvas
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

Particle set container, the functional step() entry point, random
initialization, and the WaterSimulation driver that threads one particle
set through successive animation frames.
"""

import logging
import time
import numpy as np
from typing import Tuple, Optional
from dataclasses import dataclass, field, replace

from .physics import (
    SimulationConstants,
    advance_particles,
    calculate_kinetic_energy
)


logger = logging.getLogger(__name__)

DEFAULT_BOUNDS = (800.0, 600.0)
DEFAULT_PARTICLE_COUNT = 500


@dataclass
class ParticleSet:
    """Positions and velocities of a fixed number of unit-mass particles."""
    positions: np.ndarray
    velocities: np.ndarray

    @property
    def n_particles(self) -> int:
        return self.positions.shape[0]

    def copy(self) -> "ParticleSet":
        return ParticleSet(self.positions.copy(), self.velocities.copy())

    def read_view(self) -> np.ndarray:
        """Read-only view of the positions, for renderers."""
        view = self.positions.view()
        view.flags.writeable = False
        return view


def _as_particle_arrays(particles: ParticleSet) -> ParticleSet:
    # The kernel needs contiguous float64 arrays
    return ParticleSet(
        np.ascontiguousarray(particles.positions, dtype=np.float64),
        np.ascontiguousarray(particles.velocities, dtype=np.float64)
    )


def step_in_place(
    particles: ParticleSet,
    bounds: Tuple[float, float],
    constants: Optional[SimulationConstants] = None
) -> ParticleSet:
    """
    Advance a particle set by one tick, mutating it.

    The arrays are updated where they are, so they must already be
    C-contiguous float64; use step() for any other input.

    Args:
        particles: Particle set to advance (float64, C-contiguous)
        bounds: (width, height) of the viewport for this tick
        constants: Simulation constants (defaults if None)

    Returns:
        The same particle set

    Raises:
        TypeError: If either array is not C-contiguous float64
    """
    for name, array in (('positions', particles.positions),
                        ('velocities', particles.velocities)):
        if array.dtype != np.float64 or not array.flags.c_contiguous:
            raise TypeError(
                f"step_in_place needs C-contiguous float64 {name}, "
                f"got {array.dtype} (use step() to convert)"
            )

    if constants is None:
        constants = SimulationConstants()

    width, height = bounds
    advance_particles(
        particles.positions,
        particles.velocities,
        float(width),
        float(height),
        constants.gravity,
        constants.damping,
        constants.interaction_radius,
        constants.interaction_force
    )
    return particles


def step(
    particles: ParticleSet,
    bounds: Tuple[float, float],
    constants: Optional[SimulationConstants] = None
) -> ParticleSet:
    """
    Return the particle set one tick later.

    The input set is left untouched. Bounds are read for this call only,
    so a resized window takes effect immediately.

    Args:
        particles: Particle set from the previous tick
        bounds: (width, height) of the viewport
        constants: Simulation constants (defaults if None)

    Returns:
        New particle set
    """
    advanced = _as_particle_arrays(particles.copy())
    return step_in_place(advanced, bounds, constants)


def random_particle_set(
    n_particles: int = DEFAULT_PARTICLE_COUNT,
    bounds: Tuple[float, float] = DEFAULT_BOUNDS,
    seed: Optional[int] = None
) -> ParticleSet:
    """
    Create particles scattered uniformly over the viewport, at rest.

    Args:
        n_particles: Number of particles
        bounds: (width, height); positions are drawn from [0, w) x [0, h)
        seed: Optional seed for reproducible layouts

    Returns:
        Initial particle set
    """
    rng = np.random.default_rng(seed)
    width, height = bounds

    positions = rng.random((n_particles, 2))
    positions[:, 0] *= width
    positions[:, 1] *= height

    velocities = np.zeros((n_particles, 2))

    return ParticleSet(positions, velocities)


@dataclass
class SimulationConfig:
    """Configuration for the water simulation."""
    # Viewport (width, height) used when step() is called without bounds
    bounds: Tuple[float, float] = DEFAULT_BOUNDS

    constants: SimulationConstants = field(default_factory=SimulationConstants)

    # Initial state
    n_particles: int = DEFAULT_PARTICLE_COUNT
    seed: Optional[int] = None


@dataclass
class SimulationState:
    """Current state of the simulation."""
    particles: ParticleSet
    tick: int = 0
    kinetic_energy: float = 0.0

    @property
    def positions(self) -> np.ndarray:
        return self.particles.positions

    @property
    def velocities(self) -> np.ndarray:
        return self.particles.velocities

    @property
    def n_particles(self) -> int:
        return self.particles.n_particles


class WaterSimulation:
    """
    Frame-by-frame driver for the particle step.

    Each tick is computed into a fresh particle buffer which then becomes
    the current state. States returned by earlier ticks keep their own
    arrays, so readers never observe a half-finished or later tick.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        # Own copy; resize() updates it
        self.config = replace(config) if config is not None else SimulationConfig()
        self.state: Optional[SimulationState] = None

        # Performance tracking
        self.steps_per_second = 0.0
        self._last_time = time.time()
        self._step_count = 0

    def initialize_random(
        self,
        n_particles: Optional[int] = None,
        seed: Optional[int] = None
    ) -> SimulationState:
        """
        Scatter particles uniformly over the configured viewport, at rest.

        Args:
            n_particles: Number of particles (config value if None)
            seed: Random seed (config value if None)

        Returns:
            Initial simulation state
        """
        if n_particles is None:
            n_particles = self.config.n_particles
        if seed is None:
            seed = self.config.seed

        particles = random_particle_set(n_particles, self.config.bounds, seed)
        logger.info(
            "Initialized %d particles in %.0fx%.0f viewport",
            n_particles, self.config.bounds[0], self.config.bounds[1]
        )
        return self.initialize_from(particles)

    def initialize_from(self, particles: ParticleSet) -> SimulationState:
        """Start the simulation from an existing particle set (copied)."""
        front = _as_particle_arrays(particles.copy())
        self.state = SimulationState(
            particles=front,
            tick=0,
            kinetic_energy=calculate_kinetic_energy(front.velocities)
        )
        return self.state

    def resize(self, width: float, height: float) -> None:
        """Change the viewport used by subsequent ticks."""
        self.config.bounds = (float(width), float(height))
        logger.info("Viewport resized to %.0fx%.0f", width, height)

    @property
    def positions(self) -> np.ndarray:
        """Read-only positions of the current tick."""
        if self.state is None:
            raise RuntimeError("Simulation not initialized")
        return self.state.particles.read_view()

    def step(self, bounds: Optional[Tuple[float, float]] = None) -> SimulationState:
        """
        Advance the simulation by one tick.

        Args:
            bounds: (width, height) for this tick; configured bounds if None

        Returns:
            Updated simulation state
        """
        if self.state is None:
            raise RuntimeError("Simulation not initialized")

        if bounds is None:
            bounds = self.config.bounds

        # Compute the next tick off-screen; the previous state keeps its arrays
        advanced = step_in_place(
            self.state.particles.copy(), bounds, self.config.constants
        )

        self.state = SimulationState(
            particles=advanced,
            tick=self.state.tick + 1,
            kinetic_energy=calculate_kinetic_energy(advanced.velocities)
        )

        # Track performance
        self._step_count += 1
        if self._step_count % 100 == 0:
            current_time = time.time()
            elapsed = current_time - self._last_time
            if elapsed > 0:
                self.steps_per_second = 100.0 / elapsed
            self._last_time = current_time

        return self.state

    def run(self, n_ticks: int) -> SimulationState:
        """Run simulation for n_ticks."""
        for _ in range(n_ticks):
            self.step()
        return self.state


def create_water_simulation(
    n_particles: int = DEFAULT_PARTICLE_COUNT,
    bounds: Tuple[float, float] = DEFAULT_BOUNDS,
    constants: Optional[SimulationConstants] = None,
    seed: Optional[int] = None
) -> WaterSimulation:
    """
    Create a simulation with randomly scattered resting particles.

    Args:
        n_particles: Number of particles
        bounds: (width, height) of the viewport
        constants: Simulation constants (defaults if None)
        seed: Random seed

    Returns:
        Initialized WaterSimulation
    """
    config = SimulationConfig(
        bounds=bounds,
        constants=constants or SimulationConstants(),
        n_particles=n_particles,
        seed=seed
    )

    sim = WaterSimulation(config)
    sim.initialize_random()

    return sim
