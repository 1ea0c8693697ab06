#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Particle Step Engine
================================================================================

Project:        Water Canvas
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

This module implements the per-tick update of the 2D water simulation.
Each tick, for every particle i in index order:

    1. v_i.y += g                              (gravity)
    2. for j > i within radius R:              (pairwise repulsion)
           F = (R - |r_ij|) * k
           v_i -= F * r̂_ij,  v_j += F * r̂_ij
    3. x_i += v_i                              (semi-implicit Euler, dt = 1)
    4. clamp x_i to the walls, v *= -d         (damped reflection)

Where:
    - g: Gravity acceleration per tick
    - R: Interaction radius
    - k: Interaction force coefficient
    - d: Fraction of velocity kept after hitting a wall

Particle i writes the velocity of particle j before j is itself processed,
so results depend on index order. The kernel keeps that order exactly.
"""

import numpy as np
from numba import jit
from typing import Any, Mapping, Tuple
from dataclasses import dataclass, fields, replace


# Configuration option names as they appear in JSON config files
_OPTION_ALIASES = {
    "gravity": "gravity",
    "damping": "damping",
    "interactionRadius": "interaction_radius",
    "interaction_radius": "interaction_radius",
    "interactionForce": "interaction_force",
    "interaction_force": "interaction_force",
}


@dataclass(frozen=True)
class SimulationConstants:
    """
    Tunable constants of the particle simulation.

    Defaults reproduce the classic "2D Water Simulation" look in pixel
    units: 500 droplets falling in an 800x600 window.
    """
    gravity: float = 0.5              # Added to vy every tick
    damping: float = 0.5              # Velocity kept after a wall bounce
    interaction_radius: float = 10.0  # Max distance at which particles repel
    interaction_force: float = 0.05   # Repulsion per unit of overlap

    @property
    def particle_radius(self) -> float:
        """Render radius of a particle (half the interaction radius)."""
        return self.interaction_radius / 2.0

    def with_overrides(self, **overrides: float) -> "SimulationConstants":
        """Return a copy with the given fields replaced (None values ignored)."""
        changes = {k: float(v) for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "SimulationConstants":
        """
        Build constants from a configuration mapping.

        Recognized options are gravity, damping, interactionRadius and
        interactionForce (snake_case spellings are accepted as well).
        Options not present keep their default values.

        Args:
            options: Mapping of option name to numeric value

        Returns:
            SimulationConstants

        Raises:
            ValueError: If an option name is not recognized
        """
        unknown = sorted(k for k in options if k not in _OPTION_ALIASES)
        if unknown:
            known = ", ".join(sorted(f.name for f in fields(cls)))
            raise ValueError(
                f"Unknown simulation option(s): {', '.join(unknown)} "
                f"(expected one of: {known})"
            )

        kwargs = {_OPTION_ALIASES[k]: float(v) for k, v in options.items()}
        return cls(**kwargs)


@jit(nopython=True, cache=True)
def repulsion_magnitude(dist: float, radius: float, coefficient: float) -> float:
    """
    Magnitude of the repulsive force between two particles.

    F(r) = (R - r) * k  for 0 < r < R, zero otherwise.

    The force grows linearly as particles approach and vanishes at the
    edge of the interaction radius.

    Args:
        dist: Center-to-center distance
        radius: Interaction radius R
        coefficient: Force coefficient k

    Returns:
        Force magnitude (always >= 0)
    """
    if dist >= radius or dist <= 0.0:
        return 0.0
    return (radius - dist) * coefficient


@jit(nopython=True, cache=True)
def pair_impulse(
    positions: np.ndarray,
    i: int,
    j: int,
    radius: float,
    coefficient: float
) -> Tuple[float, float]:
    """
    Velocity change that particle j receives from the pair (i, j).

    Particle i receives the exact negation. Pairs farther apart than the
    interaction radius, or sitting on the same point, give (0, 0).

    Args:
        positions: Nx2 array of positions
        i: Index of the first particle
        j: Index of the second particle
        radius: Interaction radius R
        coefficient: Force coefficient k

    Returns:
        (fx, fy) impulse added to j and subtracted from i
    """
    dx = positions[j, 0] - positions[i, 0]
    dy = positions[j, 1] - positions[i, 1]
    dist_sq = dx * dx + dy * dy

    # Out of range, or coincident (direction undefined)
    if dist_sq >= radius * radius or dist_sq == 0.0:
        return 0.0, 0.0

    dist = np.sqrt(dist_sq)
    force = repulsion_magnitude(dist, radius, coefficient)
    nx = dx / dist
    ny = dy / dist
    return force * nx, force * ny


@jit(nopython=True, cache=True)
def resolve_wall_collision(
    positions: np.ndarray,
    velocities: np.ndarray,
    i: int,
    width: float,
    height: float,
    damping: float
) -> None:
    """
    Clamp particle i inside [0, width] x [0, height] and reflect its velocity.

    The four walls are checked independently, so a particle in a corner
    bounces off both walls in the same tick.
    """
    if positions[i, 1] > height:
        positions[i, 1] = height
        velocities[i, 1] *= -damping
    if positions[i, 1] < 0.0:
        positions[i, 1] = 0.0
        velocities[i, 1] *= -damping
    if positions[i, 0] < 0.0:
        positions[i, 0] = 0.0
        velocities[i, 0] *= -damping
    if positions[i, 0] > width:
        positions[i, 0] = width
        velocities[i, 0] *= -damping


@jit(nopython=True, cache=True)
def advance_particles(
    positions: np.ndarray,
    velocities: np.ndarray,
    width: float,
    height: float,
    gravity: float,
    damping: float,
    radius: float,
    coefficient: float
) -> None:
    """
    Advance all particles by one tick, in place.

    Every unordered pair is visited once, O(N²) per tick. The loop is
    sequential: particle i is fully integrated and clamped before i + 1
    starts, and it already sees the impulses given to it by lower indices.

    Args:
        positions: Nx2 array of positions (modified)
        velocities: Nx2 array of velocities (modified)
        width: Viewport width for this tick
        height: Viewport height for this tick
        gravity: Gravity acceleration
        damping: Wall damping factor
        radius: Interaction radius
        coefficient: Interaction force coefficient
    """
    n_particles = positions.shape[0]

    for i in range(n_particles):
        # Gravity
        velocities[i, 1] += gravity

        # Repulsion from every later particle
        for j in range(i + 1, n_particles):
            dx = positions[j, 0] - positions[i, 0]
            dy = positions[j, 1] - positions[i, 1]
            dist_sq = dx * dx + dy * dy
            if dist_sq < radius * radius and dist_sq > 0.0:
                fx, fy = pair_impulse(positions, i, j, radius, coefficient)
                velocities[i, 0] -= fx
                velocities[i, 1] -= fy
                velocities[j, 0] += fx
                velocities[j, 1] += fy

        # Semi-implicit Euler with unit tick
        positions[i, 0] += velocities[i, 0]
        positions[i, 1] += velocities[i, 1]

        resolve_wall_collision(positions, velocities, i, width, height, damping)


def calculate_kinetic_energy(velocities: np.ndarray) -> float:
    """
    Calculate total kinetic energy.

    KE = Σ (1/2) v²  (unit mass)

    Args:
        velocities: Nx2 array of velocities

    Returns:
        Total kinetic energy
    """
    return 0.5 * float(np.sum(velocities ** 2))


def calculate_total_momentum(velocities: np.ndarray) -> np.ndarray:
    """Vector sum of all velocities (total momentum for unit masses)."""
    return np.sum(velocities, axis=0)


def check_containment(positions: np.ndarray, bounds: Tuple[float, float]) -> bool:
    """
    Check that every particle lies inside the viewport.

    Args:
        positions: Nx2 array of positions
        bounds: (width, height) of the viewport

    Returns:
        True if 0 <= x <= width and 0 <= y <= height for all particles
    """
    width, height = bounds
    return bool(
        np.all(positions >= 0.0)
        and np.all(positions[:, 0] <= width)
        and np.all(positions[:, 1] <= height)
    )
