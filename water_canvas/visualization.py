#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Real-Time Visualization Module
================================================================================

Project:        Water Canvas
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

This module draws the water simulation:
- Particle rendering for Matplotlib and Streamlit
- Live animation that drives one simulation tick per frame
- Energy history plots

Renderers only read particle positions; they never modify a particle set.
"""

import io
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import EllipseCollection
import matplotlib.animation as animation
from typing import Tuple, Optional, Sequence
from dataclasses import dataclass

from .simulation import WaterSimulation


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    particle_radius: float = 5.0
    particle_color: Tuple[float, float, float, float] = (0.0, 0.0, 1.0, 128 / 255)
    background_color: str = "black"
    title: str = "2D Water Simulation"
    dpi: int = 100


def figure_size(bounds: Tuple[float, float], dpi: int = 100) -> Tuple[float, float]:
    """Figure size in inches that maps one data unit to one pixel."""
    width, height = bounds
    return width / dpi, height / dpi


def render_particles_matplotlib(
    positions: np.ndarray,
    bounds: Tuple[float, float],
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render particles as filled circles on a black surface.

    The y axis points down, as on a window surface, so gravity pulls
    particles toward the bottom of the image.

    Args:
        positions: Nx2 array of positions
        bounds: (width, height) of the viewport
        config: Visualization configuration
        ax: Optional existing axes to draw on

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    width, height = bounds

    if ax is None:
        fig = plt.figure(figsize=figure_size(bounds, config.dpi), dpi=config.dpi)
        ax = fig.add_axes([0, 0, 1, 1])  # Full figure, no margins
    else:
        fig = ax.figure

    ax.clear()
    ax.set_facecolor(config.background_color)
    fig.patch.set_facecolor(config.background_color)

    n_particles = len(positions)
    if n_particles > 0:
        diameters = np.full(n_particles, 2.0 * config.particle_radius)
        circles = EllipseCollection(
            diameters, diameters, np.zeros(n_particles),
            units='xy',
            offsets=np.asarray(positions),
            offset_transform=ax.transData,
            facecolors=[config.particle_color],
            edgecolors='none'
        )
        ax.add_collection(circles)

    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')

    ax.set_xticks([])
    ax.set_yticks([])
    ax.axis('off')

    return fig


def render_particles_streamlit(
    positions: np.ndarray,
    bounds: Tuple[float, float],
    config: Optional[VisualizationConfig] = None
) -> bytes:
    """
    Render particles and return PNG bytes for Streamlit.

    Args:
        positions: Nx2 array of positions
        bounds: (width, height) of the viewport
        config: Visualization configuration

    Returns:
        PNG image as bytes
    """
    fig = render_particles_matplotlib(positions, bounds, config)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=fig.dpi,
                facecolor=fig.get_facecolor(), edgecolor='none')
    plt.close(fig)
    buf.seek(0)

    return buf.getvalue()


def render_energy_plot(
    ticks: Sequence[int],
    kinetic: Sequence[float],
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render kinetic energy vs tick.

    Args:
        ticks: Tick numbers
        kinetic: Kinetic energy at each tick
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    else:
        fig = ax.figure

    ax.clear()
    ax.plot(ticks, kinetic, 'r-', label='Kinetic', linewidth=1.5)

    ax.set_xlabel('Tick')
    ax.set_ylabel('Energy')
    ax.set_title('Kinetic Energy vs Tick')
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)

    return fig


def create_live_animation(
    simulation: WaterSimulation,
    n_frames: Optional[int] = None,
    interval_ms: int = 16,
    config: Optional[VisualizationConfig] = None
) -> animation.FuncAnimation:
    """
    Animate a simulation, advancing it one tick per frame.

    Each frame steps the simulation with the configured viewport and then
    repaints, mirroring a request-frame / step / paint loop.

    Args:
        simulation: Initialized WaterSimulation
        n_frames: Number of frames (None runs until the window closes)
        interval_ms: Delay between frames in milliseconds
        config: Visualization configuration

    Returns:
        Matplotlib animation
    """
    if config is None:
        config = VisualizationConfig(
            particle_radius=simulation.config.constants.particle_radius
        )

    bounds = simulation.config.bounds
    fig = plt.figure(figsize=figure_size(bounds, config.dpi), dpi=config.dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title(config.title)

    render_particles_matplotlib(simulation.positions, bounds, config, ax=ax)

    def update(frame):
        simulation.step()
        render_particles_matplotlib(
            simulation.positions, simulation.config.bounds, config, ax=ax
        )
        return ax,

    ani = animation.FuncAnimation(
        fig, update, frames=n_frames,
        interval=interval_ms, blit=False,
        cache_frame_data=False
    )

    return ani
