#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.collections import EllipseCollection
from water_canvas.simulation import create_water_simulation
from water_canvas.visualization import (
    VisualizationConfig, figure_size, render_particles_matplotlib,
    render_particles_streamlit, render_energy_plot, create_live_animation
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


class TestVisualizationConfig:
    """Tests for renderer configuration."""

    def test_defaults(self):
        config = VisualizationConfig()
        assert config.particle_radius == 5.0
        assert config.background_color == "black"
        assert config.title == "2D Water Simulation"

    def test_figure_size_one_unit_per_pixel(self):
        assert figure_size((800.0, 600.0), dpi=100) == (8.0, 6.0)


class TestRenderParticles:
    """Tests for particle rendering."""

    def test_draws_one_circle_per_particle(self):
        positions = np.array([[10.0, 20.0], [30.0, 40.0], [50.0, 60.0]])
        fig = render_particles_matplotlib(positions, (100.0, 80.0))
        ax = fig.axes[0]
        collections = [c for c in ax.collections if isinstance(c, EllipseCollection)]
        assert len(collections) == 1
        assert len(collections[0].get_offsets()) == 3

    def test_y_axis_points_down(self):
        fig = render_particles_matplotlib(np.zeros((1, 2)), (100.0, 80.0))
        ax = fig.axes[0]
        assert ax.get_xlim() == (0.0, 100.0)
        assert ax.get_ylim() == (80.0, 0.0)

    def test_does_not_modify_positions(self):
        positions = np.array([[10.0, 20.0]])
        render_particles_matplotlib(positions, (100.0, 80.0))
        np.testing.assert_array_equal(positions, [[10.0, 20.0]])

    def test_empty_set(self):
        fig = render_particles_matplotlib(np.zeros((0, 2)), (100.0, 80.0))
        assert len(fig.axes[0].collections) == 0

    def test_reuses_axes(self):
        fig, ax = plt.subplots()
        result = render_particles_matplotlib(np.ones((2, 2)), (10.0, 10.0), ax=ax)
        assert result is fig

    def test_accepts_read_only_view(self):
        sim = create_water_simulation(n_particles=10, bounds=(100.0, 100.0), seed=0)
        fig = render_particles_matplotlib(sim.positions, sim.config.bounds)
        assert fig is not None

    def test_streamlit_png(self):
        data = render_particles_streamlit(np.array([[5.0, 5.0]]), (40.0, 30.0))
        assert data[:8] == b'\x89PNG\r\n\x1a\n'


class TestEnergyPlot:
    """Tests for the energy history plot."""

    def test_plots_series(self):
        fig = render_energy_plot([0, 1, 2], [0.0, 1.5, 2.5])
        line = fig.axes[0].get_lines()[0]
        np.testing.assert_array_equal(line.get_ydata(), [0.0, 1.5, 2.5])


class TestLiveAnimation:
    """Tests for the animation frame driver."""

    def test_returns_animation(self):
        sim = create_water_simulation(n_particles=10, bounds=(100.0, 100.0), seed=0)
        ani = create_live_animation(sim, n_frames=3)
        assert isinstance(ani, FuncAnimation)

    def test_saving_steps_simulation(self, tmp_path):
        sim = create_water_simulation(n_particles=10, bounds=(100.0, 100.0), seed=0)
        ani = create_live_animation(sim, n_frames=3)
        ani.save(str(tmp_path / "water.gif"), writer='pillow', fps=10)
        assert sim.state.tick >= 3
        assert (tmp_path / "water.gif").exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
