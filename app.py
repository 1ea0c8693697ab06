#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Water Canvas - Interactive Streamlit Application
================================================================================

Project:        Water Canvas
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

This is the Streamlit front end for the water simulation.
Users can:
- Scatter particles over a viewport of any size
- Tune gravity, damping and repulsion while the simulation runs
- Resize the viewport and watch particles get pushed back inside
- Follow kinetic energy over time
"""

import streamlit as st
import numpy as np
import matplotlib.pyplot as plt
import time

from water_canvas.physics import SimulationConstants, calculate_total_momentum
from water_canvas.simulation import create_water_simulation
from water_canvas.visualization import (
    VisualizationConfig, render_particles_streamlit
)


# Page configuration
st.set_page_config(
    page_title="Water Canvas",
    page_icon="💧",
    layout="wide",
    initial_sidebar_state="expanded"
)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'simulation' not in st.session_state:
        st.session_state.simulation = None
    if 'running' not in st.session_state:
        st.session_state.running = False
    if 'energy_history' not in st.session_state:
        st.session_state.energy_history = {'tick': [], 'kinetic': []}


def render_sidebar():
    """Render the sidebar with controls."""
    st.sidebar.title("💧 Water Canvas")

    st.sidebar.markdown("""
    ---
    Particles fall under **gravity**, push each other apart when closer
    than the **interaction radius**, and lose energy every time they
    bounce off a wall.
    ---
    """)

    st.sidebar.subheader("⚙️ Simulation Setup")

    n_particles = st.sidebar.slider(
        "Number of Particles",
        min_value=50, max_value=1000, value=500, step=50,
        help="More particles = slower ticks (every pair is checked)"
    )

    width = st.sidebar.slider("Width", min_value=200, max_value=1200, value=800, step=50)
    height = st.sidebar.slider("Height", min_value=200, max_value=900, value=600, step=50)

    seed = st.sidebar.number_input("Seed", min_value=0, value=0, step=1)

    st.sidebar.subheader("🧪 Physics")

    constants = SimulationConstants(
        gravity=st.sidebar.slider("Gravity", 0.0, 2.0, 0.5, 0.05),
        damping=st.sidebar.slider("Wall Damping", 0.0, 1.0, 0.5, 0.05),
        interaction_radius=st.sidebar.slider("Interaction Radius", 2.0, 30.0, 10.0, 1.0),
        interaction_force=st.sidebar.slider("Interaction Force", 0.0, 0.5, 0.05, 0.01)
    )

    if st.sidebar.button("🚀 Initialize Simulation", use_container_width=True):
        st.session_state.simulation = create_water_simulation(
            n_particles=n_particles,
            bounds=(float(width), float(height)),
            constants=constants,
            seed=int(seed)
        )
        st.session_state.energy_history = {'tick': [], 'kinetic': []}
        st.session_state.running = False
        st.rerun()

    # Live updates to a running simulation
    sim = st.session_state.simulation
    if sim is not None:
        sim.config.constants = constants
        if sim.config.bounds != (float(width), float(height)):
            sim.resize(width, height)


def run_simulation_step(n_steps: int = 1):
    """Run simulation for n ticks and update history."""
    sim = st.session_state.simulation
    if sim is None:
        return

    for _ in range(n_steps):
        state = sim.step()

    history = st.session_state.energy_history
    history['tick'].append(state.tick)
    history['kinetic'].append(state.kinetic_energy)

    # Keep history limited
    max_history = 500
    if len(history['tick']) > max_history:
        for key in history:
            history[key] = history[key][-max_history:]


def render_main_content():
    """Render the main simulation content."""
    sim = st.session_state.simulation

    if sim is None:
        st.title("💧 Water Canvas")
        st.markdown("""
        ## A 2D particle water simulation

        Every tick, each particle:
        1. gains a little downward velocity (**gravity**),
        2. is pushed away from neighbours closer than the **interaction radius**,
        3. moves by its velocity,
        4. bounces off the walls, keeping only a fraction of its speed (**damping**).

        *👈 Use the sidebar to begin!*
        """)
        return

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Particles")

        btn_col1, btn_col2, btn_col3, btn_col4 = st.columns(4)

        with btn_col1:
            run_label = "▶️ Run" if not st.session_state.running else "⏸️ Pause"
            if st.button(run_label, use_container_width=True, key="run_pause_btn"):
                st.session_state.running = not st.session_state.running
                st.rerun()

        with btn_col2:
            if st.button("⏭️ Step (x10)", use_container_width=True):
                run_simulation_step(10)

        with btn_col3:
            if st.button("🔄 Reset", use_container_width=True):
                st.session_state.simulation = None
                st.session_state.running = False
                st.rerun()

        with btn_col4:
            st.metric("Ticks", sim.state.tick)

        if st.session_state.running:
            run_simulation_step(2)

        vis_config = VisualizationConfig(
            particle_radius=sim.config.constants.particle_radius
        )
        img_bytes = render_particles_streamlit(
            sim.positions, sim.config.bounds, vis_config
        )
        st.image(img_bytes)

    with col2:
        st.subheader("Diagnostics")

        state = sim.state
        momentum = calculate_total_momentum(state.velocities)

        met1, met2 = st.columns(2)
        with met1:
            st.metric("Particles", state.n_particles)
        with met2:
            st.metric("KE", f"{state.kinetic_energy:.1f}")

        met3, met4 = st.columns(2)
        with met3:
            st.metric("Momentum x", f"{momentum[0]:.2f}")
        with met4:
            st.metric("Momentum y", f"{momentum[1]:.2f}")

        st.metric("Mean y", f"{float(np.mean(state.positions[:, 1])):.1f}")
        st.metric("Ticks / s", f"{sim.steps_per_second:.0f}")

        history = st.session_state.energy_history
        if len(history['tick']) > 1:
            st.markdown("### Kinetic Energy")
            fig, ax = plt.subplots(figsize=(6, 3))
            ax.plot(history['tick'], history['kinetic'], 'r-', linewidth=1)
            ax.set_xlabel('Tick')
            ax.set_ylabel('KE')
            ax.set_facecolor('#1a1a2e')
            fig.patch.set_facecolor('#1a1a2e')
            ax.tick_params(colors='white')
            ax.xaxis.label.set_color('white')
            ax.yaxis.label.set_color('white')
            for spine in ax.spines.values():
                spine.set_color('white')
            plt.tight_layout()
            st.pyplot(fig)
            plt.close()

    # Auto-refresh when running
    if st.session_state.running:
        time.sleep(0.016)
        st.rerun()


def main():
    """Main application entry point."""
    initialize_session_state()
    render_sidebar()
    render_main_content()


if __name__ == "__main__":
    main()
