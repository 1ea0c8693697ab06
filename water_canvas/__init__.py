#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Water Canvas
================================================================================

Project:        Water Canvas
Description:    Real-time 2D particle "water" simulation with gravity,
                short-range repulsion and damped wall bounces

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

This package implements a real-time particle simulation featuring:
- Per-tick gravity, pairwise repulsion and semi-implicit Euler integration
- Damped collisions with the viewport walls
- Numba-compiled update kernel
- Matplotlib and Streamlit front ends

Modules:
    - physics: Simulation constants and the per-tick update kernel
    - simulation: Particle sets, step(), and the frame-by-frame driver
    - visualization: Rendering of particle states
    - utils: Logging setup and JSON configuration loading
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
