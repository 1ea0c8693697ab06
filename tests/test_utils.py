#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Logging and Configuration Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
License:        MIT License
================================================================================
"""

import json
import logging

import pytest
from water_canvas.physics import SimulationConstants
from water_canvas.utils import setup_logging, load_config, load_constants


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_console_only(self, restore_root_logger):
        setup_logging("debug")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_writes_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "water.log"
        setup_logging("INFO", log_file=str(log_file))

        logging.getLogger("water_canvas.test").info("hello from the test")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "hello from the test" in log_file.read_text()

    def test_repeated_setup_does_not_duplicate(self, restore_root_logger):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(restore_root_logger.handlers) == 1


class TestLoadConfig:
    """Tests for JSON configuration loading."""

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"gravity": 0.25}))
        assert load_config(str(path)) == {"gravity": 0.25}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{gravity: ")
        with pytest.raises(json.JSONDecodeError):
            load_config(str(path))

    def test_load_constants(self, tmp_path):
        path = tmp_path / "constants.json"
        path.write_text(json.dumps({
            "gravity": 0.3,
            "damping": 0.9,
            "interactionRadius": 8.0,
            "interactionForce": 0.02
        }))
        assert load_constants(str(path)) == SimulationConstants(0.3, 0.9, 8.0, 0.02)

    def test_load_constants_unknown_option(self, tmp_path):
        path = tmp_path / "constants.json"
        path.write_text(json.dumps({"gravity": 0.3, "mass": 2.0}))
        with pytest.raises(ValueError):
            load_constants(str(path))
