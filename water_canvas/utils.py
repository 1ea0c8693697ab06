#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Logging and Configuration Helpers
================================================================================

Project:        Water Canvas
Module:         utils.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================
"""

import json
import logging
import logging.handlers
import os
from typing import Any, Dict, Optional

from .physics import SimulationConstants


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_format: str = DEFAULT_LOG_FORMAT
) -> None:
    """
    Configure the root logger.

    Logs go to the console, and also to a rotating file when log_file is
    given (1 MB per file, 5 backups).

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO")
        log_file: Optional path of a log file
        log_format: Format string for log records
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplication
    if root.hasHandlers():
        root.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.debug("Log level set to %s", level.upper())


def load_config(path: str) -> Dict[str, Any]:
    """
    Load a JSON configuration file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    logging.info("Loading configuration from %s", path)
    try:
        with open(path, "r") as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error("Configuration file not found: %s", path)
        raise
    except json.JSONDecodeError as e:
        logging.error("Could not parse configuration file %s: %s", path, e)
        raise
    return config


def load_constants(path: str) -> SimulationConstants:
    """
    Load simulation constants from a JSON file.

    The file holds an object such as
    {"gravity": 0.5, "damping": 0.5, "interactionRadius": 10.0,
    "interactionForce": 0.05}; missing options keep their defaults.
    """
    return SimulationConstants.from_dict(load_config(path))
