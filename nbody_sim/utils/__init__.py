"""Utility functions for configuration and logging."""

from nbody_sim.utils.config import load_config, save_config, Config
from nbody_sim.utils.log_setup import setup_logging

__all__ = ["load_config", "save_config", "Config", "setup_logging"]
