"""Utility functions for reproducibility and configuration."""

from universe_sim.utils.reproducibility import resolve_seed, make_rng, get_seed_info
from universe_sim.utils.config import load_config, save_config, Config

__all__ = ["resolve_seed", "make_rng", "get_seed_info", "load_config", "save_config", "Config"]
