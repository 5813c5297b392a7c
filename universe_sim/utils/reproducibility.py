"""Seed handling for deterministic generation."""

import time
import numpy as np
from typing import Dict, Optional


def resolve_seed(seed: Optional[int]) -> int:
    """Turn a user seed into the seed actually used.

    Seed 0 (or None) is a sentinel for "not reproducible": the current
    wall-clock time since the Unix epoch is used instead, in nanoseconds so
    that two generations in quick succession still differ.

    Args:
        seed: Requested seed

    Returns:
        Seed to feed the random number generator
    """
    if not seed:
        return time.time_ns()
    return int(seed)


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Create a NumPy generator from a requested seed (see resolve_seed)."""
    return np.random.default_rng(resolve_seed(seed))


def get_seed_info(seed: Optional[int] = None) -> Dict[str, object]:
    """Describe how a requested seed resolves.

    Args:
        seed: Optional requested seed

    Returns:
        Dictionary with the requested seed, the resolved seed and whether the
        run is reproducible
    """
    resolved = resolve_seed(seed)
    return {
        'seed': seed,
        'resolved_seed': resolved,
        'reproducible': bool(seed),
    }
