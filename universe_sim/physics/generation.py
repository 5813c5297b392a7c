"""Procedural generation of an initial body population."""

import numpy as np
from typing import List, Tuple
from universe_sim.physics.body import Body
from universe_sim.physics.settings import GenerationSettings

TWO_PI = 2.0 * np.pi


def sample_range(rng: np.random.Generator, value_range: Tuple[float, float]) -> float:
    """Draw uniformly from [start, end).

    An empty range (start >= end) returns start without consuming a draw.
    """
    start, end = value_range
    if not start < end:
        return float(start)
    return float(rng.uniform(start, end))


def generate_bodies(settings: GenerationSettings, rng: np.random.Generator) -> List[Body]:
    """Generate bodies on random rays from the origin.

    Per body the draws are, in order: position angle, velocity angle (only
    when velocities are not tangential), position magnitude, velocity
    magnitude, mass.

    Args:
        settings: Generation settings
        rng: Seeded random number generator

    Returns:
        List of settings.body_count bodies in generation order
    """
    bodies = []
    for _ in range(settings.body_count):
        position_theta = float(rng.uniform(0.0, TWO_PI))
        if settings.tangential_velocity:
            # Perpendicular to the radius vector
            velocity_theta = position_theta - np.pi / 2.0
        else:
            velocity_theta = float(rng.uniform(0.0, TWO_PI))

        position_magnitude = sample_range(rng, settings.position_range)
        velocity_magnitude = sample_range(rng, settings.velocity_range)
        mass = sample_range(rng, settings.mass_range)

        bodies.append(Body(
            position=np.array([np.cos(position_theta), np.sin(position_theta)]) * position_magnitude,
            velocity=np.array([np.cos(velocity_theta), np.sin(velocity_theta)]) * velocity_magnitude,
            mass=mass,
        ))
    return bodies
