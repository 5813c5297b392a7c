"""Generation and simulation settings."""

from dataclasses import dataclass, fields
from typing import Tuple


Range = Tuple[float, float]


@dataclass
class GenerationSettings:
    """Parameters for procedurally generating a universe.

    Ranges are half-open (start, end). A range with start >= end is empty and
    collapses to its start value. The mass range must stay above zero; the
    engine does not check it.
    """
    seed: int = 0  # 0 seeds from the wall clock
    body_count: int = 2500
    position_range: Range = (0.0, 250.0)
    velocity_range: Range = (0.0, 125.0)
    mass_range: Range = (1.0, 10.0)
    tangential_velocity: bool = False

    def __post_init__(self):
        self.position_range = tuple(float(v) for v in self.position_range)
        self.velocity_range = tuple(float(v) for v in self.velocity_range)
        self.mass_range = tuple(float(v) for v in self.mass_range)

    def reset(self):
        """Restore every field to its default value."""
        _reset(self)


@dataclass
class SimulationSettings:
    """Parameters applied on every simulation step."""
    gravitational_constant: float = 1.0e2  # negative values repel
    enable_collisions: bool = True

    def reset(self):
        """Restore every field to its default value."""
        _reset(self)


def _reset(settings):
    defaults = type(settings)()
    for f in fields(settings):
        setattr(settings, f.name, getattr(defaults, f.name))
