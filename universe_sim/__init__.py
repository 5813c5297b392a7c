"""
Universe Simulator - a planar N-body gravity simulation.

Features:
- Seeded procedural generation of body populations
- Inelastic merging of colliding bodies
- Vectorized or pairwise O(n^2) gravity
- Matplotlib rendering
- CLI with JSON/YAML configuration
"""

__version__ = "0.1.0"

from universe_sim.physics.body import Body
from universe_sim.physics.settings import GenerationSettings, SimulationSettings
from universe_sim.physics.universe import Universe
from universe_sim.physics.simulator import Simulator

__all__ = [
    "Body",
    "GenerationSettings",
    "SimulationSettings",
    "Universe",
    "Simulator",
]
