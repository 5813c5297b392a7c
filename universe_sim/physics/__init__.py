"""Physics engine for planar N-body universes."""

from universe_sim.physics.body import Body
from universe_sim.physics.settings import GenerationSettings, SimulationSettings
from universe_sim.physics.universe import Universe
from universe_sim.physics.gravity import GravitySolver
from universe_sim.physics.diagnostics import Diagnostics
from universe_sim.physics.simulator import Simulator

__all__ = [
    "Body",
    "GenerationSettings",
    "SimulationSettings",
    "Universe",
    "GravitySolver",
    "Diagnostics",
    "Simulator",
]
