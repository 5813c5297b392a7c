"""Rendering for universes."""

from universe_sim.render.base import Renderer
from universe_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Renderer2D"]
