"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Sequence
import numpy as np
from universe_sim.physics.body import Body


class Renderer(ABC):
    """Abstract base class for renderers."""

    @abstractmethod
    def render(self, bodies: Sequence[Body]):
        """Render current frame.

        Args:
            bodies: Bodies to draw (read only)
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
