"""2D renderer using matplotlib."""

import time
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import EllipseCollection
from matplotlib.figure import Figure
from typing import Optional, Sequence, Tuple
from universe_sim.physics.body import Body
from universe_sim.render.base import Renderer


class Renderer2D(Renderer):
    """Draws every body as a white circle of radius mass^(1/3) on black."""

    def __init__(
        self,
        figsize: Tuple[int, int] = (10, 10),
        dpi: int = 100,
        view_radius: Optional[float] = None,
        interactive: bool = True,
        target_fps: float = 30.0
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            view_radius: Half-width of the visible square around the origin;
                fitted to the first frame if None
            interactive: Show a window and pump GUI events after each frame
            target_fps: Frames faster than this are skipped (interactive only)
        """
        self.figsize = figsize
        self.dpi = dpi
        self.view_radius = view_radius
        self.interactive = interactive

        self.fig: Optional[Figure] = None
        self.ax = None
        self.collection: Optional[EllipseCollection] = None
        self.initialized = False

        # Frame rate limiting
        self.frame_time = 1.0 / target_fps
        self.last_render_time = 0.0

    def _initialize(self, positions: np.ndarray):
        """Create the figure on first use."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.fig.patch.set_facecolor('black')
        self.ax.set_facecolor('black')
        self.ax.set_aspect('equal')
        self.ax.set_axis_off()

        if self.view_radius is None:
            extent = np.abs(positions).max() if positions.size else 0.0
            self.view_radius = max(float(extent) * 1.1, 10.0)
        self.ax.set_xlim(-self.view_radius, self.view_radius)
        self.ax.set_ylim(-self.view_radius, self.view_radius)

        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)

        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None or not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            self.collection = None
            return False
        return True

    def is_open(self) -> bool:
        """True while the figure exists and has not been closed."""
        return self._is_figure_open()

    def render(self, bodies: Sequence[Body]):
        """Render current frame."""
        # Window closed by the user: stop drawing
        if self.initialized and not self._is_figure_open():
            return

        current_time = time.time()
        if self.interactive and self.initialized and (current_time - self.last_render_time) < self.frame_time:
            return
        self.last_render_time = current_time

        positions = np.array([b.position for b in bodies]).reshape(-1, 2)
        diameters = 2.0 * np.cbrt(np.array([b.mass for b in bodies], dtype=np.float64))
        self._initialize(positions)

        # Body count changes on merges, so the collection is rebuilt every frame
        if self.collection is not None:
            self.collection.remove()
        self.collection = EllipseCollection(
            diameters, diameters, np.zeros_like(diameters),
            units='xy',
            offsets=positions,
            offset_transform=self.ax.transData,
            facecolors='white',
            edgecolors='none',
        )
        self.ax.add_collection(self.collection)

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return rgba[:, :, :3].copy()

    def clear(self):
        """Clear the renderer."""
        if self.collection is not None:
            self.collection.remove()
            self.collection = None

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.collection = None
            self.initialized = False
