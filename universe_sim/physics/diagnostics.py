"""Read-only statistics over a universe."""

import numpy as np
from typing import Dict, Iterable, Tuple
from universe_sim.physics.body import Body


class Diagnostics:
    """Compute conserved quantities and load figures for a body population."""

    def __init__(self, G: float = 1.0e2):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant (must match the simulation settings)
        """
        self.G = G

    @staticmethod
    def _arrays(bodies: Iterable[Body]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        bodies = list(bodies)
        positions = np.array([b.position for b in bodies]).reshape(-1, 2)
        velocities = np.array([b.velocity for b in bodies]).reshape(-1, 2)
        masses = np.array([b.mass for b in bodies], dtype=np.float64)
        return positions, velocities, masses

    @staticmethod
    def interactions_per_frame(n_bodies: int) -> int:
        """Ordered body pairs visited per step: n^2 - n."""
        return n_bodies * n_bodies - n_bodies

    def total_mass(self, bodies: Iterable[Body]) -> float:
        _, _, masses = self._arrays(bodies)
        return float(np.sum(masses))

    def total_momentum(self, bodies: Iterable[Body]) -> np.ndarray:
        _, velocities, masses = self._arrays(bodies)
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)

    def center_of_mass(self, bodies: Iterable[Body]) -> np.ndarray:
        """Mass-weighted mean position, or the origin for an empty population."""
        positions, _, masses = self._arrays(bodies)
        total = np.sum(masses)
        if total == 0:
            return np.zeros(2)
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / total

    def kinetic_energy(self, bodies: Iterable[Body]) -> float:
        _, velocities, masses = self._arrays(bodies)
        v_sq = np.sum(velocities ** 2, axis=1)
        return float(0.5 * np.sum(masses * v_sq))

    def potential_energy(self, bodies: Iterable[Body]) -> float:
        """U = -G * sum_{i<j} m_i * m_j / r_ij, skipping coincident pairs.

        This is the potential of the unsoftened inverse-square force used by
        the simulation.
        """
        positions, _, masses = self._arrays(bodies)
        n = len(masses)
        if n < 2:
            return 0.0
        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        r = np.sqrt(np.sum(r_diff ** 2, axis=2))
        upper = np.triu(np.ones((n, n), dtype=bool), k=1) & (r > 0.0)
        m_ij = masses[:, np.newaxis] * masses[np.newaxis, :]
        return float(-self.G * np.sum(m_ij[upper] / r[upper]))

    def compute_energies(self, bodies: Iterable[Body]) -> Tuple[float, float, float]:
        """Return (kinetic, potential, total) energy."""
        bodies = list(bodies)
        K = self.kinetic_energy(bodies)
        U = self.potential_energy(bodies)
        return K, U, K + U

    def summary(self, bodies: Iterable[Body]) -> Dict[str, float]:
        """Collect every statistic in one dictionary (for reporting)."""
        bodies = list(bodies)
        K, U, E = self.compute_energies(bodies)
        momentum = self.total_momentum(bodies)
        return {
            'bodies': len(bodies),
            'interactions': self.interactions_per_frame(len(bodies)),
            'mass': self.total_mass(bodies),
            'px': float(momentum[0]),
            'py': float(momentum[1]),
            'K': K,
            'U': U,
            'E': E,
        }
