"""Gravitational velocity updates.

Inverse-square law without softening. Coincident bodies (zero separation,
including each body with itself) do not interact.
"""

from typing import List, Literal
import numpy as np
from universe_sim.physics.body import Body


class GravitySolver:
    """Applies one step of mutual gravitational acceleration to a body list.

    Two methods give the same result up to floating-point summation order:
    "vectorized" builds the (n, n) pairwise arrays with NumPy, "pairwise" walks
    each unordered pair once and applies action/reaction directly.
    """

    METHODS = ("vectorized", "pairwise")

    def __init__(self, method: Literal["vectorized", "pairwise"] = "vectorized"):
        if method not in self.METHODS:
            raise ValueError(f"Unknown gravity method '{method}'. Available: {list(self.METHODS)}")
        self.method = method

    def apply(self, bodies: List[Body], G: float, dt: float):
        """Accumulate gravitational velocity changes over dt.

        Args:
            bodies: Bodies to update (velocities mutated in place)
            G: Gravitational constant (negative values repel)
            dt: Time step
        """
        if len(bodies) < 2:
            return
        if self.method == "pairwise":
            _apply_pairwise(bodies, G, dt)
        else:
            _apply_vectorized(bodies, G, dt)


def _apply_pairwise(bodies: List[Body], G: float, dt: float):
    n = len(bodies)
    for i in range(n):
        body_i = bodies[i]
        for j in range(i + 1, n):
            body_j = bodies[j]
            r_diff = body_j.position - body_i.position
            distance_sq = float(np.dot(r_diff, r_diff))
            if distance_sq > 0.0:
                direction = r_diff / np.sqrt(distance_sq)
                force = direction * G / distance_sq
                body_i.velocity += force * body_j.mass * dt
                body_j.velocity -= force * body_i.mass * dt


def _apply_vectorized(bodies: List[Body], G: float, dt: float):
    positions = np.array([body.position for body in bodies])
    masses = np.array([body.mass for body in bodies])

    # r_diff[i, j] = r_j - r_i
    r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
    r_sq = np.sum(r_diff ** 2, axis=2)
    interacting = r_sq > 0.0
    safe_r_sq = np.where(interacting, r_sq, 1.0)

    # |direction * G / r^2| * m_j, with direction = r_diff / r
    coefficients = np.where(interacting, G / (safe_r_sq * np.sqrt(safe_r_sq)), 0.0)
    coefficients *= masses[np.newaxis, :]
    delta_v = np.einsum('ij,ijk->ik', coefficients, r_diff) * dt

    for body, dv in zip(bodies, delta_v):
        body.velocity += dv
