"""Collision detection and inelastic merging of bodies."""

import numpy as np
from typing import List, Optional
from universe_sim.physics.body import Body


def merge_bodies(a: Body, b: Body) -> Body:
    """Merge two bodies into one.

    Position and velocity are the mass-weighted averages of the inputs and the
    mass is their sum.

    Args:
        a: First body
        b: Second body

    Returns:
        New merged body
    """
    total_mass = a.mass + b.mass
    ratio_a = a.mass / total_mass
    ratio_b = 1.0 - ratio_a
    return Body(
        position=a.position * ratio_a + b.position * ratio_b,
        velocity=a.velocity * ratio_a + b.velocity * ratio_b,
        mass=total_mass,
    )


def colliding(a: Body, b: Body) -> bool:
    """Return True if the bodies touch or overlap."""
    distance = np.sqrt(np.sum((b.position - a.position) ** 2))
    return bool(distance <= a.radius() + b.radius())


def _first_contact(positions: np.ndarray, radii: np.ndarray, i: int) -> Optional[int]:
    """Index of the first body after i in contact with body i, if any."""
    r_diff = positions[i + 1:] - positions[i]
    distances = np.sqrt(np.sum(r_diff ** 2, axis=1))
    hits = np.flatnonzero(distances <= radii[i] + radii[i + 1:])
    if hits.size == 0:
        return None
    return i + 1 + int(hits[0])


def resolve_collisions(bodies: List[Body]) -> int:
    """Merge colliding bodies in place.

    Scans pairs (i, j), i < j, in increasing order. When body i touches body
    j, the merged body is appended, j then i are removed, and the scan resumes
    at the same index i against the shifted list. Merged bodies can therefore
    collide again later in the same pass.

    Args:
        bodies: Body list, mutated in place

    Returns:
        Number of merges performed
    """
    if len(bodies) < 2:
        return 0

    positions = np.array([body.position for body in bodies])
    radii = np.cbrt(np.array([body.mass for body in bodies]))

    merges = 0
    i = 0
    while i < len(bodies):
        j = _first_contact(positions, radii, i)
        if j is None:
            i += 1
            continue

        merged = merge_bodies(bodies[i], bodies[j])
        bodies.append(merged)
        # j > i, so removing j first leaves i valid
        del bodies[j]
        del bodies[i]

        positions = np.delete(np.vstack([positions, merged.position]), [i, j], axis=0)
        radii = np.delete(np.append(radii, merged.radius()), [i, j])
        merges += 1

    return merges
