"""Tests for collision detection and merging."""

import numpy as np
import pytest
from universe_sim.physics.body import Body
from universe_sim.physics.collisions import merge_bodies, colliding, resolve_collisions
from universe_sim.physics.settings import GenerationSettings
from universe_sim.physics.universe import Universe


def test_merge_is_mass_weighted():
    """Merged position and velocity are mass-weighted averages."""
    a = Body(position=[0.0, 0.0], velocity=[1.0, 0.0], mass=3.0)
    b = Body(position=[4.0, 0.0], velocity=[0.0, -4.0], mass=1.0)

    merged = merge_bodies(a, b)

    assert merged.mass == 4.0
    assert np.allclose(merged.position, [1.0, 0.0])
    assert np.allclose(merged.velocity, [0.75, -1.0])


def test_colliding_uses_radius_sum():
    """Bodies touch when distance <= r_a + r_b, inclusive."""
    a = Body(position=[0.0, 0.0], mass=1.0)

    assert colliding(a, Body(position=[2.0, 0.0], mass=1.0))
    assert not colliding(a, Body(position=[2.001, 0.0], mass=1.0))
    assert colliding(a, Body(position=[2.5, 0.0], mass=8.0))


def test_two_body_merge():
    """Two overlapping unit masses become one body of mass 2 at the midpoint."""
    bodies = [
        Body(position=[0.0, 0.0], mass=1.0),
        Body(position=[0.01, 0.0], mass=1.0),
    ]

    merges = resolve_collisions(bodies)

    assert merges == 1
    assert len(bodies) == 1
    assert bodies[0].mass == 2.0
    assert np.allclose(bodies[0].position, [0.005, 0.0])


def test_merged_body_is_appended():
    """Survivors keep their order and the merged body goes last."""
    far = Body(position=[100.0, 0.0], mass=1.0)
    bodies = [
        Body(position=[0.0, 0.0], mass=1.0),
        Body(position=[1.0, 0.0], mass=1.0),
        far,
    ]

    resolve_collisions(bodies)

    assert len(bodies) == 2
    assert bodies[0] is far
    assert bodies[1].mass == 2.0


def test_merges_cascade_within_a_pass():
    """A merged body can collide again in the same pass."""
    bodies = [
        Body(position=[0.0, 0.0], mass=1.0),
        Body(position=[0.5, 0.0], mass=1.0),
        Body(position=[1.6, 0.0], mass=1.0),
    ]

    merges = resolve_collisions(bodies)

    assert merges == 2
    assert len(bodies) == 1
    assert bodies[0].mass == pytest.approx(3.0)
    assert np.allclose(bodies[0].position, [0.7, 0.0])


def test_same_index_is_rescanned():
    """After a merge the body shifted into index i is checked again."""
    # 0 and 2 touch; 1 and 3 touch; no other pairs do
    bodies = [
        Body(position=[0.0, 0.0], mass=1.0),
        Body(position=[50.0, 0.0], mass=1.0),
        Body(position=[1.0, 0.0], mass=1.0),
        Body(position=[51.0, 0.0], mass=1.0),
    ]

    merges = resolve_collisions(bodies)

    assert merges == 2
    assert len(bodies) == 2
    assert sorted(b.position[0] for b in bodies) == pytest.approx([0.5, 50.5])


def test_no_collisions_leaves_bodies_untouched():
    """Separated bodies are not merged."""
    bodies = [Body(position=[10.0 * k, 0.0]) for k in range(5)]
    originals = list(bodies)

    assert resolve_collisions(bodies) == 0
    assert all(a is b for a, b in zip(bodies, originals))


def test_empty_and_single_lists():
    """Nothing to do for fewer than two bodies."""
    assert resolve_collisions([]) == 0
    single = [Body()]
    assert resolve_collisions(single) == 0
    assert len(single) == 1


def test_mass_conserved_in_crowded_population():
    """Total mass is preserved however many merges happen."""
    universe = Universe()
    universe.generate_bodies(GenerationSettings(seed=21, body_count=300, position_range=(0.0, 30.0)))
    bodies = universe.bodies
    mass_before = sum(b.mass for b in bodies)

    merges = resolve_collisions(bodies)

    assert merges > 0
    assert len(bodies) == 300 - merges
    assert sum(b.mass for b in bodies) == pytest.approx(mass_before, rel=1e-12)
    assert all(b.mass > 0 for b in bodies)
