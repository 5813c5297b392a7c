"""Tests for universe diagnostics."""

import numpy as np
import pytest
from universe_sim.physics.body import Body
from universe_sim.physics.diagnostics import Diagnostics


def test_interactions_per_frame():
    """n^2 - n ordered pairs."""
    assert Diagnostics.interactions_per_frame(0) == 0
    assert Diagnostics.interactions_per_frame(1) == 0
    assert Diagnostics.interactions_per_frame(2500) == 2500 * 2500 - 2500


def test_mass_momentum_and_center():
    """Totals over a small population."""
    bodies = [
        Body(position=[0.0, 0.0], velocity=[1.0, 0.0], mass=1.0),
        Body(position=[3.0, 0.0], velocity=[0.0, 2.0], mass=2.0),
    ]
    diagnostics = Diagnostics(G=1.0)

    assert diagnostics.total_mass(bodies) == 3.0
    assert np.allclose(diagnostics.total_momentum(bodies), [1.0, 4.0])
    assert np.allclose(diagnostics.center_of_mass(bodies), [2.0, 0.0])


def test_energies():
    """Kinetic and unsoftened potential energy."""
    bodies = [
        Body(position=[0.0, 0.0], velocity=[2.0, 0.0], mass=1.0),
        Body(position=[2.0, 0.0], velocity=[0.0, 0.0], mass=4.0),
    ]
    diagnostics = Diagnostics(G=3.0)

    K, U, E = diagnostics.compute_energies(bodies)

    assert K == pytest.approx(2.0)
    assert U == pytest.approx(-3.0 * 1.0 * 4.0 / 2.0)
    assert E == pytest.approx(K + U)


def test_coincident_pairs_skipped():
    """Potential energy ignores zero-distance pairs."""
    bodies = [Body(position=[1.0, 1.0]), Body(position=[1.0, 1.0])]

    assert Diagnostics(G=1.0).potential_energy(bodies) == 0.0


def test_empty_population():
    """Empty input gives zeros."""
    diagnostics = Diagnostics()

    assert diagnostics.total_mass([]) == 0.0
    assert np.allclose(diagnostics.center_of_mass([]), [0.0, 0.0])
    assert diagnostics.compute_energies([]) == (0.0, 0.0, 0.0)
    summary = diagnostics.summary([])
    assert summary['bodies'] == 0
    assert summary['interactions'] == 0
