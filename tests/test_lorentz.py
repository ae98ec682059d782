from __future__ import annotations

import math

import numpy as np
import pytest

from memkit.model.lorentz import LorentzVector


def test_from_polar_round_trips_angles():
    v = LorentzVector.from_polar(10.0, 1.1, -2.3, 50.0)

    assert v.p == pytest.approx(10.0)
    assert v.theta == pytest.approx(1.1)
    assert v.phi == pytest.approx(-2.3)
    assert v.e == 50.0


def test_beam_axis_vector_has_zero_phi():
    assert LorentzVector(0.0, 0.0, 5.0, 6.0).phi == 0.0
    assert LorentzVector(0.0, 0.0, -5.0, 6.0).theta == pytest.approx(math.pi)


def test_mass_sign_follows_m2():
    assert LorentzVector(3.0, 0.0, 4.0, 13.0).m == pytest.approx(12.0)
    assert LorentzVector(3.0, 0.0, 4.0, 3.0).m == pytest.approx(-4.0)


def test_set_coordinates_updates_in_place():
    v = LorentzVector()
    same = v
    v.set_coordinates(1.0, 2.0, 3.0, 4.0)

    assert same is v
    assert np.array_equal(v.to_array(), [1.0, 2.0, 3.0, 4.0])


def test_sum_of_back_to_back_particles_is_at_rest():
    a = LorentzVector(1.0, -2.0, 3.0, 5.0)
    b = LorentzVector.from_array([-1.0, 2.0, -3.0, 5.0])

    total = a + b
    assert total == LorentzVector(0.0, 0.0, 0.0, 10.0)
    assert (total - b) == a
    assert total.m == pytest.approx(10.0)
