from __future__ import annotations

import math

import pytest

from memkit.core.workflow import Workflow
from memkit.validation import integrate_unit_interval, monte_carlo_estimate

from conftest import flat_theta_config


def _weight(pool) -> float:
    return pool.slot("flatTF", "TF_times_jacobian").value


def _weight_times_sin_theta(pool) -> float:
    return _weight(pool) * math.sin(pool.slot("flatTF", "output").value.theta)


def test_theta_range_volume(workflow):
    result = integrate_unit_interval(workflow, _weight)
    assert result.value == pytest.approx(math.pi, rel=1e-12)
    assert result.n_points > 0


def test_solid_angle_over_two_pi(workflow):
    # integral of sin(theta) over [0, pi]
    result = integrate_unit_interval(workflow, _weight_times_sin_theta)
    assert result.value == pytest.approx(2.0, rel=1e-10)


def test_cos_squared_moment(workflow):
    def integrand(pool) -> float:
        theta = pool.slot("flatTF", "output").value.theta
        return _weight(pool) * math.sin(theta) * math.cos(theta) ** 2

    assert integrate_unit_interval(workflow, integrand).value == pytest.approx(2.0 / 3.0, rel=1e-10)


def test_quadrature_needs_one_dimension(reco_particle):
    wf = Workflow(
        [flat_theta_config("tf0"), flat_theta_config("tf1", ps_point="cuba::ps_points/1")],
        particles=[reco_particle],
    )
    with pytest.raises(ValueError, match="one-dimensional"):
        integrate_unit_interval(wf, lambda pool: 1.0)


def test_monte_carlo_recovers_solid_angle(workflow):
    result = monte_carlo_estimate(workflow, _weight_times_sin_theta, n_points=4000, seed=1234)

    assert result.n_points == 4000
    assert result.error > 0.0
    assert result.value == pytest.approx(2.0, abs=5 * result.error)


def test_monte_carlo_of_constant_weight_has_no_spread(workflow):
    result = monte_carlo_estimate(workflow, _weight, n_points=100, seed=0)
    assert result.value == pytest.approx(math.pi)
    assert result.error == pytest.approx(0.0, abs=1e-14)


def test_monte_carlo_two_dimensions(reco_particle):
    wf = Workflow(
        [flat_theta_config("tf0"), flat_theta_config("tf1", ps_point="cuba::ps_points/1")],
        particles=[reco_particle],
    )

    def integrand(pool) -> float:
        w0 = pool.slot("tf0", "TF_times_jacobian").value
        w1 = pool.slot("tf1", "TF_times_jacobian").value
        return w0 * w1 * math.sin(pool.slot("tf0", "output").value.theta) * math.sin(pool.slot("tf1", "output").value.theta)

    result = monte_carlo_estimate(wf, integrand, n_points=4000, seed=7)
    assert result.value == pytest.approx(4.0, abs=5 * result.error)


def test_monte_carlo_needs_two_points(workflow):
    with pytest.raises(ValueError, match="n_points"):
        monte_carlo_estimate(workflow, _weight, n_points=1)
