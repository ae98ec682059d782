from __future__ import annotations

import math

import pytest

from memkit.core.parameters import ParameterSet
from memkit.core.workflow import Workflow
from memkit.model.lorentz import LorentzVector


def flat_theta_config(name: str = "flatTF", **overrides) -> ParameterSet:
    parameters = {
        "ps_point": "cuba::ps_points/0",
        "reco_particle": "input::particles/0",
    }
    parameters.update(overrides)
    return ParameterSet("FlatTransferFunctionOnTheta", name, parameters)


@pytest.fixture
def reco_particle() -> LorentzVector:
    # |P| = 10, phi = 0.5, theta = 1.1, E = 50
    return LorentzVector.from_polar(10.0, 1.1, 0.5, 50.0)


@pytest.fixture
def workflow(reco_particle: LorentzVector) -> Workflow:
    return Workflow([flat_theta_config()], particles=[reco_particle])


def assert_same_direction_and_energy(actual: LorentzVector, expected: LorentzVector) -> None:
    assert actual.p == pytest.approx(expected.p, rel=1e-12)
    assert actual.e == expected.e
    if actual.pt > 1e-9:
        assert math.remainder(actual.phi - expected.phi, 2 * math.pi) == pytest.approx(0.0, abs=1e-12)
