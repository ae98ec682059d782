"""
Flat Transfer Function on Theta
===============================
Constant (=1) transfer function on a particle's polar angle, mainly for
validating the phase-space generator: integrating over the reconstructed
particle's theta with a flat transfer function yields phase-space volumes and
cross-sections directly.

The module still takes a full 4-momentum as input since it needs the energy,
the azimuthal angle and the momentum magnitude. The theta range covered is
[0, pi].

Integration dimension: **1**

Inputs:
    ps_point (double): Phase-space point in [0, 1] generated by the sampler.
    reco_particle (LorentzVector): Experimentally reconstructed particle.

Outputs:
    output (LorentzVector): Generated particle, differing from
        ``reco_particle`` only by its theta.
    TF_times_jacobian (double): Transfer function (1) times the jacobian of
        the map [0, 1] -> [0, pi].
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numba as nb

from memkit.core.module import Module, Status
from memkit.core.pool import InputTag, ValueType
from memkit.core.registry import register_module
from memkit.model.lorentz import LorentzVector

if TYPE_CHECKING:
    from memkit.core.parameters import ParameterSet
    from memkit.core.pool import Pool

logger = logging.getLogger(__name__)

PI = math.pi


@nb.njit(cache=True)
def resample_theta(p: float, phi: float, e: float, ps_point: float) -> tuple[float, float, float, float]:
    """
    Place a momentum of magnitude ``p`` at azimuth ``phi`` and polar angle ``pi * ps_point``.

    Args:
        p: Magnitude of the 3-momentum.
        phi: Azimuthal angle in radians.
        e: Energy, passed through.
        ps_point: Sample in [0, 1].

    Returns:
        The cartesian components (px, py, pz, E).
    """
    theta = PI * ps_point
    sin_theta = math.sin(theta)
    return (
        p * sin_theta * math.cos(phi),
        p * sin_theta * math.sin(phi),
        p * math.cos(theta),
        e,
    )


@register_module
class FlatTransferFunctionOnTheta(Module):
    """
    Resamples the polar angle of ``reco_particle`` uniformly in [0, pi].
    """
    KEY = "FlatTransferFunctionOnTheta"

    def __init__(self, pool: Pool, parameters: ParameterSet) -> None:
        """
        Resolve the inputs and allocate the outputs.

        Args:
            pool: The run's shared pool.
            parameters: Must provide the ``ps_point`` and ``reco_particle`` tags.

        Raises:
            ConfigurationError: If a tag is missing or is not a tag.
            BindError: If a tag does not resolve to a value of the right type.
        """
        super().__init__(pool, parameters.module_name)

        self.ps_point: InputTag = parameters.get("ps_point", InputTag)
        self.ps_point.resolve(pool, ValueType.DOUBLE)

        self.reco_particle: InputTag = parameters.get("reco_particle", InputTag)
        self.reco_particle.resolve(pool, ValueType.LORENTZ_VECTOR)

        self.output = self.produce("output", ValueType.LORENTZ_VECTOR, LorentzVector())
        self.tf_times_jacobian = self.produce("TF_times_jacobian", ValueType.DOUBLE, 0.0)

        logger.debug(f"{self}: theta of '{self.reco_particle}' driven by '{self.ps_point}'")

    def work(self) -> Status:
        ps_point: float = self.ps_point.get()
        reco_particle: LorentzVector = self.reco_particle.get()

        # Keep |P|, phi and E of the input, only theta is generated
        self.output.value.set_coordinates(
            *resample_theta(reco_particle.p, reco_particle.phi, reco_particle.e, ps_point)
        )

        # Jacobian of [0, 1] -> [0, pi]
        self.tf_times_jacobian.value = PI

        return Status.OK

    def dimensions(self) -> int:
        return 1
