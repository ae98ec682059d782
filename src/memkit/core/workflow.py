"""
Workflow (Host Harness)
=======================
Builds the pool and the configured modules and evaluates them point by point.

Why is this file needed?
------------------------
Modules only know the pool and their parameter set. Something has to own the
pool, publish the values coming from outside the module graph (phase-space
coordinates from the sampler, reconstructed particles from the event) and call
``work()`` on every module in order. That is this class.

Host slots:
    cuba::ps_points (double[]): Coordinates of the current point in [0, 1]^n.
    input::particles (LorentzVector[]): Reconstructed particles of the event.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

import numpy as np

import memkit.modules  # noqa: F401  (registers built-in modules)
from memkit.core.errors import BindError
from memkit.core.module import Module, Status
from memkit.core.parameters import ParameterSet
from memkit.core.pool import Pool, ValueType
from memkit.core.registry import create_module
from memkit.model.lorentz import LorentzVector

logger = logging.getLogger(__name__)

PS_POINTS_OWNER = "cuba"
PS_POINTS_NAME = "ps_points"
PARTICLES_OWNER = "input"
PARTICLES_NAME = "particles"


class Workflow:
    """
    Ordered list of modules sharing one pool.
    """

    def __init__(
        self,
        module_configs: Iterable[ParameterSet | Mapping[str, Any]],
        particles: Sequence[LorentzVector] | None = None
    ) -> None:
        self.pool = Pool()
        self._ps_points = self.pool.produce(
            PS_POINTS_OWNER, PS_POINTS_NAME, ValueType.DOUBLE, np.empty(0, dtype=np.float64), array=True
        )
        self._particles = self.pool.produce(
            PARTICLES_OWNER, PARTICLES_NAME, ValueType.LORENTZ_VECTOR, [], array=True
        )
        if particles is not None:
            self.set_particles(particles)

        self.modules: list[Module] = []
        for config in module_configs:
            parameters = config if isinstance(config, ParameterSet) else ParameterSet.from_dict(config)
            self.modules.append(create_module(parameters.module_type, self.pool, parameters))

        self.dimensions: int = sum(module.dimensions() for module in self.modules)
        for tag in self._ps_points.consumers:
            if tag.index >= self.dimensions:
                msg = f"Input tag '{tag}' points past the {self.dimensions} integration dimension(s) of the workflow."
                logger.error(msg)
                raise BindError(msg)
        logger.info(f"Workflow built: {len(self.modules)} module(s), {self.dimensions} integration dimension(s).")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(modules={[m.name for m in self.modules]}, dimensions={self.dimensions})"

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Workflow:
        """
        Build from a run configuration: ``{"modules": [...], "particles": [[px, py, pz, E], ...]}``.
        """
        particles = [LorentzVector.from_array(p) for p in config.get("particles", [])]
        return cls(config.get("modules", []), particles=particles)

    def set_particles(self, particles: Sequence[LorentzVector]) -> None:
        self._particles.value = list(particles)

    def evaluate(self, ps_points: Sequence[float] | np.ndarray) -> Status:
        """
        Run every module once for the given phase-space point.

        Args:
            ps_points: One coordinate in [0, 1] per integration dimension.

        Raises:
            ValueError: If the number of coordinates differs from ``dimensions``.

        Returns:
            ``Status.OK`` if every module succeeded, otherwise the first non-OK status.
        """
        points = np.asarray(ps_points, dtype=np.float64)
        if points.shape != (self.dimensions,):
            raise ValueError(f"Expected {self.dimensions} phase-space coordinate(s), got shape {points.shape}.")

        self._ps_points.value = points
        for module in self.modules:
            status = module.work()
            if status is not Status.OK:
                return status
        return Status.OK
