"""
Phase-Space Volume Validation
=============================
Small integrators used to check that a workflow reproduces known volumes,
e.g. the integral of ``TF_times_jacobian * sin(theta)`` over the flat theta
transfer function equals 2.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np
import scipy as sp

from memkit.core.module import Status

if TYPE_CHECKING:
    from memkit.core.pool import Pool
    from memkit.core.workflow import Workflow

logger = logging.getLogger(__name__)

Integrand = Callable[["Pool"], float]


@dataclass
class Estimate:
    value: float
    error: float
    n_points: int


def _evaluate(workflow: Workflow, integrand: Integrand, ps_points: np.ndarray) -> float:
    if workflow.evaluate(ps_points) is not Status.OK:
        return 0.0
    return float(integrand(workflow.pool))


def integrate_unit_interval(workflow: Workflow, integrand: Integrand, **quad_options) -> Estimate:
    """
    Adaptive quadrature over the single dimension of ``workflow``.

    Args:
        workflow: A workflow with exactly one integration dimension.
        integrand: Reads the pool after evaluation and returns the integrand value.
        quad_options: Forwarded to ``scipy.integrate.quad``.

    Raises:
        ValueError: If the workflow is not one-dimensional.

    Returns:
        The integral and scipy's absolute error estimate.
    """
    if workflow.dimensions != 1:
        raise ValueError(f"Quadrature needs a one-dimensional workflow, got {workflow.dimensions} dimensions.")

    value, error, info = sp.integrate.quad(
        lambda u: _evaluate(workflow, integrand, np.array([u])), 0.0, 1.0, full_output=True, **quad_options
    )[:3]
    n_points = int(info.get("neval", 0))
    logger.info(f"Quadrature: {value:.10g} +- {error:.2g} ({n_points} evaluations)")
    return Estimate(value=float(value), error=float(error), n_points=n_points)


def monte_carlo_estimate(
    workflow: Workflow,
    integrand: Integrand,
    n_points: int,
    seed: Optional[int] = None
) -> Estimate:
    """
    Plain Monte-Carlo estimate over the unit hypercube of ``workflow``.

    Args:
        workflow: Any workflow.
        integrand: Reads the pool after evaluation and returns the integrand value.
        n_points: Number of uniform samples (> 1).
        seed: Seed for ``numpy.random.default_rng``.

    Returns:
        The sample mean and its standard error.
    """
    if n_points < 2:
        raise ValueError(f"'n_points' must be at least 2, got {n_points}.")

    rng = np.random.default_rng(seed)
    samples = rng.random((n_points, workflow.dimensions))
    values = np.fromiter(
        (_evaluate(workflow, integrand, point) for point in samples), dtype=np.float64, count=n_points
    )

    mean = float(values.mean())
    error = float(values.std(ddof=1) / np.sqrt(n_points))
    logger.info(f"Monte-Carlo: {mean:.6g} +- {error:.2g} ({n_points} points)")
    return Estimate(value=mean, error=error, n_points=n_points)
