"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from memkit.config import DEFAULT_CONFIG_PATH, load_configuration
from memkit.core.module import Status
from memkit.core.pool import Pool, ValueType
from memkit.core.workflow import Workflow
from memkit.logging_config import setup_logging
from memkit.validation import monte_carlo_estimate

logger = logging.getLogger("memkit")


def total_weight(pool: Pool) -> float:
    """Product of every double named 'TF_times_jacobian' in the pool."""
    weight = 1.0
    for slot in pool.slots():
        if slot.name == "TF_times_jacobian" and slot.value_type == ValueType.DOUBLE and not slot.array:
            weight *= slot.value
    return weight


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="memkit", description="Evaluate a module workflow on sample points.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG_PATH, help="JSON run configuration")
    parser.add_argument("--points", type=int, default=10000, help="Monte-Carlo points for the weight integral")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    workflow = Workflow.from_config(load_configuration(args.config))

    # 1. Show every module output on a few evenly spaced points
    for u in np.linspace(0.0, 1.0, 5):
        point = np.full(workflow.dimensions, u)
        status = workflow.evaluate(point)
        if status is not Status.OK:
            logger.warning(f"Point {point} returned {status.name}")
            continue
        for module in workflow.modules:
            if workflow.pool.exists(module.name, "output"):
                logger.info(f"u={u:.2f} {module.name}::output = {workflow.pool.slot(module.name, 'output').value}")
        logger.info(f"u={u:.2f} weight = {total_weight(workflow.pool):.6f}")

    # 2. Integral of the total weight over the unit hypercube
    monte_carlo_estimate(workflow, total_weight, n_points=args.points, seed=args.seed)


if __name__ == "__main__":
    main()
