from __future__ import annotations

import json
import logging
import math
import os

import pytest

from memkit.__main__ import main
from memkit.config import ASSETS_PATH, DEFAULT_CONFIG_PATH, load_configuration
from memkit.core.workflow import Workflow


def test_default_configuration_is_bundled():
    assert os.path.isdir(ASSETS_PATH)
    config = load_configuration(DEFAULT_CONFIG_PATH)
    assert [m["type"] for m in config["modules"]] == ["FlatTransferFunctionOnTheta"]


def test_default_configuration_builds_reference_scenario():
    wf = Workflow.from_config(load_configuration(DEFAULT_CONFIG_PATH))
    wf.evaluate([0.5])

    output = wf.pool.slot("flatTF", "output").value
    assert output.px == pytest.approx(10.0 * math.cos(0.5))
    assert output.py == pytest.approx(10.0 * math.sin(0.5))
    assert output.pz == pytest.approx(0.0, abs=1e-12)
    assert output.e == 50.0


def test_non_object_document(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_configuration(str(path))


def test_cli_runs_default_configuration(capsys):
    try:
        main(["--points", "200", "--seed", "3"])
    finally:
        logging.getLogger("memkit").handlers.clear()
    out = capsys.readouterr().out
    assert "flatTF::output" in out
    assert "Monte-Carlo: 3.14159" in out


def test_total_weight_reads_the_given_pool(reco_particle):
    from memkit.__main__ import total_weight
    from conftest import flat_theta_config

    wf = Workflow(
        [flat_theta_config("tf0"), flat_theta_config("tf1", ps_point="cuba::ps_points/1")],
        particles=[reco_particle],
    )
    wf.evaluate([0.3, 0.6])
    assert total_weight(wf.pool) == pytest.approx(math.pi ** 2)


def test_setup_logging_keeps_numba_quiet():
    from memkit.logging_config import setup_logging

    try:
        setup_logging(level=logging.DEBUG)
        assert logging.getLogger("memkit").level == logging.DEBUG
        assert logging.getLogger("numba").level == logging.WARNING
    finally:
        logging.getLogger("memkit").handlers.clear()
