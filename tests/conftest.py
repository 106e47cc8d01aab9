"""Pytest configuration and fixtures for libcbench tests."""

import json
import logging
import os
import stat
import sys

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test.

    This ensures that tests which call setup_logging() don't affect
    other tests that rely on caplog fixture for log capture.
    """
    yield

    logger = logging.getLogger("libcbench")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def make_study(
    study_name="baseline",
    function="libc::memcpy",
    is_sweep_mode=False,
    num_trials=1,
    size_distribution_name="memcpy Google A",
    measurements=(1e-9,),
):
    """Build a study document as written by the libc benchmarking harness."""
    return {
        "StudyName": study_name,
        "Runtime": {"Host": {"CpuName": "test"}},
        "Configuration": {
            "Function": function,
            "IsSweepMode": is_sweep_mode,
            "NumTrials": num_trials,
            "SizeDistributionName": size_distribution_name,
        },
        "Measurements": list(measurements),
    }


@pytest.fixture
def study_document():
    """Factory building study documents."""
    return make_study


@pytest.fixture
def write_study(tmp_path):
    """Factory writing a study JSON file and returning its path."""
    counter = {"n": 0}

    def _write(filename=None, **kwargs):
        counter["n"] += 1
        path = tmp_path / (filename or f"study{counter['n']}.json")
        path.write_text(json.dumps(make_study(**kwargs)))
        return path

    return _write


FAKE_BENCHSTAT = '''\
import sys

out = sys.stdout
inputs = []
for arg in sys.argv[1:]:
    if arg.startswith("-o="):
        out = open(arg[3:], "w")
    elif arg.startswith("-exit="):
        sys.exit(int(arg[6:]))
    elif arg.startswith("-"):
        print(f"flag {arg}", file=out)
    else:
        inputs.append(arg)

for arg in inputs:
    label, _, path = arg.partition("=")
    with open(path) as f:
        for line in f:
            print(f"{label}: {line.rstrip()}", file=out)
out.flush()
'''


@pytest.fixture
def fake_benchstat(tmp_path):
    """Executable that echoes its labelled inputs, standing in for benchstat.

    Supports '-o=<path>' to redirect the report and '-exit=<n>' to exit
    immediately without reading any input.
    """
    if not os.path.isdir("/dev/fd"):
        pytest.skip("requires /dev/fd")

    script = tmp_path / "fake_benchstat.py"
    script.write_text(FAKE_BENCHSTAT)

    wrapper = tmp_path / "benchstat"
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n')
    wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return wrapper
