"""Shared fixtures for the cloud estimator tests."""

import sys

import numpy as np
import pytest
from loguru import logger

from cloud_estimator.core.models import SimulationConfig


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def example_config():
    """Two hosts, five VMs, three cloudlets of 300 MI on 100 MIPS single-PE VMs."""
    return SimulationConfig(
        host_count=2,
        pes_per_host=4,
        ram_per_host=16384,
        mips_per_pe=100,
        vm_count=5,
        pes_per_vm=1,
        ram_per_vm=2048,
        cloudlet_count=3,
        cloudlet_length=300,
    )


@pytest.fixture
def example_payload(example_config):
    return example_config.to_dict()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
