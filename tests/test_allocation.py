"""Tests for the greedy allocation planner."""

import numpy as np
import pytest
from loguru import logger

from cloud_estimator.core.allocation import AllocationPlanner


class ScriptedRng:
    """Stands in for a generator, returning scripted offsets from ``integers``."""

    def __init__(self, offsets):
        self.offsets = list(offsets)
        self.calls = 0

    def integers(self, low, high):
        assert (low, high) == (0, 2)
        self.calls += 1
        return self.offsets.pop(0)


@pytest.fixture
def planner():
    return AllocationPlanner()


def test_batches_follow_the_draws(planner):
    layout = planner.plan(2, 5, ScriptedRng([0, 1]))

    assert [host.id for host in layout] == [0, 1]
    assert [host.vms for host in layout] == [[0, 1], [2, 3, 4]]


def test_batch_is_capped_by_remaining_vms(planner):
    layout = planner.plan(2, 5, ScriptedRng([1, 1]))

    assert [host.vms for host in layout] == [[0, 1, 2], [3, 4]]


def test_hosts_after_vms_run_out_are_empty(planner):
    rng = ScriptedRng([0, 0])
    layout = planner.plan(4, 3, rng)

    assert [host.vms for host in layout] == [[0, 1], [2], [], []]
    assert rng.calls == 2


def test_trailing_vms_are_dropped_and_logged(planner):
    messages = []
    sink_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        layout = planner.plan(2, 8, ScriptedRng([1, 1]))
    finally:
        logger.remove(sink_id)

    assert [host.vms for host in layout] == [[0, 1, 2], [3, 4, 5]]
    assert any("2 of 8 VMs left unallocated" in str(m) for m in messages)


@pytest.mark.parametrize("host_count,vm_count", [(0, 0), (0, 5), (3, 0)])
def test_degenerate_inputs(planner, host_count, vm_count):
    layout = planner.plan(host_count, vm_count, np.random.default_rng(0))

    assert len(layout) == host_count
    assert all(host.vms == [] for host in layout)


@pytest.mark.parametrize("seed", range(25))
@pytest.mark.parametrize("host_count,vm_count", [(2, 5), (5, 5), (3, 20), (10, 12), (1, 1)])
def test_layout_properties(planner, seed, host_count, vm_count):
    layout = planner.plan(host_count, vm_count, np.random.default_rng(seed))

    assert len(layout) == host_count
    assert [host.id for host in layout] == list(range(host_count))

    placed = [vm for host in layout for vm in host.vms]
    # Disjoint, contiguous from 0 and ascending
    assert placed == list(range(len(placed)))
    assert len(placed) <= vm_count

    for host in layout:
        assert len(host.vms) <= 3
        if host.vms and sum(len(h.vms) for h in layout[:host.id + 1]) < vm_count:
            assert len(host.vms) >= 2


def test_same_seed_gives_same_layout(planner):
    first = planner.plan(6, 14, np.random.default_rng(7))
    second = planner.plan(6, 14, np.random.default_rng(7))

    assert first == second


def test_enough_hosts_places_every_vm(planner):
    # Every host takes at least 2 VMs while any remain
    layout = planner.plan(10, 20, np.random.default_rng(3))

    assert sum(len(host.vms) for host in layout) == 20
