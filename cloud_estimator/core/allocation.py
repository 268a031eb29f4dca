"""Greedy VM-to-host allocation planner."""

from typing import List

import numpy as np
from loguru import logger

from .models import HostAssignment


class AllocationPlanner:
    """
    Distribute VMs over hosts in index order.

    Each host takes a random batch of 2 or 3 VMs (capped by what is left)
    from a running, ascending VM id counter. There is no rebalancing pass:
    when the hosts run out before the VMs do, the trailing VMs are not placed
    anywhere.
    """

    MIN_BATCH = 2
    MAX_BATCH = 3

    def __init__(self):
        self.logger = logger.bind(component="AllocationPlanner")

    def plan(self, host_count: int, vm_count: int, rng: np.random.Generator) -> List[HostAssignment]:
        """
        Build the host layout.

        Args:
            host_count: Number of hosts, one assignment is produced per host
            vm_count: Number of VMs to place, ids are 0..vm_count-1
            rng: Generator used to draw each host's batch size

        Returns:
            Exactly ``host_count`` host assignments
        """
        layout: List[HostAssignment] = []
        remaining = vm_count
        next_vm_id = 0

        for host_id in range(host_count):
            if remaining <= 0:
                layout.append(HostAssignment(id=host_id))
                continue

            batch = self.MIN_BATCH + int(rng.integers(0, self.MAX_BATCH - self.MIN_BATCH + 1))
            batch = min(remaining, batch)

            layout.append(HostAssignment(id=host_id, vms=list(range(next_vm_id, next_vm_id + batch))))
            next_vm_id += batch
            remaining -= batch

            self.logger.debug(f"Host {host_id} assigned {batch} VMs, {remaining} remaining")

        if remaining > 0:
            self.logger.warning(
                f"{remaining} of {vm_count} VMs left unallocated across {host_count} hosts"
            )

        return layout
