"""Cloudlet timing model."""

from typing import List, Tuple

import numpy as np
from loguru import logger

from .models import CloudletResult, SimulationConfig


class TimingEstimator:
    """
    Estimate the batch makespan and per-cloudlet start/finish times.

    The makespan assumes cloudlets spread evenly over all VMs, inflated by a
    random overhead factor. Start times are a random queueing delay bounded
    by half the makespan, so individual finish times may exceed it.
    """

    MAKESPAN_JITTER = (1.1, 1.3)
    EXECUTION_JITTER = (0.9, 1.1)
    QUEUE_DELAY_FRACTION = 0.5

    def __init__(self):
        self.logger = logger.bind(component="TimingEstimator")

    @staticmethod
    def base_time_per_cloudlet(config: SimulationConfig) -> float:
        """Nominal execution time of one cloudlet on one VM."""
        return config.cloudlet_length / (config.mips_per_pe * config.pes_per_vm)

    def estimate(
        self,
        config: SimulationConfig,
        rng: np.random.Generator
    ) -> Tuple[float, List[CloudletResult]]:
        """
        Run the timing model.

        Args:
            config: Validated simulation configuration
            rng: Generator for the jitter and queueing draws

        Returns:
            Tuple of (total_time, cloudlet results ordered by id)
        """
        base_time = self.base_time_per_cloudlet(config)
        total_time = base_time * config.cloudlet_count / config.vm_count
        total_time *= rng.uniform(*self.MAKESPAN_JITTER)

        count = config.cloudlet_count
        start_times = rng.random(count) * total_time * self.QUEUE_DELAY_FRACTION
        execution_times = base_time * rng.uniform(*self.EXECUTION_JITTER, size=count)
        finish_times = start_times + execution_times

        results = [
            CloudletResult(id=i, start_time=float(start), finish_time=float(finish))
            for i, (start, finish) in enumerate(zip(start_times, finish_times))
        ]

        self.logger.debug(
            f"Base time {base_time:.4f}, makespan {total_time:.4f} for {count} cloudlets"
        )

        return float(total_time), results
