"""Simulation engine: validates a configuration and runs the three estimation stages."""

import math
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
from loguru import logger

from .allocation import AllocationPlanner
from .errors import ConfigurationError
from .metrics import MetricsSynthesizer
from .models import SimulationConfig, SimulationResult
from .timing import TimingEstimator
from .validation import validate_simulation_config


@dataclass
class SimulationOutcome:
    """Either a result or the configuration error that prevented one."""
    result: Optional[SimulationResult] = None
    error: Optional[ConfigurationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SimulationResult:
        """Return the result, raising the configuration error if there is one."""
        if self.error is not None:
            raise self.error
        return self.result


class SimulationEngine:
    """
    Stateless estimator for VM placement and cloudlet execution.

    Every call to :meth:`run` gets its own random generator, seeded from
    ``seed`` when one is set, so concurrent runs share no state.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        max_host_count: Optional[int] = None,
        max_cloudlet_count: Optional[int] = None
    ):
        self.seed = seed
        self.max_host_count = max_host_count
        self.max_cloudlet_count = max_cloudlet_count
        self.planner = AllocationPlanner()
        self.timing = TimingEstimator()
        self.metrics = MetricsSynthesizer()

    def new_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def run(
        self,
        config: SimulationConfig,
        rng: Optional[np.random.Generator] = None
    ) -> SimulationOutcome:
        """
        Run one estimation.

        Validation happens before any stage runs. An invalid configuration
        yields an outcome with ``error`` set and no partial result.

        Args:
            config: Data-center configuration
            rng: Generator to draw from, a fresh one is created if omitted

        Returns:
            SimulationOutcome
        """
        try:
            validate_simulation_config(
                config,
                max_host_count=self.max_host_count,
                max_cloudlet_count=self.max_cloudlet_count,
            )
        except ConfigurationError as e:
            logger.warning(f"Rejected simulation config: {e}")
            return SimulationOutcome(error=e)

        if rng is None:
            rng = self.new_rng()

        start = time.perf_counter()

        host_layout = self.planner.plan(config.host_count, config.vm_count, rng)
        total_time, cloudlet_results = self.timing.estimate(config, rng)
        if not math.isfinite(total_time):
            error = ConfigurationError(
                "cloudlet_length",
                "cloudletLength is too large for the configured capacity, total time is not finite",
                "cloudletLength",
            )
            logger.warning(f"Rejected simulation config: {error}")
            return SimulationOutcome(error=error)
        success_rate, ram_utilization = self.metrics.synthesize(rng)

        result = SimulationResult(
            total_time=total_time,
            success_rate=success_rate,
            ram_utilization=ram_utilization,
            host_layout=host_layout,
            cloudlet_results=cloudlet_results,
            vm_count=config.vm_count,
        )

        elapsed = time.perf_counter() - start
        logger.debug(
            f"Simulation of {config.vm_count} VMs on {config.host_count} hosts "
            f"with {config.cloudlet_count} cloudlets took {elapsed * 1000:.2f}ms"
        )

        return SimulationOutcome(result=result)


def run_simulation(
    config: SimulationConfig,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None
) -> SimulationResult:
    """
    Run one estimation and return its result.

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    return SimulationEngine(seed=seed).run(config, rng=rng).unwrap()
