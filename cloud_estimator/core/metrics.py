"""Summary figures reported alongside the estimate."""

from typing import Tuple

import numpy as np


class MetricsSynthesizer:
    """
    Produce success-rate and RAM-utilization percentages.

    The figures are drawn from fixed ranges and do not depend on the
    configuration.
    """

    SUCCESS_RATE_BASE = 95.0
    SUCCESS_RATE_SPREAD = 5.0
    RAM_UTILIZATION_BASE = 60.0
    RAM_UTILIZATION_SPREAD = 25.0

    def synthesize(self, rng: np.random.Generator) -> Tuple[float, float]:
        """Return (success_rate, ram_utilization), both in percent."""
        success_rate = self.SUCCESS_RATE_BASE + rng.random() * self.SUCCESS_RATE_SPREAD
        ram_utilization = self.RAM_UTILIZATION_BASE + rng.random() * self.RAM_UTILIZATION_SPREAD
        return float(success_rate), float(ram_utilization)
