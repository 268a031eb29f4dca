"""Core simulation components."""

from .models import SimulationConfig, HostAssignment, CloudletResult, SimulationResult
from .errors import ConfigurationError
from .validation import validate_simulation_config
from .allocation import AllocationPlanner
from .timing import TimingEstimator
from .metrics import MetricsSynthesizer
from .engine import SimulationEngine, SimulationOutcome, run_simulation

__all__ = [
    "SimulationConfig",
    "HostAssignment",
    "CloudletResult",
    "SimulationResult",
    "ConfigurationError",
    "validate_simulation_config",
    "AllocationPlanner",
    "TimingEstimator",
    "MetricsSynthesizer",
    "SimulationEngine",
    "SimulationOutcome",
    "run_simulation",
]
