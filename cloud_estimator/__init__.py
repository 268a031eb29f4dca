"""Cloud Estimator - VM placement and cloudlet timing estimates for hypothetical data centers."""

__version__ = "0.1.0"
__author__ = "Cloud Project Team"

from .core import (
    SimulationConfig,
    HostAssignment,
    CloudletResult,
    SimulationResult,
    ConfigurationError,
    SimulationEngine,
    SimulationOutcome,
    run_simulation,
)

__all__ = [
    "SimulationConfig",
    "HostAssignment",
    "CloudletResult",
    "SimulationResult",
    "ConfigurationError",
    "SimulationEngine",
    "SimulationOutcome",
    "run_simulation",
]
