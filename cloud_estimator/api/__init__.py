"""HTTP API for the simulation engine."""

from .schemas import SimulationRequest, SimulationResponse
from .server import create_app, run_server

__all__ = ["SimulationRequest", "SimulationResponse", "create_app", "run_server"]
