"""Utility modules for the cloud estimator."""

from .log import setup_logging
from .results import save_results, cloudlet_frame, host_frame

__all__ = [
    "setup_logging",
    "save_results",
    "cloudlet_frame",
    "host_frame",
]
