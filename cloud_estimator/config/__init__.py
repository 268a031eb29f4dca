"""Configuration module for Cloud Estimator."""

from .config import load_config, validate_config, default_config
from .scenario import load_scenario

__all__ = ['load_config', 'validate_config', 'default_config', 'load_scenario']
