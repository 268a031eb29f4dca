"""Up-front validation of simulation configurations."""

from dataclasses import fields
from typing import Optional

from .errors import ConfigurationError
from .models import SimulationConfig, WIRE_NAMES


# Fields used as divisors by the timing estimator
DIVISOR_FIELDS = ("vm_count", "mips_per_pe", "pes_per_vm")

# Wire fields are 32-bit signed integers
MAX_FIELD_VALUE = 2 ** 31 - 1


def validate_simulation_config(
    config: SimulationConfig,
    max_host_count: Optional[int] = None,
    max_cloudlet_count: Optional[int] = None
) -> SimulationConfig:
    """
    Check that a configuration can be run by every engine stage.

    Checks run in passes (types, signs, 32-bit range, divisors, engine
    limits) and the first violation is reported.

    Args:
        config: Configuration to check
        max_host_count: Largest host count the engine accepts, unlimited if None
        max_cloudlet_count: Largest cloudlet count the engine accepts, unlimited if None

    Returns:
        The same configuration

    Raises:
        ConfigurationError: Naming the offending field
    """
    names = [f.name for f in fields(config)]

    for name in names:
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                name,
                f"{WIRE_NAMES[name]} must be an integer, got {type(value).__name__}",
                WIRE_NAMES[name],
            )

    for name in names:
        value = getattr(config, name)
        if value < 0:
            raise ConfigurationError(
                name,
                f"{WIRE_NAMES[name]} must be non-negative, got {value}",
                WIRE_NAMES[name],
            )

    for name in names:
        if getattr(config, name) > MAX_FIELD_VALUE:
            raise ConfigurationError(
                name,
                f"{WIRE_NAMES[name]} must be at most {MAX_FIELD_VALUE}",
                WIRE_NAMES[name],
            )

    for name in DIVISOR_FIELDS:
        if getattr(config, name) == 0:
            raise ConfigurationError(
                name,
                f"{WIRE_NAMES[name]} must be greater than zero (used as a divisor)",
                WIRE_NAMES[name],
            )

    limits = (("host_count", max_host_count), ("cloudlet_count", max_cloudlet_count))
    for name, limit in limits:
        if limit is not None and getattr(config, name) > limit:
            raise ConfigurationError(
                name,
                f"{WIRE_NAMES[name]} must be at most {limit} on this engine",
                WIRE_NAMES[name],
            )

    return config
