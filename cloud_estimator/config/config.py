"""Application settings for Cloud Estimator."""

import yaml
from pathlib import Path
from typing import Dict, Any


VALID_LOG_LEVELS = ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']


def default_config() -> Dict[str, Any]:
    """Settings used when no settings file is given."""
    return {
        'server': {
            'host': '0.0.0.0',
            'port': 7070,
            'debug': False,
            'cors_origins': ['*'],
            'static_dir': None,
        },
        'engine': {
            'random_seed': None,
            'max_host_count': 100_000,
            'max_cloudlet_count': 1_000_000,
        },
        'logging': {
            'level': 'INFO',
            'file': None,
        },
    }


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load settings from YAML file.

    All sections and keys must be present in the file.

    Args:
        config_path: Path to YAML settings file

    Returns:
        Validated settings dictionary

    Raises:
        FileNotFoundError: If settings file doesn't exist
        ValueError: If YAML parsing fails or settings are invalid
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML config file: {e}")

    if config is None:
        raise ValueError(f"Config file is empty: {config_path}")

    return validate_config(config)


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate settings structure and values.

    Args:
        config: Settings dictionary

    Returns:
        Validated settings dictionary (same as input)

    Raises:
        ValueError: If settings are invalid or incomplete
    """
    if not isinstance(config, dict):
        raise ValueError("Config must be a mapping of sections")

    required_sections = ['server', 'engine', 'logging']
    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: '{section}'")

    # Server section
    server = config['server']
    required_server = ['host', 'port', 'debug', 'cors_origins', 'static_dir']
    for key in required_server:
        if key not in server:
            raise ValueError(f"Missing required key 'server.{key}' in config")

    if not isinstance(server['host'], str) or not server['host']:
        raise ValueError("server.host must be a non-empty string")
    if not isinstance(server['port'], int) or isinstance(server['port'], bool) or not (0 < server['port'] < 65536):
        raise ValueError("server.port must be an integer between 1 and 65535")
    if not isinstance(server['debug'], bool):
        raise ValueError("server.debug must be a boolean")
    if not isinstance(server['cors_origins'], list) or not all(isinstance(o, str) for o in server['cors_origins']):
        raise ValueError("server.cors_origins must be a list of strings")
    if server['static_dir'] is not None and not isinstance(server['static_dir'], str):
        raise ValueError("server.static_dir must be a string or null")

    # Engine section
    engine = config['engine']
    if 'random_seed' not in engine:
        raise ValueError("Missing required key 'engine.random_seed' in config")
    seed = engine['random_seed']
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ValueError("engine.random_seed must be a non-negative integer or null")
    for key in ['max_host_count', 'max_cloudlet_count']:
        if key not in engine:
            raise ValueError(f"Missing required key 'engine.{key}' in config")
        limit = engine[key]
        if limit is not None and (not isinstance(limit, int) or isinstance(limit, bool) or limit < 1):
            raise ValueError(f"engine.{key} must be a positive integer or null")

    # Logging section
    logging_config = config['logging']
    for key in ['level', 'file']:
        if key not in logging_config:
            raise ValueError(f"Missing required key 'logging.{key}' in config")

    if logging_config['level'] not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid logging.level: '{logging_config['level']}'. Must be one of {VALID_LOG_LEVELS}"
        )
    if logging_config['file'] is not None and not isinstance(logging_config['file'], str):
        raise ValueError("logging.file must be a string or null")

    return config
