"""
vecangle Configuration
======================
Defaults for ingestion and output. Single source of truth.

Usage:
    from vecangle.config import CONFIG, load_config
    precision = CONFIG['output']['precision']

    cfg = load_config('vecangle.yaml')   # defaults + YAML override

Override files mirror the CONFIG layout; only the keys present are
replaced:

    input:
      strict: true
    output:
      precision: 4
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from vecangle.errors import ConfigError

CONFIG = {

    # =================================================================
    # Input
    # =================================================================
    'input': {
        'default_file': 'test.txt',   # used when no path is given
        'strict': False,              # reject unparseable tokens
        'skip_blank': False,          # blank lines are empty vectors otherwise
    },

    # =================================================================
    # Output
    # =================================================================
    'output': {
        'precision': 6,               # fixed-point digits for theta
        'symbol': '𝜃',
    },
}


def validate_config(config: Dict[str, Any]) -> None:
    """Check sections, keys and value types against CONFIG."""
    for section, values in config.items():
        if section not in CONFIG:
            raise ConfigError(f"Unknown config section: {section!r}")
        if not isinstance(values, dict):
            raise ConfigError(f"Config section {section!r} must be a mapping")
        for key, value in values.items():
            if key not in CONFIG[section]:
                raise ConfigError(f"Unknown config key: {section}.{key}")
            expected = type(CONFIG[section][key])
            # bool is an int subclass; keep them apart
            if type(value) is not expected:
                raise ConfigError(
                    f"{section}.{key} must be {expected.__name__}, got {type(value).__name__}"
                )

    precision = config.get('output', {}).get('precision')
    if precision is not None and precision < 0:
        raise ConfigError(f"output.precision must be >= 0, got {precision}")


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Defaults merged with an optional YAML override file.

    Returns a fresh copy; CONFIG itself is never modified.
    """
    config = copy.deepcopy(CONFIG)
    if path is None:
        return config

    path = Path(path)
    try:
        with open(path) as f:
            override = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {str(path)!r}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {str(path)!r}: {e}") from e

    if override is None:
        return config
    if not isinstance(override, dict):
        raise ConfigError(f"Config file {str(path)!r} must contain a mapping")

    validate_config(override)
    for section, values in override.items():
        config[section].update(values)
    return config
