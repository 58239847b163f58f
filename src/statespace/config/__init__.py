"""Configuration management for the search engine.

This module provides Hydra-based configuration management with hierarchical
parameter groups and runtime overrides. Defaults ship in the package under `statespace/conf`.
"""

from .config_manager import (
    ConfigManager, ConfigContext, load_config, get_config, get_parameter, reset_config
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'ConfigContext',
    'load_config',
    'get_config',
    'get_parameter',
    'reset_config',
    'validate_config',
    'ConfigValidationError'
]
