"""Hydra-backed configuration for the search engine.

The composed configuration is kept in a module-level slot so engine factories
can read it without threading a config object through every call.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf, open_dict

from .validators import validate_config

logger = logging.getLogger(__name__)

# Packaged defaults, installed alongside the modules
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "conf"

_global_config: Optional[DictConfig] = None
_UNSET = object()


class ConfigManager:
    """Composes and validates search configuration from a Hydra config directory."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Directory holding ``<config_name>.yaml``. Defaults to
                the configuration shipped with the package.
        """
        self.config_dir = Path(config_dir or DEFAULT_CONFIG_DIR).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.is_dir():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose the configuration and make it the global one.

        Args:
            config_name: Name of the main config file (without .yaml)
            overrides: Hydra override strings such as ``search.log_statistics=false``
            validate: Whether to validate the composed configuration

        Returns:
            The composed configuration
        """
        GlobalHydra.instance().clear()
        with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
            cfg = compose(config_name=config_name, overrides=overrides or [])

        if validate:
            validate_config(cfg)

        global _global_config
        self.config = _global_config = cfg

        logger.info(f"Loaded configuration '{config_name}' from {self.config_dir}"
                    + (f" with overrides {overrides}" if overrides else ""))
        return cfg

    def _require_config(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``search.iterative_deepening.step``."""
        return OmegaConf.select(self._require_config(), key, default=default)

    def set_parameter(self, key: str, value: Any) -> None:
        """Set a dotted key, creating intermediate nodes as needed."""
        self.update_config({key: value})

    def update_config(self, updates: Dict[str, Any]) -> None:
        """Set several dotted keys at once."""
        config = self._require_config()
        _apply(config, updates)
        logger.debug(f"Configuration updated with: {updates}")

    def save_config(self, output_path: Union[str, Path]) -> None:
        """Write the current configuration as YAML."""
        config = self._require_config()
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(config, output_path)
        logger.info(f"Configuration saved to: {output_path}")


def _apply(config: DictConfig, updates: Dict[str, Any]) -> None:
    # Hydra-composed configs are in struct mode; new keys need open_dict
    with open_dict(config):
        for key, value in updates.items():
            OmegaConf.update(config, key, value, merge=False)


def _delete(config: DictConfig, key: str) -> None:
    parent_key, _, leaf = key.rpartition('.')
    parent = OmegaConf.select(config, parent_key) if parent_key else config
    if parent is not None:
        with open_dict(config):
            parent.pop(leaf, None)


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load configuration and make it the global one."""
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)


def get_config() -> Optional[DictConfig]:
    """Return the global configuration, or None if nothing is loaded."""
    return _global_config


def get_parameter(key: str, default: Any = None) -> Any:
    """Read a dotted key from the global configuration.

    Returns ``default`` when the key is absent or nothing has been loaded.
    """
    if _global_config is None:
        return default
    return OmegaConf.select(_global_config, key, default=default)


def reset_config() -> None:
    """Forget the global configuration."""
    global _global_config
    _global_config = None


class ConfigContext:
    """Temporarily override keys of the global configuration.

    Keys that did not exist before entering are removed again on exit.
    """

    def __init__(self, **overrides):
        self.overrides = overrides
        self.saved: Dict[str, Any] = {}

    def __enter__(self) -> DictConfig:
        config = get_config()
        if config is None:
            raise RuntimeError("No global configuration loaded")

        self.saved = {key: OmegaConf.select(config, key, default=_UNSET)
                      for key in self.overrides}
        _apply(config, self.overrides)
        return config

    def __exit__(self, exc_type, exc_val, exc_tb):
        config = get_config()
        if config is None:
            return
        for key, value in self.saved.items():
            if value is _UNSET:
                _delete(config, key)
            else:
                _apply(config, {key: value})
