"""Tests for configuration management system."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from omegaconf import DictConfig, OmegaConf

import statespace
from statespace.config import (
    ConfigManager, ConfigContext, load_config, get_config, get_parameter, reset_config,
    validate_config, ConfigValidationError
)
from statespace.utils import setup_logging

CONFIG_CONTENT = """
search:
  iterative_deepening:
    step: 2
  log_statistics: true

logging:
  level: INFO
"""


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create temporary configuration directory."""
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text(CONFIG_CONTENT)
    return config_dir


@pytest.fixture(autouse=True)
def clean_global_config():
    reset_config()
    yield
    reset_config()


class TestConfigManager:
    """Test ConfigManager functionality."""

    def test_config_manager_initialization(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        assert manager.config_dir == temp_config_dir.resolve()
        assert manager.config is None

    def test_missing_config_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "missing")

    def test_default_config_dir(self):
        """The conf/ directory shipped inside the package loads and validates."""
        manager = ConfigManager()
        config = manager.load_config()

        assert manager.config_dir == (Path(statespace.__file__).parent / "conf").resolve()
        assert (manager.config_dir / "config.yaml").is_file()
        assert config.search.iterative_deepening.step == 1
        assert config.search.log_statistics is True
        assert config.logging.level == "INFO"

    def test_load_config_basic(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config()

        assert isinstance(config, DictConfig)
        assert config.search.iterative_deepening.step == 2
        assert manager.config is config

    def test_load_config_with_overrides(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config(overrides=[
            "search.iterative_deepening.step=5",
            "logging.level=DEBUG"
        ])

        assert config.search.iterative_deepening.step == 5
        assert config.logging.level == "DEBUG"

    def test_load_invalid_config(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)

        with pytest.raises(ConfigValidationError):
            manager.load_config(overrides=["search.iterative_deepening.step=0"])

        config = manager.load_config(overrides=["search.iterative_deepening.step=0"],
                                     validate=False)
        assert config.search.iterative_deepening.step == 0

    def test_get_parameter(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        manager.load_config()

        assert manager.get_parameter("search.iterative_deepening.step") == 2
        assert manager.get_parameter("nonexistent.param", "default") == "default"

    def test_set_parameter(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        manager.load_config()

        manager.set_parameter("search.iterative_deepening.step", 3)
        assert manager.get_parameter("search.iterative_deepening.step") == 3

        manager.set_parameter("new.parameter", "test_value")
        assert manager.get_parameter("new.parameter") == "test_value"

    def test_update_config(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        manager.load_config()

        manager.update_config({
            "search.iterative_deepening.step": 4,
            "search.log_statistics": False
        })

        assert manager.get_parameter("search.iterative_deepening.step") == 4
        assert manager.get_parameter("search.log_statistics") is False

    def test_save_config(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        manager.load_config()
        manager.set_parameter("search.iterative_deepening.step", 7)

        output_file = temp_config_dir / "saved" / "config.yaml"
        manager.save_config(output_file)

        assert output_file.exists()
        assert OmegaConf.load(output_file).search.iterative_deepening.step == 7

    def test_config_without_loading(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.get_parameter("search.log_statistics")

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.set_parameter("search.log_statistics", False)

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.update_config({"search.log_statistics": False})

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.save_config("test.yaml")


class TestGlobalConfigFunctions:
    """Test global configuration functions."""

    def test_nothing_loaded(self):
        assert get_config() is None
        assert get_parameter("search.iterative_deepening.step", 1) == 1

    def test_load_config_global(self, temp_config_dir):
        config = load_config(config_dir=temp_config_dir)

        assert get_config() is config
        assert get_parameter("search.iterative_deepening.step") == 2
        assert get_parameter("search.missing", "fallback") == "fallback"

    def test_load_config_with_overrides_global(self, temp_config_dir):
        config = load_config(overrides=["search.log_statistics=false"], config_dir=temp_config_dir)
        assert config.search.log_statistics is False


class TestConfigContext:
    """Test ConfigContext context manager."""

    def test_config_context(self, temp_config_dir):
        load_config(config_dir=temp_config_dir)

        with ConfigContext(**{"search.iterative_deepening.step": 9}) as ctx_config:
            assert ctx_config.search.iterative_deepening.step == 9
            assert get_parameter("search.iterative_deepening.step") == 9

        assert get_config().search.iterative_deepening.step == 2

    def test_config_context_adds_and_removes_new_keys(self, temp_config_dir):
        load_config(config_dir=temp_config_dir)

        with ConfigContext(**{"search.extra.depth": 4, "search.log_statistics": False}):
            assert get_parameter("search.extra.depth") == 4
            assert get_parameter("search.log_statistics") is False

        assert get_parameter("search.extra.depth") is None
        assert "depth" not in get_config().search.extra
        assert get_parameter("search.log_statistics") is True

    def test_config_context_restores_after_error(self, temp_config_dir):
        load_config(config_dir=temp_config_dir)

        with pytest.raises(KeyError):
            with ConfigContext(**{"search.iterative_deepening.step": 6}):
                raise KeyError("boom")

        assert get_parameter("search.iterative_deepening.step") == 2

    def test_config_context_requires_config(self):
        with pytest.raises(RuntimeError, match="No global configuration loaded"):
            with ConfigContext(**{"search.log_statistics": False}):
                pass


class TestConfigValidation:
    """Test configuration validation."""

    def test_valid_config(self):
        config = OmegaConf.create({
            "search": {
                "iterative_deepening": {"step": 3},
                "log_statistics": False
            },
            "logging": {"level": "debug"}
        })
        validate_config(config)

    def test_empty_config(self):
        validate_config(OmegaConf.create({}))

    @pytest.mark.parametrize("step", [0, -1, 1.5, "two", True])
    def test_invalid_step(self, step):
        config = OmegaConf.create({"search": {"iterative_deepening": {"step": step}}})
        with pytest.raises(ConfigValidationError, match="iterative_deepening.step"):
            validate_config(config)

    def test_invalid_log_statistics(self):
        config = OmegaConf.create({"search": {"log_statistics": "yes"}})
        with pytest.raises(ConfigValidationError, match="log_statistics"):
            validate_config(config)

    def test_invalid_log_level(self):
        config = OmegaConf.create({"logging": {"level": "LOUD"}})
        with pytest.raises(ConfigValidationError, match="logging.level"):
            validate_config(config)


class TestSetupLogging:
    """Test setup_logging."""

    def test_level_name(self):
        with patch('logging.basicConfig') as basic_config:
            setup_logging("debug")

        kwargs = basic_config.call_args.kwargs
        assert kwargs['level'] == logging.DEBUG
        assert "%(name)s" in kwargs['format']

    def test_terse_format_above_debug(self):
        with patch('logging.basicConfig') as basic_config:
            setup_logging(logging.WARNING)

        kwargs = basic_config.call_args.kwargs
        assert kwargs['level'] == logging.WARNING
        assert kwargs['format'] == "%(levelname)s: %(message)s"

    def test_level_from_config(self, temp_config_dir):
        load_config(overrides=["logging.level=ERROR"], config_dir=temp_config_dir)
        with patch('logging.basicConfig') as basic_config:
            setup_logging()

        assert basic_config.call_args.kwargs['level'] == logging.ERROR

    def test_default_level_without_config(self):
        with patch('logging.basicConfig') as basic_config:
            setup_logging()

        assert basic_config.call_args.kwargs['level'] == logging.INFO

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
