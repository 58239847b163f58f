"""Configuration validation for the search engine."""

import logging

from omegaconf import DictConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_logging_config(config.get('logging', {}))

        logger.info("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    id_config = search_config.get('iterative_deepening', {})
    if id_config:
        step = id_config.get('step', 1)
        # bool is an int subclass
        if not isinstance(step, int) or isinstance(step, bool) or step < 1:
            raise ConfigValidationError(
                f"iterative_deepening.step must be positive integer, got {step}"
            )

    log_statistics = search_config.get('log_statistics', True)
    if not isinstance(log_statistics, bool):
        raise ConfigValidationError(
            f"search.log_statistics must be boolean, got {log_statistics}"
        )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section.

    Args:
        logging_config: Logging configuration section
    """
    if not logging_config:
        return

    level = logging_config.get('level', 'INFO')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level}"
        )
