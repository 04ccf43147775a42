"""Configuration manager for loading and validating .orgkit.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Optional

import yaml
from pydantic import ValidationError

from orgkit.domain.config import AppConfig, RetryOptions, merge_retry_options
from orgkit.infrastructure.retry import create_retry

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".orgkit.yml"

# Environment variable -> retry option field
ENV_RETRY_OVERRIDES = {
    "ORGKIT_RETRY_MAX_RETRIES": "max_retries",
    "ORGKIT_RETRY_INITIAL_DELAY": "initial_delay",
    "ORGKIT_RETRY_MAX_DELAY": "max_delay",
    "ORGKIT_RETRY_BACKOFF_FACTOR": "backoff_factor",
    "ORGKIT_RETRY_TIMEOUT": "timeout",
}


class ConfigurationError(Exception):
    """Configuration validation error."""

    pass


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for item in error.errors():
        field = ".".join(str(x) for x in item["loc"])
        lines.append(f"  - {field}: {item['msg']}")
    return "Configuration validation failed:\n" + "\n".join(lines)


class ConfigManager:
    """Manages configuration from .orgkit.yml and environment variables

    Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .orgkit.yml file (searched from current directory upwards)
    3. Environment variables (ORGKIT_RETRY_*)
    4. CLI arguments (handled by CLI layer)
    """

    DEFAULT_CONFIG = {
        "retry": {
            "max_retries": 3,
            "initial_delay": 1.0,
            "max_delay": 30.0,
            "backoff_factor": 2.0,
        },
        "presets": {},
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager

        Args:
            config_path: Path to .orgkit.yml (searches from current dir if None)

        Raises:
            ConfigurationError: If configuration validation fails
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file()
        try:
            self.config: AppConfig = self._load_config()
        except ValidationError as e:
            raise ConfigurationError(_format_validation_error(e)) from e

    def _find_config_file(self) -> Optional[Path]:
        """Find .orgkit.yml starting from the current directory

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_file = parent / CONFIG_FILE_NAME
            if config_file.exists():
                logger.info(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
        return None

    def _load_config(self) -> AppConfig:
        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
                if not isinstance(file_config, dict):
                    raise ValueError("top level must be a mapping")
                config_dict = self._merge_config(config_dict, file_config)
                logger.info(f"Loaded configuration from {self.config_path}")
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {self.config_path}: {e}")
                logger.info("Using default configuration")

        config_dict = self._apply_env_overrides(config_dict)
        return AppConfig(**config_dict)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries"""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ORGKIT_RETRY_* environment variable overrides

        Values are passed through as strings; pydantic coerces them.
        """
        retry_section = config.setdefault("retry", {})
        for env_name, field in ENV_RETRY_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                logger.debug(f"Overriding retry.{field} from {env_name}")
                retry_section[field] = value
        return config

    def get_retry_options(self, preset: Optional[str] = None) -> RetryOptions:
        """Get retry options, optionally with a named preset applied

        Args:
            preset: Preset name from the ``presets`` section

        Returns:
            Resolved retry options

        Raises:
            ConfigurationError: If the preset is unknown
        """
        if preset is None:
            return self.config.retry
        if preset not in self.config.presets:
            available = ", ".join(sorted(self.config.presets)) or "none"
            raise ConfigurationError(f"Unknown retry preset: {preset}. Available presets: {available}")
        try:
            return merge_retry_options(self.config.retry, self.config.presets[preset])
        except ValidationError as e:
            raise ConfigurationError(_format_validation_error(e)) from e

    def get_presets(self) -> Dict[str, RetryOptions]:
        """Get the named retry presets"""
        return dict(self.config.presets)

    def create_retry(self, preset: Optional[str] = None) -> Callable[..., Awaitable[Any]]:
        """Create a retry function bound to the configured options"""
        return create_retry(self.get_retry_options(preset))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)

        Args:
            key: Configuration key (e.g., "retry.max_retries" or "presets")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self.config.model_dump()
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value
