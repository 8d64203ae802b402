"""Config loader for YAML configuration files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from botter.config.settings import BotterSettings
from botter.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "BOTTER_CONFIG_PATH"
DEFAULT_CONFIG_FILE = "botter.yaml"


class ConfigLoader:
    """Load BotterSettings from YAML files."""

    @staticmethod
    def load(path: Path | str) -> BotterSettings:
        """Load configuration from YAML file.

        Args:
            path: Path to a botter.yaml file or a directory containing one

        Returns:
            Parsed BotterSettings instance

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file is not valid YAML or fails validation
        """
        config_path = Path(path)
        if config_path.is_dir():
            config_path = config_path / DEFAULT_CONFIG_FILE

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                data: Any = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Top-level config in {config_path} must be a mapping")

        try:
            return BotterSettings.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    @classmethod
    def load_default(cls) -> BotterSettings:
        """Load configuration from the usual places.

        Looks at BOTTER_CONFIG_PATH (after reading .env), then ./botter.yaml,
        and falls back to built-in defaults.
        """
        load_dotenv()

        config_path = os.environ.get(CONFIG_PATH_ENV)
        if config_path:
            logger.info(f"Loading config from {config_path}")
            return cls.load(config_path)

        if os.path.exists(DEFAULT_CONFIG_FILE):
            logger.info(f"Loading config from {DEFAULT_CONFIG_FILE}")
            return cls.load(DEFAULT_CONFIG_FILE)

        logger.debug("No config file found, using defaults")
        return BotterSettings()
