"""Configuration module for Botter."""

from botter.config.loader import ConfigLoader
from botter.config.settings import (
    BotterSettings,
    EngineSettings,
    LoggingSettings,
    RuntimeSettings,
)

__all__ = ["BotterSettings", "ConfigLoader", "EngineSettings", "LoggingSettings", "RuntimeSettings"]
