"""Configuration module for wego."""

from wego.config.loader import get_config_path, load_config
from wego.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
