"""Configuration loading utilities."""

import json
import os
from pathlib import Path

from loguru import logger

from wego.config.schema import (
    DEFAULT_DESCRIPTION_BASE_URL,
    DEFAULT_IMAGE_BASE_URL,
    Config,
)

IMAGE_API_KEY_ENV = "UNSPLASH_ACCESS_KEY"


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".wego" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()
    config = Config()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            data = _migrate_config(data)
            config = Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    if not config.sources.images.api_key:
        config.sources.images.api_key = os.environ.get(IMAGE_API_KEY_ENV, "")
    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Fill source base URLs that older or hand-written files leave empty."""
    sources_cfg = data.setdefault("sources", {})
    images_cfg = sources_cfg.setdefault("images", {})
    descriptions_cfg = sources_cfg.setdefault("descriptions", {})

    # Fill default provider base URLs when missing/empty
    if not images_cfg.get("baseUrl"):
        images_cfg["baseUrl"] = DEFAULT_IMAGE_BASE_URL
    if not descriptions_cfg.get("baseUrl"):
        descriptions_cfg["baseUrl"] = DEFAULT_DESCRIPTION_BASE_URL

    return data
