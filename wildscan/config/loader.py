"""Configuration loader with environment variable overrides."""

import os
from pathlib import Path
from typing import Any

import yaml


_config: dict[str, Any] | None = None


def get_project_root() -> Path:
    """Return the repository root (parent of the wildscan package)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML file with environment variable overrides."""
    global _config
    if _config is not None:
        return _config

    if config_path is None:
        config_path = get_project_root() / "config" / "default.yaml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    # Resolve paths relative to project root
    project_root = config_path.parent.parent
    if "paths" in config:
        for key, value in config["paths"].items():
            if isinstance(value, str) and not Path(value).is_absolute():
                config["paths"][key] = str(project_root / value)

    # Environment overrides
    config["gemini"] = config.get("gemini") or {}
    if os.getenv("WILDSCAN_GEMINI_MODEL"):
        config["gemini"]["model"] = os.getenv("WILDSCAN_GEMINI_MODEL")
    if os.getenv("WILDSCAN_GEMINI_TIMEOUT"):
        config["gemini"]["timeout"] = int(os.getenv("WILDSCAN_GEMINI_TIMEOUT"))
    if os.getenv("GEMINI_API_KEY"):
        config["gemini"]["api_key"] = os.getenv("GEMINI_API_KEY")

    config["logging"] = config.get("logging") or {}
    if os.getenv("WILDSCAN_LOG_LEVEL"):
        config["logging"]["level"] = os.getenv("WILDSCAN_LOG_LEVEL")

    _config = config
    return _config


def get_config() -> dict[str, Any]:
    """Get loaded configuration. Loads if not already loaded."""
    if _config is None:
        load_config()
    return _config or {}


def reset_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _config
    _config = None
