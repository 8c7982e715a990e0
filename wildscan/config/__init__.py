"""Configuration module."""

from wildscan.config.loader import load_config, get_config, get_project_root, reset_config

__all__ = ["load_config", "get_config", "get_project_root", "reset_config"]
