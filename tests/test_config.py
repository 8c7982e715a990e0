"""Tests for config loader."""

from pathlib import Path

import pytest

from wildscan.config.loader import load_config, get_config, get_project_root


def test_load_config():
    """Config loads from default path."""
    config = load_config()
    assert "paths" in config
    assert "gemini" in config
    assert config["gemini"]["model"]


def test_get_config_returns_dict():
    """get_config returns a dict."""
    cfg = get_config()
    assert isinstance(cfg, dict)


def test_paths_resolved_to_project_root():
    config = load_config()
    icons = Path(config["paths"]["icons_file"])
    assert icons.is_absolute()
    assert icons == get_project_root() / "config" / "icons.yaml"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WILDSCAN_GEMINI_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("WILDSCAN_GEMINI_TIMEOUT", "15")
    monkeypatch.setenv("WILDSCAN_LOG_LEVEL", "DEBUG")
    config = load_config()
    assert config["gemini"]["model"] == "gemini-2.0-flash"
    assert config["gemini"]["timeout"] == 15
    assert config["logging"]["level"] == "DEBUG"


def test_custom_config_path(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    path = config_dir / "custom.yaml"
    path.write_text("gemini:\n  model: custom-model\npaths:\n  prompts_dir: prompts\n", encoding="utf-8")
    config = load_config(path)
    assert config["gemini"]["model"] == "custom-model"
    assert config["paths"]["prompts_dir"] == str(tmp_path / "prompts")


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")
