"""Pytest fixtures for WildScan tests."""

import json
from pathlib import Path

import pytest

from wildscan.config import reset_config


FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Reload config for every test so env overrides do not leak."""
    for name in ("WILDSCAN_GEMINI_MODEL", "WILDSCAN_GEMINI_TIMEOUT", "WILDSCAN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_payload():
    """A well-formed inventory as the model is asked to return it."""
    return {
        "animals": [
            {"species": "Lion", "count": 2, "carnivore": True, "worldPopulation": 23000, "origin": "Africa"},
            {"species": "Zebra", "count": 5, "carnivore": False},
        ],
        "plants": [
            {"species": "Acacia", "count": 1, "origin": "Africa"},
        ],
    }


@pytest.fixture
def sample_reply():
    """A real-looking reply wrapped in a json fence with prose around it."""
    return (FIXTURES_DIR / "reply_json_fence.txt").read_text(encoding="utf-8")


@pytest.fixture
def sample_reply_payload(sample_reply):
    start = sample_reply.index("{")
    end = sample_reply.rindex("}") + 1
    return json.loads(sample_reply[start:end])
