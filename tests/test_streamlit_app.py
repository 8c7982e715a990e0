"""Tests for Streamlit helpers."""

from unittest.mock import patch

import pytest

pytest.importorskip("streamlit")

from wildscan.api.streamlit_app import check_gemini_available, format_population


def test_format_population():
    assert format_population(None) == "unknown"
    assert format_population(23000) == "23,000"
    assert format_population(7_000_000) == "7.0 million"
    assert format_population(8.1e9) == "8.1 billion"


@patch("wildscan.api.streamlit_app.get_gemini_client", side_effect=ValueError("Gemini API key missing."))
def test_check_gemini_missing_key(_):
    ok, error = check_gemini_available()
    assert not ok
    assert "API key" in error


@patch("wildscan.api.streamlit_app.get_gemini_client")
def test_check_gemini_ok(_):
    assert check_gemini_available() == (True, "")
