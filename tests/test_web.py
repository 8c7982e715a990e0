"""Tests for the HTTP endpoints (Gemini mocked)."""

import io
from unittest.mock import MagicMock

import pytest

from wildscan.api.web import create_app
from wildscan.config import get_config


@pytest.fixture
def gemini():
    return MagicMock()


@pytest.fixture
def client(gemini):
    app = create_app(client_factory=lambda: gemini)
    app.config["TESTING"] = True
    return app.test_client()


def upload(client, data=b"\xff\xd8jpeg", filename="photo.jpg"):
    return client.post(
        "/api/gemini-image",
        data={"file": (io.BytesIO(data), filename, "image/jpeg")},
        content_type="multipart/form-data",
    )


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_gemini_image_success(client, gemini, sample_reply):
    gemini.describe_image.return_value = sample_reply
    resp = upload(client)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["analysis"] == sample_reply
    assert body["result"]["animals"][0]["species"] == "Red fox"
    assert body["error"] is None
    assert gemini.describe_image.call_args[0][1] == "image/jpeg"


def test_gemini_image_malformed_reply(client, gemini):
    gemini.describe_image.return_value = "Sorry, I can't help with that."
    body = upload(client).get_json()
    assert body["analysis"] == "Sorry, I can't help with that."
    assert body["result"] is None
    assert body["error"]


def test_gemini_image_missing_file(client):
    resp = client.post("/api/gemini-image", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_gemini_image_empty_file(client):
    resp = upload(client, data=b"")
    assert resp.status_code == 400


def test_gemini_image_upstream_failure(client, gemini):
    gemini.describe_image.side_effect = RuntimeError("boom")
    resp = upload(client)
    assert resp.status_code == 500
    assert "boom" not in resp.get_json()["error"]


def test_gemini_image_client_unavailable():
    def factory():
        raise ValueError("Gemini API key missing. Set GEMINI_API_KEY.")

    app = create_app(client_factory=factory)
    resp = upload(app.test_client())
    assert resp.status_code == 500
    assert "API key" in resp.get_json()["error"]


def test_gemini_text(client, gemini):
    gemini.query.return_value = "Lions live in prides."
    resp = client.post("/api/gemini", json={"prompt": "Tell me about lions"})
    assert resp.status_code == 200
    assert resp.get_json() == {"text": "Lions live in prides."}
    gemini.query.assert_called_once_with("Tell me about lions")


def test_gemini_text_missing_prompt(client):
    assert client.post("/api/gemini", json={}).status_code == 400


def test_gemini_text_failure(client, gemini):
    gemini.query.side_effect = RuntimeError("quota exceeded")
    resp = client.post("/api/gemini", json={"prompt": "hi"})
    assert resp.status_code == 500
    assert resp.get_json()["error"] == "quota exceeded"


def test_gemini_image_missing_prompt_template(client, gemini, monkeypatch):
    monkeypatch.setitem(get_config()["analysis"], "prompt", "no_such_prompt")
    resp = upload(client)
    assert resp.status_code == 500
    assert resp.is_json
    assert resp.get_json()["error"]
    gemini.describe_image.assert_not_called()
