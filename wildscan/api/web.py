"""HTTP endpoints forwarding images and prompts to Gemini."""

import logging

from flask import Flask, jsonify, request

from wildscan.analysis.models import FailureKind
from wildscan.analysis.pipeline import analyze_image, get_gemini_client
from wildscan.config import get_config

logger = logging.getLogger(__name__)


def create_app(client_factory=None) -> Flask:
    """Build the Flask app. ``client_factory`` returns a GeminiClient-like object."""
    client_factory = client_factory or get_gemini_client
    app = Flask(__name__)
    max_mb = get_config().get("analysis", {}).get("max_upload_mb")
    if max_mb:
        app.config["MAX_CONTENT_LENGTH"] = int(max_mb) * 1024 * 1024

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/gemini-image", methods=["POST"])
    def gemini_image():
        """Analyze an uploaded image; returns the raw reply and the parsed inventory."""
        file = request.files.get("file")
        if file is None or file.filename == "":
            return jsonify({"error": "no file provided"}), 400
        image_bytes = file.read()
        if not image_bytes:
            return jsonify({"error": "image file is empty"}), 400

        try:
            client = client_factory()
        except (ImportError, ValueError) as e:
            logger.error("Gemini client unavailable: %s", e)
            return jsonify({"error": str(e)}), 500

        outcome = analyze_image(image_bytes, file.mimetype or "image/jpeg", client)
        if outcome.failure is FailureKind.UPSTREAM_FAILURE:
            return jsonify({"error": outcome.failure.message}), 500
        return jsonify({
            "analysis": outcome.raw_reply,
            "result": outcome.result.to_dict() if outcome.ok else None,
            "error": outcome.failure.message if outcome.failure else None,
        })

    @app.route("/api/gemini", methods=["POST"])
    def gemini_text():
        """Send a free-text prompt to Gemini."""
        data = request.get_json(silent=True) or {}
        prompt = data.get("prompt")
        if not prompt or not isinstance(prompt, str):
            return jsonify({"error": "no prompt provided"}), 400
        try:
            text = client_factory().query(prompt)
        except Exception as e:
            logger.exception("Gemini text request failed")
            return jsonify({"error": str(e) or "Gemini request failed"}), 500
        return jsonify({"text": text})

    return app


def main() -> None:
    from wildscan.logging_config import setup_logging_from_config

    setup_logging_from_config()
    create_app().run(host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
