"""Gemini client for text and image prompts."""

import logging
from typing import Any

from wildscan.config import get_config
from wildscan.llm.json_extractor import extract_json_with_fallback

try:
    from google import genai
    from google.genai import types
except ImportError:
    genai = None
    types = None

logger = logging.getLogger(__name__)


class GeminiClient:
    """Client for the Gemini API returning raw reply text."""

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        timeout: int | None = None,
    ) -> None:
        if genai is None:
            raise ImportError("google-genai package required. Install with: pip install google-genai")
        config = get_config()
        gemini_config = config.get("gemini", {})
        self.model = model or gemini_config.get("model", "gemini-1.5-flash")
        self.api_key = api_key or gemini_config.get("api_key")
        self.timeout = timeout or gemini_config.get("timeout", 60)
        if not self.api_key:
            raise ValueError("Gemini API key missing. Set GEMINI_API_KEY.")
        self._client = genai.Client(
            api_key=self.api_key,
            http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
        )

    def _generate(self, contents: list, system: str | None = None) -> str:
        generation_config = None
        if system:
            generation_config = types.GenerateContentConfig(system_instruction=system)
        response = self._client.models.generate_content(
            model=self.model,
            contents=contents,
            config=generation_config,
        )
        return response.text or ""

    def query(self, prompt: str, system: str | None = None) -> str:
        """Send a text prompt to Gemini and return the response text."""
        return self._generate([prompt], system)

    def describe_image(self, image_bytes: bytes, mime_type: str, prompt: str) -> str:
        """Send an image with a prompt and return the raw response text."""
        logger.info("Sending %d bytes (%s) to %s", len(image_bytes), mime_type, self.model)
        image_part = types.Part.from_bytes(data=image_bytes, mime_type=mime_type)
        return self._generate([prompt, image_part])

    def extract_json(self, prompt: str, system: str | None = None) -> dict[str, Any]:
        """Query Gemini and extract JSON from the response."""
        response = self.query(prompt, system)
        return extract_json_with_fallback(response)
