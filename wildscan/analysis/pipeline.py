"""Raw model reply to AnalysisResult, and the image analysis entry point."""

import logging
from dataclasses import dataclass
from typing import Any

from wildscan.analysis.models import AnalysisResult, FailureKind
from wildscan.analysis.normalizer import normalize_analysis
from wildscan.llm.json_extractor import extract_reply

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisOutcome:
    """Result of analyzing one image: either a result or a failure kind."""

    result: AnalysisResult | None
    raw_reply: str | None = None
    failure: FailureKind | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def parse_analysis(reply_text: str) -> AnalysisResult | None:
    """Extract and normalize a model reply. Returns None on failure."""
    return interpret_reply(reply_text).result


def interpret_reply(reply_text: str) -> AnalysisOutcome:
    """Extract and normalize a model reply, keeping the reason for failure."""
    extraction = extract_reply(reply_text)
    if not extraction.ok:
        logger.warning("Malformed model reply (%s): %s", extraction.strategy or "none", extraction.error)
        return AnalysisOutcome(result=None, raw_reply=reply_text, failure=FailureKind.MALFORMED_REPLY)

    result = normalize_analysis(extraction.value)
    if result is None:
        return AnalysisOutcome(result=None, raw_reply=reply_text, failure=FailureKind.SCHEMA_MISMATCH)

    logger.info(
        "Parsed reply via %s: %d animal(s), %d plant(s)",
        extraction.strategy, len(result.animals), len(result.plants),
    )
    return AnalysisOutcome(result=result, raw_reply=reply_text)


def get_gemini_client():
    """Get GeminiClient. Raises if the SDK or API key is unavailable."""
    from wildscan.llm.gemini_client import GeminiClient
    return GeminiClient()


def analyze_image(image_bytes: bytes, mime_type: str, client: Any = None) -> AnalysisOutcome:
    """
    Ask the model for a species inventory of an image.

    Errors before a reply arrives (missing prompt template, SDK or key,
    network, quota) are reported as an UPSTREAM_FAILURE outcome; the reply is
    only parsed when one was received.
    """
    from wildscan.config import get_config
    from wildscan.llm.prompt_manager import format_prompt

    prompt_name = get_config().get("analysis", {}).get("prompt", "species_inventory")
    try:
        prompt = format_prompt(prompt_name)
        if client is None:
            client = get_gemini_client()
        reply = client.describe_image(image_bytes, mime_type, prompt)
    except Exception as e:
        logger.exception("Image analysis request failed: %s", e)
        return AnalysisOutcome(result=None, failure=FailureKind.UPSTREAM_FAILURE)
    return interpret_reply(reply)
