"""Extract and validate JSON from LLM responses.

Model replies come in three shapes: a fenced block tagged ``json``, an
untagged fenced block, or bare JSON. The strategies below are tried in that
order and the first one that locates a candidate is the only one parsed; a
parse failure there ends the attempt instead of falling through to the next
strategy.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

JSON_FENCE_RE = re.compile(r"```json\b\s*([\s\S]*?)\s*```", re.IGNORECASE)
PLAIN_FENCE_RE = re.compile(r"```\s*([\s\S]*?)\s*```")


@dataclass(frozen=True)
class ExtractionStrategy:
    """A named way of locating the JSON payload inside a reply."""

    name: str
    locate: Callable[[str], str | None]


@dataclass(frozen=True)
class Extraction:
    """Outcome of one extraction attempt."""

    strategy: str | None
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.strategy is not None and self.error is None


def _first_group(pattern: re.Pattern) -> Callable[[str], str | None]:
    def locate(text: str) -> str | None:
        match = pattern.search(text)
        return match.group(1) if match else None
    return locate


def _whole_text(text: str) -> str:
    return text


STRATEGIES: tuple[ExtractionStrategy, ...] = (
    ExtractionStrategy("json_fence", _first_group(JSON_FENCE_RE)),
    ExtractionStrategy("plain_fence", _first_group(PLAIN_FENCE_RE)),
    ExtractionStrategy("bare", _whole_text),
)


def extract_reply(
    text: str,
    strategies: tuple[ExtractionStrategy, ...] = STRATEGIES,
) -> Extraction:
    """
    Recover a single JSON value from a model reply.

    Returns an Extraction; ``ok`` is False when no strategy applied or the
    selected candidate is not valid JSON. Never raises on bad input.
    """
    if not isinstance(text, str):
        return Extraction(strategy=None, error=f"expected str, got {type(text).__name__}")

    for strategy in strategies:
        candidate = strategy.locate(text)
        if candidate is None:
            continue
        try:
            value = json.loads(candidate.strip())
        except (ValueError, RecursionError) as e:
            logger.debug("Strategy %s matched but payload is not JSON: %s", strategy.name, e)
            return Extraction(strategy=strategy.name, error=str(e))
        return Extraction(strategy=strategy.name, value=value)

    return Extraction(strategy=None, error="no strategy matched")


def extract_json(text: str) -> Any | None:
    """Return the parsed JSON value of a reply, or None when it has none."""
    extraction = extract_reply(text)
    return extraction.value if extraction.ok else None


def extract_json_with_fallback(text: str) -> dict[str, Any]:
    """Extract a JSON object or return fallback with raw text."""
    result = extract_json(text)
    if isinstance(result, dict):
        return result
    return {"raw": text}
