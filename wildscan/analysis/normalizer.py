"""Map parsed model JSON onto AnalysisResult.

Elements missing ``species`` or ``count`` are dropped instead of being
rendered with blank values. Optional fields of the wrong type are treated as
absent. Only a missing or non-list ``animals`` array rejects the whole reply.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from wildscan.analysis.models import AnalysisResult, AnimalObservation, PlantObservation

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _species(item: Mapping) -> str | None:
    species = item.get("species")
    if isinstance(species, str) and species.strip():
        return species
    return None


def _count(item: Mapping) -> int | None:
    count = item.get("count")
    if not _is_number(count) or count < 0:
        return None
    if isinstance(count, float):
        if not count.is_integer():
            return None
        return int(count)
    return count


def _optional(item: Mapping, key: str, check) -> Any:
    if key not in item or item[key] is None:
        return None
    value = item[key]
    if check(value):
        return value
    logger.debug("Ignoring %s=%r: unexpected type", key, value)
    return None


def _population(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value) and value >= 0


def _required(item: Any, kind: str, index: int) -> tuple[str, int] | None:
    if not isinstance(item, Mapping):
        logger.warning("Dropping %s #%d: expected an object, got %s", kind, index, type(item).__name__)
        return None
    species = _species(item)
    count = _count(item)
    if species is None or count is None:
        logger.warning("Dropping %s #%d: missing or invalid species/count (%r)", kind, index, dict(item))
        return None
    return species, count


def _animal(item: Any, index: int) -> AnimalObservation | None:
    required = _required(item, "animal", index)
    if required is None:
        return None
    species, count = required
    return AnimalObservation(
        species=species,
        count=count,
        carnivore=_optional(item, "carnivore", lambda v: isinstance(v, bool)),
        world_population=_optional(item, "worldPopulation", _population),
        origin=_optional(item, "origin", lambda v: isinstance(v, str)),
    )


def _plant(item: Any, index: int) -> PlantObservation | None:
    required = _required(item, "plant", index)
    if required is None:
        return None
    species, count = required
    return PlantObservation(
        species=species,
        count=count,
        origin=_optional(item, "origin", lambda v: isinstance(v, str)),
    )


def normalize_analysis(value: Any) -> AnalysisResult | None:
    """
    Validate a parsed reply and build an AnalysisResult.

    Args:
        value: Any JSON value, usually the output of extract_json.

    Returns:
        AnalysisResult, or None when ``value`` is not an object with an
        ``animals`` array.
    """
    if not isinstance(value, Mapping):
        logger.warning("Reply is not a JSON object (%s)", type(value).__name__)
        return None

    raw_animals = value.get("animals")
    if not isinstance(raw_animals, list):
        logger.warning("Reply has no 'animals' array (%s)", type(raw_animals).__name__)
        return None

    raw_plants = value.get("plants")
    if raw_plants is None:
        raw_plants = []
    elif not isinstance(raw_plants, list):
        logger.warning("Ignoring 'plants': expected an array, got %s", type(raw_plants).__name__)
        raw_plants = []

    animals = tuple(a for a in (_animal(item, i) for i, item in enumerate(raw_animals)) if a is not None)
    plants = tuple(p for p in (_plant(item, i) for i, item in enumerate(raw_plants)) if p is not None)
    return AnalysisResult(animals=animals, plants=plants)
