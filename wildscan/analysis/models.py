"""Domain types for species inventories."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class AnimalObservation:
    """One animal species detected in an image."""

    species: str
    count: int
    carnivore: bool | None = None
    world_population: int | float | None = None
    origin: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"species": self.species, "count": self.count}
        if self.carnivore is not None:
            out["carnivore"] = self.carnivore
        if self.world_population is not None:
            out["worldPopulation"] = self.world_population
        if self.origin is not None:
            out["origin"] = self.origin
        return out


@dataclass(frozen=True)
class PlantObservation:
    """One plant species detected in an image."""

    species: str
    count: int
    origin: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"species": self.species, "count": self.count}
        if self.origin is not None:
            out["origin"] = self.origin
        return out


@dataclass(frozen=True)
class AnalysisResult:
    """Inventory of animals and plants, in the order the model listed them."""

    animals: tuple[AnimalObservation, ...]
    plants: tuple[PlantObservation, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.animals and not self.plants

    def to_dict(self) -> dict[str, Any]:
        return {
            "animals": [a.to_dict() for a in self.animals],
            "plants": [p.to_dict() for p in self.plants],
        }


class FailureKind(str, Enum):
    """Why an analysis produced no result."""

    MALFORMED_REPLY = "malformed_reply"
    SCHEMA_MISMATCH = "schema_mismatch"
    UPSTREAM_FAILURE = "upstream_failure"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    FailureKind.MALFORMED_REPLY: "The model reply could not be read. Please try again.",
    FailureKind.SCHEMA_MISMATCH: "The model reply did not contain a species inventory. Please try again.",
    FailureKind.UPSTREAM_FAILURE: "The image analysis service is unavailable. Please try again later.",
}
