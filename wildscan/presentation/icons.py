"""Species name to icon lookup via config-driven tables."""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

import yaml

from wildscan.config import get_config, get_project_root


@dataclass(frozen=True)
class IconTable:
    """Ordered name -> icon mapping with a fallback icon."""

    icons: dict[str, str] = field(default_factory=dict)
    fallback: str = "❓"

    def classify(self, name: str) -> str:
        """
        Pick an icon for a free-text species name.

        Exact case-insensitive key first, then the first key (in table order)
        contained in the name, otherwise the fallback.
        """
        if not name or not isinstance(name, str):
            return self.fallback
        lowered = name.strip().lower()
        for key, icon in self.icons.items():
            if key.lower() == lowered:
                return icon
        for key, icon in self.icons.items():
            if key.lower() in lowered:
                return icon
        return self.fallback


def load_icon_tables(path: str | Path | None = None) -> dict[str, IconTable]:
    """Load icon tables (``animals``, ``plants``) from YAML."""
    if path is None:
        path = get_config().get("paths", {}).get("icons_file") or get_project_root() / "config" / "icons.yaml"
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Icon table not found: {path}")
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return {
        name: IconTable(icons=dict(section.get("icons") or {}), fallback=section.get("fallback", "❓"))
        for name, section in raw.items()
    }


@lru_cache(maxsize=1)
def _default_tables() -> dict[str, IconTable]:
    return load_icon_tables()


def icon_for_animal(name: str) -> str:
    return _default_tables().get("animals", IconTable(fallback="🐾")).classify(name)


def icon_for_plant(name: str) -> str:
    return _default_tables().get("plants", IconTable(fallback="🌿")).classify(name)
