"""
catalog.py
==========

Does: ColorCatalog, an in-memory name -> color store (optionally loaded from a
      JSON file), and CatalogScheme, a ColorScheme that reads from it.
Used By: SymbolicColor.from_catalog, the CLI, applications shipping palettes
         as data files.
Returns: Concrete colors or None.

With prefix matching enabled, a miss on ``a.b.c.d`` retries ``a.b.c``, then
``a.b`` and so on, and gives up once the name is empty.

Catalog file format::

    {"colors": {"primary": "#3366ff", "primary.lvl1": [51, 102, 255, 128]}}

or the same mapping without the ``"colors"`` wrapper. A flat catalog may
still name a color ``"colors"``; only an object under that key is unwrapped.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from symbolic_colors import settings
from symbolic_colors.core.names import SymbolicName
from symbolic_colors.utils.load_config import load_config
from symbolic_colors.utils.log import debug

from .pattern import coerce_color

__all__ = ["ColorCatalog", "CatalogScheme"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def _validate_catalog(data: dict[str, Any]) -> dict[str, Any]:
    """Does: Unwrap a "colors" object when present and parse every value into a color."""
    wrapped = data.get("colors")
    colors = wrapped if isinstance(wrapped, dict) else data
    return {str(name): coerce_color(spec) for name, spec in colors.items()}


class ColorCatalog:
    """Name -> concrete color store with dot-segment fallback."""

    def __init__(self, colors: Mapping[str, Any] | None = None, *, name: str = "catalog"):
        self.name = name
        self._lock = threading.Lock()
        self._colors: dict[str, Any] = {}
        for key, spec in (colors or {}).items():
            self._colors[str(key)] = coerce_color(spec)

    @classmethod
    def from_json(
        cls, file: str | os.PathLike[str], *, base_dir: Path | None = None
    ) -> ColorCatalog:
        """Load a catalog file through load_config (data-dir discovery, caching)."""
        colors = load_config(file, base_dir=base_dir, validator=_validate_catalog)
        catalog = cls(colors, name=Path(os.fspath(file)).stem)
        log.info("Loaded %d colors into catalog %r", len(catalog), catalog.name)
        return catalog

    def __repr__(self) -> str:
        return f"ColorCatalog(name={self.name!r}, colors={len(self)})"

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, name: object) -> bool:
        return str(name) in self._colors

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._colors))

    def names(self) -> list[str]:
        return list(self._colors)

    def register(self, name: str, spec: Any) -> None:
        """Add or replace one color."""
        color = coerce_color(spec)
        with self._lock:
            self._colors[name] = color

    def get(self, name: str) -> Any | None:
        """Exact lookup, no fallback."""
        return self._colors.get(name)

    def lookup(self, name: str, prefix_matching: bool | None = None) -> Any | None:
        """
        Does: Find *name*, falling back to shorter dot-prefixes when prefix
              matching is on (explicit argument, else the process setting).
        Returns: Concrete color or None.
        """
        if prefix_matching is None:
            prefix_matching = settings.is_prefix_matching_enabled()
        if not prefix_matching:
            return self.get(name)
        for candidate in SymbolicName(name).lineage():
            color = self._colors.get(candidate.value)
            if color is not None:
                if candidate.value != name:
                    debug(f"{name!r} fell back to {candidate.value!r}", topic="catalog")
                return color
        debug(f"{name!r} not found in {self.name!r}", topic="catalog")
        return None


class CatalogScheme:
    """ColorScheme reading straight from a ColorCatalog."""

    def __init__(self, catalog: ColorCatalog):
        self.catalog = catalog

    def __repr__(self) -> str:
        return f"CatalogScheme({self.catalog!r})"

    def color_for(self, name: SymbolicName) -> Any | None:
        return self.catalog.lookup(name.value)
