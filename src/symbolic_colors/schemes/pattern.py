"""
pattern.py
==========

Does: PatternScheme, a ColorScheme declared as ordered (pattern, color) cases.
      The first declared pattern matching the requested name wins, so with
      prefix matching on, ``"gray"`` answers ``"gray.level2"`` unless
      ``"gray.level2"`` is declared before it.
Used By: Light/dark palettes defined in code, tests, the CLI.
Returns: A concrete color, None for cases declared as None, or raises
         UnknownColorError for undeclared names when strict.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from symbolic_colors.concrete import ConcreteColor, RGBAColor
from symbolic_colors.core.names import CaseTable, SymbolicName

__all__ = ["PatternScheme", "coerce_color"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def coerce_color(value: Any) -> Any:
    """Does: Keep ConcreteColor values as-is and parse anything else with RGBAColor."""
    if value is None or isinstance(value, ConcreteColor):
        return value
    return RGBAColor.parse(value)


def _constant(color: Any):
    return lambda _name: color


class PatternScheme:
    """Ordered cases -> colors; see module docstring for matching order."""

    def __init__(
        self,
        cases: Mapping[str, Any] | Iterable[tuple[str, Any]],
        *,
        strict: bool = True,
        name: str = "pattern",
    ):
        pairs = list(cases.items()) if isinstance(cases, Mapping) else list(cases)
        self.name = name
        self.strict = strict
        colors = [(pattern, coerce_color(color)) for pattern, color in pairs]
        self._table: CaseTable[Any] = CaseTable(
            [(pattern, _constant(color)) for pattern, color in colors],
            default=None if strict else _constant(None),
        )

    def __repr__(self) -> str:
        return f"PatternScheme(name={self.name!r}, cases={len(self._table)}, strict={self.strict})"

    @property
    def patterns(self) -> list[SymbolicName]:
        return self._table.patterns

    def color_for(self, name: SymbolicName) -> Any | None:
        return self._table.dispatch(name)
