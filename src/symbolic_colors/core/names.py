"""
names.py
========

Does: Define SymbolicName (dot.case color token), the prefix relation used for
      fallback matching, and CaseTable, an ordered "first declared match wins"
      dispatcher.
Used By: Lookup expressions, PatternScheme, ColorCatalog fallback.
Returns: Pure values and predicates; CaseTable.dispatch raises UnknownColorError
         when nothing matches and no default is set.

Matching is purely lexical. With prefix matching on, "primary" matches
"primary.lvl1" and also "primaryX"; names are case-sensitive and never
normalized.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from symbolic_colors import settings
from symbolic_colors.errors import UnknownColorError, suggest_names

__all__ = [
    "SymbolicName",
    "as_name",
    "matches",
    "CaseTable",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

SEPARATOR = "."

T = TypeVar("T")


@dataclass(frozen=True)
class SymbolicName:
    """Immutable dot.case token naming a symbolic color (e.g. ``primary.lvl1``)."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"SymbolicName value must be str, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return self.value

    @property
    def segments(self) -> list[str]:
        """Non-empty dot-separated segments (``"a..b"`` -> ``["a", "b"]``)."""
        return [s for s in self.value.split(SEPARATOR) if s]

    @property
    def parent(self) -> SymbolicName | None:
        """Name without its last segment, or None when nothing would remain."""
        head = self.segments[:-1]
        return SymbolicName(SEPARATOR.join(head)) if head else None

    def lineage(self) -> Iterator[SymbolicName]:
        """Yield the name itself, then every parent down to the first segment."""
        if not self.value:
            return
        current: SymbolicName | None = self
        while current is not None and current.value:
            yield current
            current = current.parent

    def is_prefix_of(self, other: SymbolicName) -> bool:
        """Raw string-prefix test, independent of the global flag."""
        return other.value.startswith(self.value)


def as_name(value: object) -> SymbolicName:
    """
    Does: Coerce a SymbolicName, a str, or anything with a ``description``
          (SymbolicColor) into a SymbolicName.
    """
    if isinstance(value, SymbolicName):
        return value
    if isinstance(value, str):
        return SymbolicName(value)
    desc = getattr(value, "description", None)
    if isinstance(desc, str):
        return SymbolicName(desc)
    raise TypeError(f"Cannot read a color name from {type(value).__name__}")


def matches(pattern: object, value: object) -> bool:
    """
    Does: Tell whether *pattern* selects *value*.
    Returns: ``value`` starts with ``pattern`` when prefix matching is enabled,
             plain equality otherwise.
    """
    p, v = as_name(pattern), as_name(value)
    if settings.is_prefix_matching_enabled():
        return p.is_prefix_of(v)
    return p == v


class CaseTable(Generic[T]):
    """
    Ordered (pattern, handler) pairs evaluated in declaration order.

    Mirrors a switch over declared names: the first pattern that matches the
    value wins, so with prefix matching on a shorter name declared earlier
    shadows its longer children::

        table = CaseTable([("primary", on_primary), ("primary.lvl2", on_lvl2)])
        table.dispatch("primary.lvl2")  # -> on_primary(...)

    Handlers receive the value as a SymbolicName.
    """

    def __init__(
        self,
        cases: Sequence[tuple[object, Callable[[SymbolicName], T]]],
        default: Callable[[SymbolicName], T] | None = None,
    ):
        self._cases: list[tuple[SymbolicName, Callable[[SymbolicName], T]]] = [
            (as_name(pattern), handler) for pattern, handler in cases
        ]
        self._default = default

    def __len__(self) -> int:
        return len(self._cases)

    @property
    def patterns(self) -> list[SymbolicName]:
        return [pattern for pattern, _ in self._cases]

    def match(self, value: object) -> SymbolicName | None:
        """Return the first declared pattern matching *value*, or None."""
        name = as_name(value)
        for pattern, _ in self._cases:
            if matches(pattern, name):
                return pattern
        return None

    def dispatch(self, value: object) -> T:
        """
        Run the handler of the first matching pattern.

        Falls back to ``default``; without one, raises UnknownColorError so an
        incomplete table surfaces early instead of producing a silent default.
        """
        name = as_name(value)
        for pattern, handler in self._cases:
            if matches(pattern, name):
                log.debug("case %r matched %r", pattern.value, name.value)
                return handler(name)
        if self._default is not None:
            return self._default(name)
        raise UnknownColorError(name.value, suggest_names(name.value, (p.value for p in self.patterns)))
