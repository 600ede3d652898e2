"""
expression.py
=============

Does: Define the lazy Expression tree behind a symbolic color: Lookup (ask the
      scheme for a name), Literal (a concrete color) and NamedFunction (any
      provider closure: blend, opacity, transform, catalog lookup).
Used By: SymbolicColor composition and the resolver.
Returns: Immutable nodes whose equality and hash come only from a fingerprint
         precomputed at construction.

NamedFunction fingerprints are derived from the name alone. Two providers with
the same name and different closures compare equal; combinators make that safe
by embedding their operands' descriptions and parameters in the name.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Hashable, Optional

from symbolic_colors.concrete import content_fingerprint, describe

from .names import SymbolicName, as_name

if TYPE_CHECKING:
    from symbolic_colors.schemes.base import ColorScheme

__all__ = [
    "Expression",
    "Lookup",
    "Literal",
    "NamedFunction",
    "Evaluator",
    "from_name",
    "from_concrete",
    "from_provider",
]

__docformat__ = "google"

# Category tags keep variants from colliding with each other
LOOKUP_TAG = "Lookup"
LITERAL_TAG = "Literal"
PROVIDER_TAG = "Provider"

Evaluator = Callable[["ColorScheme"], Optional[Any]]


def _hashed(category: str, *values: Hashable) -> int:
    return hash((category, *values))


class Expression:
    """Base node; subclasses set ``fingerprint`` and ``description`` in __post_init__."""

    fingerprint: int
    description: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return self.fingerprint == other.fingerprint

    def __hash__(self) -> int:
        return self.fingerprint

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, eq=False)
class Lookup(Expression):
    """Ask the scheme for ``name``."""

    name: SymbolicName
    fingerprint: int = field(init=False, repr=False)
    description: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fingerprint", _hashed(LOOKUP_TAG, self.name.value))
        object.__setattr__(self, "description", self.name.value)


@dataclass(frozen=True, eq=False)
class Literal(Expression):
    """A concrete color, returned as-is by every scheme."""

    color: Any
    fingerprint: int = field(init=False, repr=False)
    description: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        desc = describe(self.color)
        object.__setattr__(
            self, "fingerprint", _hashed(LITERAL_TAG, content_fingerprint(self.color), desc)
        )
        object.__setattr__(self, "description", desc)


@dataclass(frozen=True, eq=False)
class NamedFunction(Expression):
    """A provider closure identified by ``name`` only."""

    name: str
    evaluate: Evaluator = field(repr=False)
    fingerprint: int = field(init=False, repr=False)
    description: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fingerprint", _hashed(PROVIDER_TAG, self.name))
        object.__setattr__(self, "description", self.name)


# ── Constructors ─────────────────────────────────────────────────────────────
def from_name(name: SymbolicName | str) -> Lookup:
    return Lookup(as_name(name))


def from_concrete(color: Any) -> Literal:
    return Literal(color)


def from_provider(name: str, evaluate: Evaluator) -> NamedFunction:
    return NamedFunction(name, evaluate)
