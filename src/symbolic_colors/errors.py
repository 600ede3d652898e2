"""
errors.py.

Does: Define the exceptions raised outside the resolution path (strict schemes,
      color parsing). Resolution itself never raises: absence is None.
Used By: CaseTable.dispatch, PatternScheme, RGBAColor.parse, the CLI.
"""

from __future__ import annotations

from collections.abc import Iterable

from rapidfuzz import fuzz, process

__all__ = [
    "SymbolicColorError",
    "UnknownColorError",
    "InvalidColorSpec",
    "suggest_names",
]

__docformat__ = "google"

SUGGESTION_LIMIT = 3
SUGGESTION_CUTOFF = 70


def suggest_names(name: str, known: Iterable[str], limit: int = SUGGESTION_LIMIT) -> list[str]:
    """Does: Return up to *limit* known names close to *name* (best first)."""
    choices = [k for k in dict.fromkeys(known) if k]
    if not name or not choices:
        return []
    hits = process.extract(
        name, choices, scorer=fuzz.WRatio, limit=limit, score_cutoff=SUGGESTION_CUTOFF
    )
    return [choice for choice, _score, _idx in hits]


class SymbolicColorError(Exception):
    """Base class for symbolic_colors errors."""


class UnknownColorError(SymbolicColorError, LookupError):
    """Raise when a scheme that must be exhaustive meets a name it does not know."""

    def __init__(self, name: str, suggestions: Iterable[str] = ()):
        self.name = name
        self.suggestions = list(suggestions)
        msg = f"No color declared for {name!r}"
        if self.suggestions:
            msg += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(msg)


class InvalidColorSpec(SymbolicColorError, ValueError):
    """Raise when a concrete color spec (hex, name, channels) cannot be parsed."""
