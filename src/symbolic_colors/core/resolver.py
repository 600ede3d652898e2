"""
resolver.py
===========

Does: Evaluate an Expression (or a SymbolicColor) against a ColorScheme.
Used By: SymbolicColor combinators, CatalogScheme users, the CLI.
Returns: A concrete color or None. Resolution never raises on a missing name;
         exceptions only come from the scheme or a user transform.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from symbolic_colors import settings
from symbolic_colors.utils.log import debug, topic_enabled

from .expression import Expression, Literal, Lookup, NamedFunction, from_name

if TYPE_CHECKING:
    from symbolic_colors.schemes.base import ColorScheme

    from .symbolic import SymbolicColor

__all__ = ["resolve", "resolve_color"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def resolve(expr: Expression, scheme: ColorScheme) -> Any | None:
    """
    Does: Walk *expr* against *scheme*.

    - Lookup: whatever ``scheme.color_for(name)`` returns (fallback is the
      scheme's business).
    - Literal: the wrapped color, for every scheme.
    - NamedFunction: ``evaluate(scheme)``; combinators live in these closures.
    """
    if isinstance(expr, Lookup):
        color = scheme.color_for(expr.name)
        if topic_enabled("resolve"):
            debug(f"lookup {expr.name.value!r} -> {color!r}", topic="resolve")
        return color
    if isinstance(expr, Literal):
        return expr.color
    if isinstance(expr, NamedFunction):
        color = expr.evaluate(scheme)
        if topic_enabled("resolve"):
            debug(f"provider {expr.name!r} -> {color!r}", topic="resolve")
        return color
    raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def resolve_color(color: SymbolicColor, scheme: ColorScheme | None = None) -> Any | None:
    """
    Does: Resolve a SymbolicColor; a bare named color is looked up by name.
    Returns: Concrete color or None. Without *scheme*, uses the process default
             scheme and returns None (with a warning) if none is installed.
    """
    if scheme is None:
        scheme = settings.get_default_scheme()
        if scheme is None:
            log.warning("No default color scheme installed; cannot resolve %r", color.description)
            return None
    expr = color.expression if color.expression is not None else from_name(color.description)
    return resolve(expr, scheme)
