"""
symbolic_colors
===============

Does: Root package initializer. Declare symbolic colors ("primary.lvl1"),
      compose them (blend, opacity, transform) and resolve them against a
      pluggable ColorScheme with prefix fallback.
Used by: Applications and the `symbolic-colors` CLI.
"""

from .concrete import ConcreteColor, RGBAColor
from .core import (
    CaseTable,
    Expression,
    SymbolicColor,
    SymbolicName,
    matches,
    resolve,
    resolve_color,
)
from .errors import InvalidColorSpec, SymbolicColorError, UnknownColorError
from .schemes import CatalogScheme, ColorCatalog, ColorScheme, PatternScheme
from .settings import (
    get_default_scheme,
    is_prefix_matching_enabled,
    prefix_matching,
    set_default_scheme,
    set_prefix_matching_enabled,
)

__all__ = [
    "SymbolicName",
    "SymbolicColor",
    "Expression",
    "CaseTable",
    "matches",
    "resolve",
    "resolve_color",
    "ConcreteColor",
    "RGBAColor",
    "ColorScheme",
    "PatternScheme",
    "ColorCatalog",
    "CatalogScheme",
    "SymbolicColorError",
    "UnknownColorError",
    "InvalidColorSpec",
    "is_prefix_matching_enabled",
    "set_prefix_matching_enabled",
    "prefix_matching",
    "get_default_scheme",
    "set_default_scheme",
]
__docformat__ = "google"
