"""
schemes.
========

Does: Expose the ColorScheme protocol and the bundled implementations
      (ordered pattern cases, catalog-backed).
Used By: Applications choosing an active scheme, the CLI.
"""

from .base import ColorScheme
from .catalog import CatalogScheme, ColorCatalog
from .pattern import PatternScheme, coerce_color

__all__ = [
    "ColorScheme",
    "PatternScheme",
    "ColorCatalog",
    "CatalogScheme",
    "coerce_color",
]

__docformat__ = "google"
