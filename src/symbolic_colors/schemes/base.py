"""
base.py.

Does: Define the single ColorScheme protocol the resolver consumes.
Used by: core.resolver, PatternScheme, CatalogScheme and host-provided schemes.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from symbolic_colors.core.names import SymbolicName

__all__ = ["ColorScheme"]


@runtime_checkable
class ColorScheme(Protocol):
    """
    Structural contract for anything that maps symbolic names to colors.

    - color_for(name): the concrete color for *name*, or None when the scheme
      legitimately has no such variant.

    Schemes are expected to fail loudly (raise UnknownColorError) on names
    they were never told about, so incomplete coverage shows up early. Do not
    call color_for directly from application code; go through
    SymbolicColor.resolve() so compositions are honoured.
    """

    def color_for(self, name: SymbolicName) -> Any | None: ...
