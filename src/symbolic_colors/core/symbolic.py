"""
symbolic.py
===========

Does: Define SymbolicColor, the value applications declare instead of concrete
      colors, and its composition operators (blend, opacity, transform).
Used By: Application palettes, schemes, the CLI.
Returns: New SymbolicColor values; nothing is resolved until resolve() is called.

Declare names in dot.case so prefix matching can fall back from
``primary.lvl1`` to ``primary``::

    PRIMARY = SymbolicColor("primary")
    PRIMARY_1 = SymbolicColor("primary.lvl1")

Descriptions are canonical and stable:

    SymbolicColor.blending(PRIMARY, SECONDARY, 0.30)  # "(primary(0.30),secondary(0.70))"
    PRIMARY.blend(RGBAColor(0, 0, 0, 0))              # "(primary(0.50),RGBA(0.00 0.00 0.00 0.00)(0.50))"
    SymbolicColor.opacity_of(0.9, PRIMARY)            # "primary(0.90)"
    PRIMARY.transform(lambda c: c)                    # "(t->primary)"
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from symbolic_colors.concrete import ConcreteColor

from .expression import Expression, from_concrete, from_name, from_provider
from .names import SymbolicName, matches
from .resolver import resolve, resolve_color

if TYPE_CHECKING:
    from symbolic_colors.schemes.base import ColorScheme
    from symbolic_colors.schemes.catalog import ColorCatalog

__all__ = ["SymbolicColor", "DEFAULT_TRANSFORM_NAME", "CATALOG_PROVIDER_NAME"]

__docformat__ = "google"

DEFAULT_TRANSFORM_NAME = "t"
CATALOG_PROVIDER_NAME = "Bundle"

Transform = Callable[[Any], Any]


def _ratio(value: float) -> str:
    return f"{value:.2f}"


@dataclass(frozen=True)
class SymbolicColor:
    """
    A named or composed color resolved lazily through a ColorScheme.

    ``expression`` is None only for a bare named color; equality and hash cover
    both ``description`` and ``expression`` (compared by fingerprint).
    """

    description: str
    expression: Expression | None = None

    def __str__(self) -> str:
        return self.description

    @property
    def name(self) -> SymbolicName:
        return SymbolicName(self.description)

    @property
    def is_composed(self) -> bool:
        return self.expression is not None

    def to_expression(self) -> Expression:
        """The node to evaluate: the stored expression, or a Lookup of the name."""
        return self.expression if self.expression is not None else from_name(self.description)

    def resolve(self, scheme: ColorScheme | None = None) -> Any | None:
        return resolve_color(self, scheme)

    def matches(self, value: object) -> bool:
        """Use self as a pattern against *value* (prefix rule, see core.names)."""
        return matches(self, value)

    @classmethod
    def from_expression(cls, expr: Expression) -> SymbolicColor:
        return cls(expr.description, expr)

    @classmethod
    def from_catalog(cls, name: str, catalog: ColorCatalog) -> SymbolicColor:
        """
        Named color that asks the active scheme first, then *catalog*.

        Keeps ``name`` as description so colors from the same catalog stay
        distinct even though their provider shares one name.
        """
        symbolic_name = SymbolicName(name)

        def evaluate(scheme: ColorScheme) -> Any | None:
            color = scheme.color_for(symbolic_name)
            if color is None:
                color = catalog.lookup(name)
            return color

        return cls(name, from_provider(CATALOG_PROVIDER_NAME, evaluate))

    # ── Composition ────────────────────────────────────────────────────────
    def blend(self, other: SymbolicColor | Any, ratio: float = 0.5) -> SymbolicColor:
        """
        Blend self into *other* (a SymbolicColor, a color name, or a concrete color).

        Resolves to ``self * ratio + other * (1 - ratio)``; the ratio is clamped
        by the concrete blend. If one side resolves to None the other side is
        returned unchanged; None only when both are missing.

        Raises:
            TypeError: *other* is none of the accepted kinds.
        """
        if isinstance(other, (str, SymbolicName)):
            other = SymbolicColor(str(other))
        if isinstance(other, SymbolicColor):
            target = other.to_expression()
        elif isinstance(other, ConcreteColor):
            target = from_concrete(other)
        else:
            raise TypeError(f"Cannot blend with {type(other).__name__}")
        base = self.to_expression()
        name = f"({self.description}({_ratio(ratio)}),{target.description}({_ratio(1 - ratio)}))"

        def evaluate(scheme: ColorScheme) -> Any | None:
            from_color = resolve(base, scheme)
            if from_color is None:
                return resolve(target, scheme)
            to_color = resolve(target, scheme)
            if to_color is None:
                return from_color
            return from_color.blend(ratio, to_color)

        return SymbolicColor.from_expression(from_provider(name, evaluate))

    def opacity(self, ratio: float) -> SymbolicColor:
        """Overwrite the resolved color's alpha with *ratio* (not a multiply)."""
        base = self.to_expression()

        def evaluate(scheme: ColorScheme) -> Any | None:
            color = resolve(base, scheme)
            return None if color is None else color.with_alpha(ratio)

        return SymbolicColor.from_expression(
            from_provider(f"{self.description}({_ratio(ratio)})", evaluate)
        )

    def transform(self, fn: Transform, name: str = DEFAULT_TRANSFORM_NAME) -> SymbolicColor:
        """
        Apply *fn* to the resolved color.

        *name* is the only thing that tells transforms apart: two transforms of
        the same color with the same name are equal whatever *fn* does.
        """
        base = self.to_expression()

        def evaluate(scheme: ColorScheme) -> Any | None:
            color = resolve(base, scheme)
            return None if color is None else fn(color)

        return SymbolicColor.from_expression(
            from_provider(f"({name}->{self.description})", evaluate)
        )

    @staticmethod
    def blending(
        from_color: SymbolicColor, to: SymbolicColor | Any, ratio: float = 0.5
    ) -> SymbolicColor:
        return from_color.blend(to, ratio)

    @staticmethod
    def opacity_of(ratio: float, color: SymbolicColor) -> SymbolicColor:
        return color.opacity(ratio)

    @staticmethod
    def transforming(
        color: SymbolicColor, fn: Transform, name: str = DEFAULT_TRANSFORM_NAME
    ) -> SymbolicColor:
        return color.transform(fn, name)
