"""
color.py
========

Does: Define the ConcreteColor protocol the engine relies on (blend / with_alpha /
      description / hash) and RGBAColor, the default float-RGBA implementation
      parsed from hex strings, CSS/XKCD names and channel sequences.
Used By: Literal expressions, catalogs, bundled schemes, the CLI.
Returns: Immutable color values; parsing failures raise InvalidColorSpec.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar, Union, runtime_checkable

import webcolors
from matplotlib.colors import to_hex, to_rgba

from symbolic_colors.errors import InvalidColorSpec

__all__ = [
    "ConcreteColor",
    "RGBAColor",
    "ColorSpec",
    "clamp_unit",
    "describe",
    "content_fingerprint",
]

__docformat__ = "google"

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="ConcreteColor")


# ── Protocol ──────────────────────────────────────────────────────────────────
@runtime_checkable
class ConcreteColor(Protocol):
    """
    Structural contract for host color values.

    - blend(ratio, other): `self * ratio + other * (1 - ratio)`, ratio clamped to [0, 1].
    - with_alpha(ratio): copy with the alpha channel overwritten.
    - description: stable textual rendering used in Literal fingerprints.
    Implementations must be hashable; the hash is the content fingerprint.
    """

    @property
    def description(self) -> str: ...

    def blend(self: C, ratio: float, other: C) -> C: ...

    def with_alpha(self: C, ratio: float) -> C: ...


def clamp_unit(value: float) -> float:
    """Does: Clamp *value* into [0.0, 1.0]."""
    return min(max(0.0, float(value)), 1.0)


def describe(color: object) -> str:
    """Does: Return `color.description` when present, else `str(color)`."""
    desc = getattr(color, "description", None)
    return desc if isinstance(desc, str) else str(color)


def content_fingerprint(color: object) -> int:
    """Does: Hash a concrete color, falling back to its description when unhashable."""
    try:
        return hash(color)
    except TypeError:
        logger.debug("Unhashable color %r, fingerprinting its description", color)
        return hash(describe(color))


# ── Default implementation ────────────────────────────────────────────────────
ColorSpec = Union["RGBAColor", str, Sequence[float], Sequence[int]]


@dataclass(frozen=True)
class RGBAColor:
    """Float RGBA color, each channel in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0.0 <= channel <= 1.0:
                raise InvalidColorSpec(f"Channel out of [0, 1]: {self!r}")

    # ── Engine primitives ──────────────────────────────────────────────────
    @property
    def description(self) -> str:
        return f"RGBA({self.r:.2f} {self.g:.2f} {self.b:.2f} {self.a:.2f})"

    def blend(self, ratio: float, other: RGBAColor) -> RGBAColor:
        """
        Blend with *other*.

        `ratio` 1.0 keeps only self, 0.0 keeps only other; clamped to [0, 1].
        Blending with a fully transparent color lowers opacity.
        """
        perc = clamp_unit(ratio)
        comp = 1.0 - perc
        return RGBAColor(
            r=clamp_unit(self.r * perc + other.r * comp),
            g=clamp_unit(self.g * perc + other.g * comp),
            b=clamp_unit(self.b * perc + other.b * comp),
            a=clamp_unit(self.a * perc + other.a * comp),
        )

    def with_alpha(self, ratio: float) -> RGBAColor:
        """Overwrite alpha with *ratio*, clamped to [0, 1]."""
        return RGBAColor(self.r, self.g, self.b, clamp_unit(ratio))

    # ── Conversions ────────────────────────────────────────────────────────
    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_hex(self, keep_alpha: bool = False) -> str:
        return to_hex(self.rgba, keep_alpha=keep_alpha)

    def to_rgb255(self) -> tuple[int, int, int]:
        return tuple(int(round(c * 255)) for c in (self.r, self.g, self.b))  # type: ignore[return-value]

    def __str__(self) -> str:
        return self.description

    # ── Parsing ────────────────────────────────────────────────────────────
    @classmethod
    def parse(cls, spec: ColorSpec) -> RGBAColor:
        """
        Does: Build an RGBAColor from a hex string, a CSS/XKCD name, or 3/4 channels.
        Returns: RGBAColor. Ints are read as 0-255, floats as 0-1.
        Raises: InvalidColorSpec when nothing matches.
        """
        if isinstance(spec, RGBAColor):
            return spec
        if isinstance(spec, str):
            return cls._parse_str(spec)
        if isinstance(spec, Sequence):
            return cls._parse_channels(spec)
        raise InvalidColorSpec(f"Unsupported color spec type: {type(spec).__name__}")

    @classmethod
    def _parse_str(cls, spec: str) -> RGBAColor:
        text = spec.strip()
        if not text:
            raise InvalidColorSpec("Empty color spec")

        # CSS3 names first (webcolors), then matplotlib (hex, CSS4, xkcd:, tab:)
        try:
            r, g, b = webcolors.name_to_rgb(text.lower())
            return cls._parse_channels((r, g, b))
        except ValueError:
            pass

        for candidate in (text, f"xkcd:{text.lower()}"):
            try:
                return cls(*to_rgba(candidate))
            except ValueError:
                continue
        raise InvalidColorSpec(f"Unknown color spec: {spec!r}")

    @classmethod
    def _parse_channels(cls, spec: Sequence[float] | Sequence[int]) -> RGBAColor:
        values = list(spec)
        if len(values) not in (3, 4):
            raise InvalidColorSpec(f"Expected 3 or 4 channels, got {len(values)}: {spec!r}")
        if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in values):
            raise InvalidColorSpec(f"Channels must be numbers: {spec!r}")

        if all(isinstance(v, int) for v in values):
            if not all(0 <= v <= 255 for v in values):
                raise InvalidColorSpec(f"RGB out of bounds: {spec!r}")
            rgb = [v / 255.0 for v in values[:3]]
            alpha = values[3] / 255.0 if len(values) == 4 else 1.0
            return cls(*rgb, alpha)

        try:
            return cls(*to_rgba([float(v) for v in values]))
        except ValueError as e:
            raise InvalidColorSpec(f"Invalid channels {spec!r}: {e}") from e
