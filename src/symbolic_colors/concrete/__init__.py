"""
concrete.
=========

Does: Expose the host-facing ConcreteColor protocol and the default RGBAColor.
Used By: Literal expressions, catalogs and schemes.
"""

from .color import (
    ColorSpec,
    ConcreteColor,
    RGBAColor,
    clamp_unit,
    content_fingerprint,
    describe,
)

__all__ = [
    "ConcreteColor",
    "RGBAColor",
    "ColorSpec",
    "clamp_unit",
    "content_fingerprint",
    "describe",
]

__docformat__ = "google"
