"""
settings.py.

Does: Hold the process-wide configuration of the engine: the prefix-matching
      flag and the default scheme used when callers do not pass one.
Used By: core.names.matches, schemes.catalog, core.resolver.resolve_color, CLI.

Both values are meant to be set once at startup. Writes take a lock so two
writers cannot interleave, but readers never lock: flipping the flag while
other threads resolve colors is the caller's problem.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schemes.base import ColorScheme

__all__ = [
    "PREFIX_MATCHING_ENV",
    "is_prefix_matching_enabled",
    "set_prefix_matching_enabled",
    "prefix_matching",
    "get_default_scheme",
    "set_default_scheme",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

PREFIX_MATCHING_ENV = "SYMBOLIC_COLORS_PREFIX_MATCHING"
_FALSY = {"0", "false", "no", "off"}

_WRITE_LOCK = threading.Lock()


def _env_prefix_matching() -> bool:
    raw = os.getenv(PREFIX_MATCHING_ENV)
    if raw is None:
        return True
    return raw.strip().lower() not in _FALSY


_prefix_matching_enabled: bool = _env_prefix_matching()
_default_scheme: ColorScheme | None = None


# ── Prefix matching ──────────────────────────────────────────────────────────
def is_prefix_matching_enabled() -> bool:
    """Does: Return the current prefix-matching flag (default True)."""
    return _prefix_matching_enabled


def set_prefix_matching_enabled(enabled: bool) -> None:
    """Does: Switch prefix matching on/off for the whole process."""
    global _prefix_matching_enabled
    with _WRITE_LOCK:
        _prefix_matching_enabled = bool(enabled)
    log.debug("prefix matching %s", "enabled" if enabled else "disabled")


@contextmanager
def prefix_matching(enabled: bool) -> Iterator[None]:
    """Does: Temporarily force the prefix-matching flag inside a block."""
    previous = is_prefix_matching_enabled()
    set_prefix_matching_enabled(enabled)
    try:
        yield
    finally:
        set_prefix_matching_enabled(previous)


# ── Default scheme ───────────────────────────────────────────────────────────
def get_default_scheme() -> ColorScheme | None:
    """Does: Return the scheme used by resolve_color() when none is given."""
    return _default_scheme


def set_default_scheme(scheme: ColorScheme | None) -> None:
    """Does: Install (or clear, with None) the process default scheme."""
    global _default_scheme
    with _WRITE_LOCK:
        _default_scheme = scheme
    log.debug("default scheme set to %r", scheme)
