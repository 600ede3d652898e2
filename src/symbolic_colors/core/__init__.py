"""
core.
=====

Does: Aggregate the resolution engine: names & prefix matching, the Expression
      tree, SymbolicColor composition and the resolver.
Used By: Schemes, catalogs, the CLI and application palettes.
"""

# ── Names ────────────────────────────────────────────────────────────────────
from .names import CaseTable, SymbolicName, as_name, matches

# ── Expressions ──────────────────────────────────────────────────────────────
from .expression import (
    Expression,
    Literal,
    Lookup,
    NamedFunction,
    from_concrete,
    from_name,
    from_provider,
)

# ── Resolution ───────────────────────────────────────────────────────────────
from .resolver import resolve, resolve_color
from .symbolic import SymbolicColor

__all__ = [
    # names
    "SymbolicName",
    "as_name",
    "matches",
    "CaseTable",
    # expressions
    "Expression",
    "Lookup",
    "Literal",
    "NamedFunction",
    "from_name",
    "from_concrete",
    "from_provider",
    # resolution
    "SymbolicColor",
    "resolve",
    "resolve_color",
]

__docformat__ = "google"
