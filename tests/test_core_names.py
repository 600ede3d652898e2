# tests/test_core_names.py
"""SymbolicName, prefix matching and ordered CaseTable dispatch."""

from __future__ import annotations

import pytest

from symbolic_colors import settings
from symbolic_colors.core.names import CaseTable, SymbolicName, as_name, matches
from symbolic_colors.core.symbolic import SymbolicColor
from symbolic_colors.errors import UnknownColorError


# ──────────────────────────────────────────────────────────────────────────────
# SymbolicName
# ──────────────────────────────────────────────────────────────────────────────
def test_name_equality_and_hash_by_content():
    a = SymbolicName("primary.lvl1")
    b = SymbolicName("primary." + "lvl1")
    assert a == b and hash(a) == hash(b)
    assert SymbolicName("Primary") != SymbolicName("primary")
    assert {a, b} == {a}


def test_name_is_immutable():
    name = SymbolicName("primary")
    with pytest.raises(AttributeError):
        name.value = "secondary"  # type: ignore[misc]


def test_name_rejects_non_str():
    with pytest.raises(TypeError):
        SymbolicName(3)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value,parent",
    [
        ("a.b.c", "a.b"),
        ("a", None),
        ("a..b", "a"),
        ("", None),
    ],
)
def test_parent(value, parent):
    got = SymbolicName(value).parent
    assert (got.value if got else None) == parent


def test_lineage_strips_trailing_segments():
    assert [n.value for n in SymbolicName("a.b.c.d").lineage()] == ["a.b.c.d", "a.b.c", "a.b", "a"]
    assert list(SymbolicName("").lineage()) == []


def test_as_name_accepts_str_name_and_symbolic_color():
    assert as_name("x") == SymbolicName("x")
    assert as_name(SymbolicName("y")) == SymbolicName("y")
    assert as_name(SymbolicColor("z.1")) == SymbolicName("z.1")
    with pytest.raises(TypeError):
        as_name(42)


# ──────────────────────────────────────────────────────────────────────────────
# matches()
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "pattern,value,expected",
    [
        ("primary", "primary.lvl1", True),
        ("primary", "primary", True),
        ("primary", "primaryX", True),  # lexical, not segment-aware
        ("", "anything", True),
        ("primary.lvl1", "primary", False),
        ("Primary", "primary.lvl1", False),
        ("secondary", "primary", False),
    ],
)
def test_matches_prefix_mode(pattern, value, expected):
    assert matches(SymbolicName(pattern), SymbolicName(value)) is expected


@pytest.mark.parametrize(
    "pattern,value,expected",
    [
        ("primary", "primary.lvl1", False),
        ("primary", "primary", True),
        ("", "anything", False),
    ],
)
def test_matches_exact_mode(pattern, value, expected):
    settings.set_prefix_matching_enabled(False)
    assert matches(pattern, value) is expected


def test_symbolic_color_matches_uses_description():
    primary, primary2 = SymbolicColor("primary"), SymbolicColor("primary.lvl2")
    assert primary.matches(primary2)
    assert not primary2.matches(primary)
    with settings.prefix_matching(False):
        assert not primary.matches(primary2)
    assert primary.matches(primary2)


# ──────────────────────────────────────────────────────────────────────────────
# CaseTable
# ──────────────────────────────────────────────────────────────────────────────
def _table():
    return CaseTable(
        [
            ("primary", lambda n: "primary"),
            ("primary.lvl2", lambda n: "lvl2"),
            ("label", lambda n: f"label:{n.value}"),
        ]
    )


def test_first_declared_case_wins_with_prefix_matching():
    table = _table()
    assert table.dispatch("primary.lvl2") == "primary"
    assert table.match("primary.lvl2") == SymbolicName("primary")
    assert table.dispatch("label.secondary") == "label:label.secondary"


def test_exact_case_wins_without_prefix_matching():
    settings.set_prefix_matching_enabled(False)
    table = _table()
    assert table.dispatch("primary.lvl2") == "lvl2"
    assert table.match("label.secondary") is None


def test_unknown_name_raises_with_suggestions():
    with pytest.raises(UnknownColorError) as info:
        _table().dispatch("lable")
    assert info.value.name == "lable"
    assert "label" in info.value.suggestions
    assert isinstance(info.value, LookupError)


def test_default_handler_used_when_nothing_matches():
    table = CaseTable([("primary", lambda n: 1)], default=lambda n: 0)
    assert table.dispatch("gold") == 0
    assert len(table) == 1
