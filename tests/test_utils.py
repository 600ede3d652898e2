# tests/test_utils.py
"""End-to-end tests for utils (load_config, topic debug logger) with cache/env handling."""

from __future__ import annotations

import importlib
import json
import logging

import pytest

from symbolic_colors.utils import log as LOG
from symbolic_colors.utils.load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)

# module object, the package re-exports a function under the same name
lc = importlib.import_module("symbolic_colors.utils.load_config")


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via SYMBOLIC_COLORS_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("SYMBOLIC_COLORS_DATA_DIR", str(data))
    clear_config_cache()
    return data


# ---------- load_config tests ----------
def test_load_config_reads_and_reloads_after_clear(tmp_data_dir):
    p = tmp_data_dir / "palette.json"
    p.write_text(json.dumps({"primary": "#ff0000"}), encoding="utf-8")

    assert load_config("palette") == {"primary": "#ff0000"}

    p.write_text(json.dumps({"primary": "#00ff00", "x": 1}), encoding="utf-8")
    # mtime may or may not change within the same tick; the explicit clear must reload
    clear_config_cache()
    assert load_config("palette.json") == {"primary": "#00ff00", "x": 1}


def test_load_config_same_object_when_cached(tmp_data_dir):
    (tmp_data_dir / "a.json").write_text('{"k": [1, 2]}', encoding="utf-8")
    assert load_config("a") is load_config("a")
    assert len(lc._CONFIG_CACHE) == 1


def test_load_config_validator_runs_on_cached_document(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")
    seen = []

    def validator(d: dict) -> dict:
        seen.append(d)
        d["checked"] = True
        return d

    assert load_config("settings", validator=validator) == {"alpha": 1, "checked": True}
    assert load_config("settings", validator=validator) == {"alpha": 1, "checked": True}
    assert len(seen) == 2
    # validators get a copy; the cached document is untouched
    assert load_config("settings") == {"alpha": 1}


def test_load_config_validator_errors_become_parse_errors(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"beta": 2}), encoding="utf-8")

    def validator(d: dict) -> dict:
        if "alpha" not in d:
            raise ValueError("alpha missing")
        return d

    with pytest.raises(ConfigParseError, match="alpha missing"):
        load_config("settings", validator=validator)


def test_load_config_rejects_non_object(tmp_data_dir):
    (tmp_data_dir / "list.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("list")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{nope", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_missing_and_escape(tmp_data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_config("missing")
    with pytest.raises(ConfigFileNotFound):
        load_config("../outside")


def test_load_config_absolute_path_skips_data_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("SYMBOLIC_COLORS_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    (tmp_path / "x.json").write_text('{"v": 1}', encoding="utf-8")
    assert load_config(tmp_path / "x") == {"v": 1}


def test_load_config_discovers_data_dir_from_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv("SYMBOLIC_COLORS_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    nested = tmp_path / "project" / "sub"
    nested.mkdir(parents=True)
    data = tmp_path / "project" / "data"
    data.mkdir()
    (data / "found.json").write_text('{"ok": true}', encoding="utf-8")
    monkeypatch.chdir(nested)
    assert load_config("found") == {"ok": True}


def test_load_config_no_data_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("SYMBOLIC_COLORS_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(lc, "_candidate_data_dirs", lambda start=None: [tmp_path / "nowhere"])
    with pytest.raises(DataDirNotFound):
        load_config("anything")

# ---------- log tests ----------
def test_debug_silent_without_topics(caplog):
    caplog.set_level(logging.DEBUG, logger="symbolic_colors.debug")
    LOG.debug("hidden", topic="resolve")
    assert not caplog.records
    assert LOG.topic_enabled("resolve") is False


def test_debug_topic_filtering(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG, logger="symbolic_colors.debug")
    monkeypatch.setenv("SYMBOLIC_COLORS_DEBUG_TOPICS", "catalog")
    LOG.reload_topics()

    LOG.debug("shown", topic="Catalog", level="info")
    LOG.debug("hidden", topic="resolve")
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["[catalog][INFO] shown"]
    assert caplog.records[0].levelno == logging.INFO


def test_debug_all_topics(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG, logger="symbolic_colors.debug")
    monkeypatch.setenv("SYMBOLIC_COLORS_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    LOG.debug("anything", topic="whatever", level="bogus")
    assert caplog.records[0].levelno == logging.DEBUG
