# src/symbolic_colors/utils/load_config.py

"""
load_config.py
==============

Does: Locate a JSON document (absolute path, explicit base dir, env override or
      a <data/> directory found upwards from cwd), parse it once per file
      version and hand back a top-level object, optionally run through a
      validator.
Used By: ColorCatalog.from_json, the CLI.
Returns: dict[str, Any]; raises the typed errors below on any failure.

Parsed documents are cached by (path, mtime, encoding). Validators run on
every call against a shallow copy of the cached document, so reloading a
catalog that has not changed skips both the disk read and the JSON parse.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

__docformat__ = "google"

DATA_DIR_ENV_VARS = ("SYMBOLIC_COLORS_DATA_DIR", "DATA_DIR")

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No env override and no 'data' directory above the working directory."""


class ConfigFileNotFound(FileNotFoundError):
    """The document is missing, unreadable, or outside its data directory."""


class ConfigParseError(ValueError):
    """Invalid JSON, or the validator rejected the document."""


class ConfigTypeError(TypeError):
    """The document parsed but its top level is not a JSON object."""


log = logging.getLogger(__name__)

_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float, str], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Drop every cached document."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


# ── Path resolution ──────────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    origin = (start or Path.cwd()).resolve()
    return [(folder / "data").resolve() for folder in (origin, *origin.parents)]


def _data_dir(base_dir: Path | None) -> Path:
    if base_dir is not None:
        return Path(base_dir).resolve()
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()
    candidates = _candidate_data_dirs()
    for candidate in candidates:
        if candidate.is_dir():
            return candidate
    tried = "\n  ".join(str(c) for c in candidates)
    raise DataDirNotFound(f"No 'data' directory found.\nTried:\n  {tried}")


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    if os.path.isabs(name):
        return Path(name).resolve()

    root = _data_dir(base_dir)
    path = (root / name).resolve()
    if not path.is_relative_to(root):
        raise ConfigFileNotFound(f"Refusing to access file outside data dir: {path} (base={root})")
    return path


# ── Reading ──────────────────────────────────────────────────────────────────
def _read_document(path: Path, encoding: str) -> dict[str, Any]:
    try:
        key = (path, path.stat().st_mtime, encoding)
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    with _CACHE_LOCK:
        cached = _CONFIG_CACHE.get(key)
    if cached is not None:
        log.debug("Config cache HIT: %s", path.name)
        return cached

    try:
        data = json.loads(path.read_text(encoding=encoding))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    with _CACHE_LOCK:
        # entries for older versions of the same file are dead weight
        for stale in [k for k in _CONFIG_CACHE if k[0] == path and k[2] == encoding]:
            del _CONFIG_CACHE[stale]
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS -> stored: %s", path.name)
    return data


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """
    Does: Load ``<data>/<file>.json`` (``.json`` is appended when missing) and
          return its top-level object.
    Returns: The cached document itself without a validator, else whatever the
             validator returns for a shallow copy of it. Validator exceptions
             are re-raised as ConfigParseError.
    """
    path = _resolve_path(file, base_dir)
    data = _read_document(path, encoding)
    if validator is None:
        return data
    try:
        return validator(dict(data))
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
