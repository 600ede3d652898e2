"""
utils package.
=============

Does: Provide general utilities for config loading and topic-gated debug logging
      shared across the engine, schemes and CLI.
"""

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import debug, reload_topics, topic_enabled

__all__ = [
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    "debug",
    "reload_topics",
    "topic_enabled",
]

__docformat__ = "google"
