"""
log.py.

Does: Topic debug logger controlled by SYMBOLIC_COLORS_DEBUG_TOPICS (comma-sep or 'all').
Returns: Forwards enabled lines to the `symbolic_colors.debug` logger with topic + level.
Used by: Resolver tracing, catalog fallback, CLI.
"""

from __future__ import annotations

import logging
import os

__all__ = ["debug", "reload_topics", "topic_enabled"]

ENV_VAR = "SYMBOLIC_COLORS_DEBUG_TOPICS"

_logger = logging.getLogger("symbolic_colors.debug")


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable SYMBOLIC_COLORS_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def topic_enabled(topic: str) -> bool:
    """Does: Tell whether *topic* is switched on (no topics set means nothing is)."""
    topic_key = topic.lower().strip()
    return bool(_DEBUG_TOPICS) and ("all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS)


def debug(msg: str, topic: str = "resolve", *, level: str = "DEBUG") -> None:
    """Does: Emit a debug line tagged with topic and level if the topic is enabled."""
    if not topic_enabled(topic):
        return
    lvl = logging.getLevelName(level.upper())
    if not isinstance(lvl, int):
        lvl = logging.DEBUG
    _logger.log(lvl, "[%s][%s] %s", topic.lower().strip(), level.upper(), msg)
