# nlp_primitives/preprocessing/utils/__init__.py
"""

Does: Provide config loading and topic-gated debug logging for the preprocessing stack.
Returns: Public API via load_config/clear_config_cache and debug/enabled/reload_topics.
Used by: Clitic registry, lexer, clitic expander, demo CLI (--debug), and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enabled",
    "reload_topics",
]
