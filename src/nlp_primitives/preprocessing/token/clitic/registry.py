# src/nlp_primitives/preprocessing/token/clitic/registry.py
from __future__ import annotations

"""
clitic.registry

Does: Centralize the clitic suffix list: load it from data/english_clitics.json,
      validate it once, order it longest-first, and match it end-anchored.
Returns: CliticPatternError, DEFAULT_CLITICS_FILE, load_clitic_suffixes(),
         build_suffix_order(), match_clitic().
Used by: clitic.expander (construction-time validation + per-token lookup).
"""

import logging
from collections.abc import Iterable
from functools import lru_cache

from nlp_primitives.preprocessing.utils.load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    load_config,
)

# Public surface
__all__ = [
    "CliticPatternError",
    "DEFAULT_CLITICS_FILE",
    "load_clitic_suffixes",
    "build_suffix_order",
    "match_clitic",
]

log = logging.getLogger(__name__)

DEFAULT_CLITICS_FILE = "english_clitics"


class CliticPatternError(ValueError):
    """Raise when the clitic suffix list is malformed (construction-time defect)."""


def build_suffix_order(suffixes: Iterable[str]) -> tuple[str, ...]:
    """
    Does: Validate a suffix list and order it for matching.
          Longest first; ties keep declaration order; duplicates collapsed.
    Returns: Non-empty tuple of non-empty suffixes.
    """
    if isinstance(suffixes, str):
        raise CliticPatternError("suffix list must be a collection of strings, not a single string")

    seen: dict[str, int] = {}
    for i, suf in enumerate(suffixes):
        if not isinstance(suf, str):
            raise CliticPatternError(f"suffix #{i} is {type(suf).__name__}, expected str")
        if not suf:
            raise CliticPatternError(f"suffix #{i} is empty")
        if suf in seen:
            log.debug("Duplicate clitic suffix %r ignored", suf)
            continue
        seen[suf] = i

    if not seen:
        raise CliticPatternError("clitic suffix list is empty")

    # Recherche du suffixe le plus long d'abord (déterministe)
    return tuple(sorted(seen, key=lambda s: (-len(s), seen[s])))


@lru_cache(maxsize=8)
def load_clitic_suffixes(file: str = DEFAULT_CLITICS_FILE) -> tuple[str, ...]:
    """
    Does: Load and validate a clitic suffix list from <data>/<file>.json.
    Returns: Ordered suffix tuple (see build_suffix_order).
    Raises: CliticPatternError when the file is missing or malformed.
    """
    try:
        raw = load_config(file)
    except (DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError) as e:
        raise CliticPatternError(f"cannot load clitic suffixes from {file!r}: {e}") from e
    order = build_suffix_order(raw)
    log.debug("Loaded %d clitic suffixes from %s: %s", len(order), file, order)
    return order


def match_clitic(text: str, suffixes: tuple[str, ...]) -> tuple[str, str] | None:
    """
    Does: End-anchored literal match of `text` against an ordered suffix tuple.
          The first (longest) suffix that leaves a non-empty prefix wins.
    Returns: (prefix, suffix) or None.
    """
    for suf in suffixes:
        if len(text) > len(suf) and text.endswith(suf):
            return text[: -len(suf)], suf
    return None
