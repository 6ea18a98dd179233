# nlp_primitives/preprocessing/token/clitic/__init__.py
"""
clitic.
======

Does: Provide the English clitic suffix registry and the contraction expander.
Exports: ContractionExpander, expand_clitic, expand_tokens, CliticPatternError, load_clitic_suffixes
Used by: token.pipeline and callers splitting "don't" → "do" + "n't".
"""

from __future__ import annotations

from .expander import (
    ContractionExpander,
    default_expander,
    expand_clitic,
    expand_tokens,
)
from .registry import (
    CliticPatternError,
    build_suffix_order,
    load_clitic_suffixes,
    match_clitic,
)

__all__ = [
    "ContractionExpander",
    "default_expander",
    "expand_clitic",
    "expand_tokens",
    "CliticPatternError",
    "build_suffix_order",
    "load_clitic_suffixes",
    "match_clitic",
]
