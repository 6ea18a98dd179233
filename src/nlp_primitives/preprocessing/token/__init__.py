# preprocessing/token/__init__.py
"""
token.
=====

Does: Provide Unicode segmentation, the sentinel-framed tokenizer, the boundary
      filter, clitic expansion, and the composed pipeline.
Exports: Tokenizer, tokenize, is_boundary_token, expand_clitic, expand_tokens,
         ContractionExpander, tokenize_pipeline, segment_texts, graphemes, word_bound_indices
Used by: nlp_primitives public API and the demo CLI.
"""

from __future__ import annotations

from .clitic import (
    CliticPatternError,
    ContractionExpander,
    expand_clitic,
    expand_tokens,
)
from .lexer import (
    Tokenizer,
    is_boundary_token,
    tokenize,
)
from .pipeline import (
    segment_texts,
    tokenize_pipeline,
)
from .segmenter import (
    graphemes,
    word_bound_indices,
)

__all__ = [
    # segmenter
    "word_bound_indices",
    "graphemes",
    # lexer
    "Tokenizer",
    "tokenize",
    "is_boundary_token",
    # clitic
    "ContractionExpander",
    "CliticPatternError",
    "expand_clitic",
    "expand_tokens",
    # pipeline
    "tokenize_pipeline",
    "segment_texts",
]
