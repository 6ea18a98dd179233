# nlp_primitives/preprocessing/token/pipeline.py
"""
pipeline.py.

Does: Compose the preprocessing stages in their fixed order:
      tokenize → expand clitics (flat-map) → drop single space/newline segments.
Returns: tokenize_pipeline() token iterator and segment_texts() string list.
Used by: demo CLI and callers that just want words with offsets.
"""

from __future__ import annotations

from collections.abc import Iterator

from nlp_primitives.preprocessing.token.clitic import ContractionExpander, default_expander
from nlp_primitives.preprocessing.token.lexer import is_boundary_token, tokenize
from nlp_primitives.preprocessing.types import Token

__all__ = ["tokenize_pipeline", "segment_texts"]


def tokenize_pipeline(
    source: str,
    *,
    expand_clitics: bool = True,
    drop_boundaries: bool = True,
    expander: ContractionExpander | None = None,
) -> Iterator[Token]:
    """
    Does: Lazily run the stage chain over `source`. Sentinels always survive.
    Returns: Iterator[Token] with non-decreasing byte offsets.
    """
    stream: Iterator[Token] = tokenize(source)
    if expand_clitics:
        stream = (expander or default_expander()).expand_all(stream)
    if drop_boundaries:
        stream = filter(is_boundary_token, stream)
    return stream


def segment_texts(
    source: str,
    *,
    expand_clitics: bool = True,
    drop_boundaries: bool = True,
    expander: ContractionExpander | None = None,
) -> list[str]:
    """Does: Pipeline output reduced to segment texts (sentinels removed)."""
    stream = tokenize_pipeline(
        source,
        expand_clitics=expand_clitics,
        drop_boundaries=drop_boundaries,
        expander=expander,
    )
    return [tok.text for tok in stream if tok.is_segment]
