# nlp_primitives/preprocessing/token/segmenter.py
"""
segmenter.

Does: Unicode text segmentation backed by the `regex` module:
      - word_bound_indices(): lazy (byte_offset, substring) pairs split on
        default Unicode word boundaries (UAX #29, regex WORD flag);
      - graphemes(): extended grapheme clusters (\\X).
Returns: Iterator of pairs / list of clusters. Every piece concatenates back to the input.
Used by: token.lexer (word boundaries) and fuzzy.edit_distance (graphemes).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import regex

from nlp_primitives.preprocessing.types import utf8_len

__all__ = [
    "Segmenter",
    "word_bound_indices",
    "word_bounds",
    "graphemes",
    "utf8_len",
]

# Signature commune des segmenteurs injectables dans le lexer
Segmenter = Callable[[str], Iterator[tuple[int, str]]]

# Shortest run of code points ending on a default word boundary.
# The end of text always counts as a boundary, so every position yields a piece.
_WORD_BOUND_RE = regex.compile(r".+?\b", flags=regex.WORD | regex.DOTALL)
_GRAPHEME_RE = regex.compile(r"\X", flags=regex.DOTALL)


def _check_text(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")


def word_bound_indices(text: str) -> Iterator[tuple[int, str]]:
    """
    Does: Lazily split `text` on Unicode word boundaries, tagging each piece
          with the UTF-8 byte offset where it starts.
    Returns: Iterator[(byte_offset, piece)]; nothing for "".
    """
    _check_text(text)
    offset = 0
    for m in _WORD_BOUND_RE.finditer(text):
        piece = m.group(0)
        yield offset, piece
        offset += utf8_len(piece)


def word_bounds(text: str) -> list[str]:
    """Does: Eager variant of word_bound_indices without offsets."""
    return [piece for _, piece in word_bound_indices(text)]


def graphemes(text: str) -> list[str]:
    """
    Does: Split `text` into user-perceived characters (extended grapheme clusters).
    Returns: list[str]; [] for "".
    """
    _check_text(text)
    return _GRAPHEME_RE.findall(text)
