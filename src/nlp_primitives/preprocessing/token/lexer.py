# nlp_primitives/preprocessing/token/lexer.py

"""
lexer.py.

Does: Pull-based tokenizer wrapping Unicode word-boundary segments into a bounded
      token stream: START_OF_TEXT@0, one SEGMENT per boundary piece, then exactly
      one END_OF_TEXT at the input's UTF-8 byte length. Also hosts the narrow
      boundary filter (single space / single newline only).
Returns: Tokenizer iterator, tokenize(), is_boundary_token().
Used by: token.pipeline, demo CLI, and any caller needing offset-tagged segments.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator

from nlp_primitives.preprocessing.token.segmenter import Segmenter, word_bound_indices
from nlp_primitives.preprocessing.types import Token, TokenType, utf8_len
from nlp_primitives.preprocessing.utils.log import debug

__all__ = [
    "Tokenizer",
    "tokenize",
    "is_boundary_token",
    "BOUNDARY_TEXTS",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# TODO: use the Unicode whitespace classification (tabs, NBSP, runs) once
# downstream offset expectations are updated for it.
BOUNDARY_TEXTS: frozenset[str] = frozenset({" ", "\n"})


# ─────────────────────────────────────────────────────────────────────────────
# Tokenizer
# ─────────────────────────────────────────────────────────────────────────────

class Tokenizer:
    """
    Lazy, finite, single-pass token stream over one source string.

    Not restartable: build a new Tokenizer (or call tokenize()) to scan again.
    Each instance owns its cursor and is not meant to be shared.
    """

    def __init__(self, source: str, *, segmenter: Segmenter | None = None) -> None:
        if not isinstance(source, str):
            raise TypeError(f"expected str, got {type(source).__name__}")
        self._source = source
        self._byte_len = utf8_len(source)
        self._bounds = (segmenter or word_bound_indices)(source)
        self._start_emitted = False
        self._eof = False
        log.debug("Tokenizer over %d bytes (custom segmenter=%s)", self._byte_len, segmenter is not None)

    @property
    def source(self) -> str:
        return self._source

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if not self._start_emitted:
            self._start_emitted = True
            return Token.start()

        if self._eof:
            raise StopIteration

        nxt = next(self._bounds, None)
        if nxt is not None:
            offset, text = nxt
            return Token.segment(text, offset)

        # segmenter exhausted: emit END_OF_TEXT exactly once
        self._eof = True
        debug(f"end of text at byte {self._byte_len}", topic="lexer")
        return Token.end(self._byte_len)

    def __repr__(self) -> str:
        state = "done" if self._eof else ("running" if self._start_emitted else "fresh")
        return f"Tokenizer({self._source!r}, {state})"


def tokenize(source: str) -> Tokenizer:
    """
    Does: Start a fresh scan of `source`.
    Returns: Tokenizer (iterate it to pull Tokens).
    """
    return Tokenizer(source)


# ─────────────────────────────────────────────────────────────────────────────
# Boundary filter
# ─────────────────────────────────────────────────────────────────────────────

def is_boundary_token(token: Token) -> bool:
    """
    Does: Filter predicate keeping every token except SEGMENTs that are exactly
          a single space or a single newline. Sentinels are always kept.
    Returns: True to keep, False to drop.
    """
    if token.kind is not TokenType.SEGMENT:
        return True
    return token.text not in BOUNDARY_TEXTS
