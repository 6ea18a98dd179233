"""
expander.py.

Does: Split contracted SEGMENT tokens into stem + clitic ("couldn't" → "could" + "n't"),
      keeping byte offsets relative to the original string. Single pass, never recursive.
Used by: token.pipeline (flat-map over a Tokenizer) and the demo CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache

from nlp_primitives.preprocessing.token.clitic.registry import (
    build_suffix_order,
    load_clitic_suffixes,
    match_clitic,
)
from nlp_primitives.preprocessing.types import Token, TokenType, utf8_len
from nlp_primitives.preprocessing.utils.log import debug

log: logging.Logger = logging.getLogger(__name__)

__all__ = [
    "ContractionExpander",
    "default_expander",
    "expand_clitic",
    "expand_tokens",
]


class ContractionExpander:
    """
    Stateless stem/clitic splitter over a fixed suffix list.

    The suffix list is validated once here; a malformed list raises
    CliticPatternError at construction and never per token.
    """

    __slots__ = ("_suffixes",)

    def __init__(self, suffixes: Iterable[str] | None = None) -> None:
        if suffixes is None:
            self._suffixes = load_clitic_suffixes()
        else:
            self._suffixes = build_suffix_order(suffixes)
        log.debug("ContractionExpander ready with suffixes %s", self._suffixes)

    @property
    def suffixes(self) -> tuple[str, ...]:
        return self._suffixes

    def expand(self, token: Token) -> list[Token]:
        """
        Does: Split a SEGMENT whose text ends with a known clitic behind a non-empty stem.
        Returns: [stem@offset, clitic@offset+len(stem bytes)] or [token] unchanged.
        """
        if token.kind is not TokenType.SEGMENT:
            return [token]

        hit = match_clitic(token.text, self._suffixes)
        if hit is None:
            return [token]

        stem, clitic = hit
        clitic_offset = token.byte_offset + utf8_len(stem)
        debug(f"{token.text!r} → {stem!r}@{token.byte_offset} + {clitic!r}@{clitic_offset}", topic="clitic")
        return [
            Token.segment(stem, token.byte_offset),
            Token.segment(clitic, clitic_offset),
        ]

    __call__ = expand

    def expand_all(self, tokens: Iterable[Token]) -> Iterator[Token]:
        """Does: Lazily flat-map expand() over `tokens`, preserving order."""
        for token in tokens:
            yield from self.expand(token)

    def __repr__(self) -> str:
        return f"ContractionExpander({list(self._suffixes)!r})"


@lru_cache(maxsize=1)
def default_expander() -> ContractionExpander:
    """Does: Build (once) the expander over the packaged English clitic list."""
    return ContractionExpander()


def expand_clitic(token: Token) -> list[Token]:
    """
    Does: Expand one token with the default English clitic list.
    Returns: List of 1 or 2 tokens.
    """
    return default_expander().expand(token)


def expand_tokens(tokens: Iterable[Token]) -> Iterator[Token]:
    """Does: Flat-map expand_clitic over a token stream (lazy)."""
    return default_expander().expand_all(tokens)
