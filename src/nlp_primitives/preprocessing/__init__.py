"""
preprocessing.
=============

Shared text-preprocessing modules: token model, tokenizer, clitic expansion,
and grapheme edit distance.

Exports:
- Token, TokenType: the shared token model.
"""

from .types import Token, TokenType

__all__ = ["Token", "TokenType"]
