# nlp_primitives/preprocessing/types.py
from __future__ import annotations

"""
types.py.

Does: Define the token model shared by the lexer, clitic expander and pipeline:
      a closed TokenType enum and an immutable, byte-offset tagged Token.
Used by: token.lexer, token.clitic, token.pipeline, demo CLI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = ["TokenType", "Token", "utf8_len"]

__docformat__ = "google"


def utf8_len(text: str) -> int:
    """
    Does: Byte length of `text` once UTF-8 encoded (lone surrogates pass through).
    Returns: int >= 0.
    """
    return len(text.encode("utf-8", "surrogatepass"))


class TokenType(Enum):
    START_OF_TEXT = "start_of_text"
    END_OF_TEXT = "end_of_text"
    # Jamais émis par le lexer : les sauts de ligne sortent en SEGMENT("\n").
    NEWLINE = "newline"
    SEGMENT = "segment"


@dataclass(frozen=True, slots=True)
class Token:
    """
    One position-tagged unit of a token stream.

    Attributes:
        kind: Variant of the token (sentinel or segment).
        byte_offset: 0-based UTF-8 byte index in the original string where the
            token begins. For END_OF_TEXT this is the input's byte length.
        text: Segment text; empty for sentinels.
    """

    kind: TokenType
    byte_offset: int
    text: str = ""

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def segment(cls, text: str, byte_offset: int) -> Token:
        return cls(TokenType.SEGMENT, byte_offset, text)

    @classmethod
    def start(cls) -> Token:
        return cls(TokenType.START_OF_TEXT, 0)

    @classmethod
    def end(cls, byte_offset: int) -> Token:
        return cls(TokenType.END_OF_TEXT, byte_offset)

    # ── Views ────────────────────────────────────────────────────────────────
    @property
    def is_segment(self) -> bool:
        return self.kind is TokenType.SEGMENT

    @property
    def byte_length(self) -> int:
        return utf8_len(self.text)

    @property
    def end_offset(self) -> int:
        """Byte index just past the token (== byte_offset for sentinels)."""
        return self.byte_offset + self.byte_length

    def to_dict(self) -> dict[str, Any]:
        """Does: JSON-friendly view. Returns: {'kind', 'text', 'byte_offset'}."""
        return {"kind": self.kind.value, "text": self.text, "byte_offset": self.byte_offset}

    def __str__(self) -> str:
        if self.is_segment:
            return f"Tok(Segment({self.text!r}), {self.byte_offset})"
        name = "".join(part.capitalize() for part in self.kind.value.split("_"))
        return f"Tok({name}, {self.byte_offset})"
