# tests/test_token_lexer.py
from __future__ import annotations

import pytest

# Modules sous test : segmentation Unicode + lexer à sentinelles
from nlp_primitives.preprocessing.token import lexer as L
from nlp_primitives.preprocessing.token import segmenter as SEG
from nlp_primitives.preprocessing.types import Token, TokenType

"""
Tests: preprocessing/token/{segmenter,lexer}.py

Objectifs :
- START_OF_TEXT@0 / END_OF_TEXT@len émis exactement une fois
- offsets en octets UTF-8 (pas en code points)
- filtre de frontières volontairement étroit (" " et "\\n" uniquement)
"""


def _start() -> Token:
    return Token(TokenType.START_OF_TEXT, 0)


def _end(offset: int) -> Token:
    return Token(TokenType.END_OF_TEXT, offset)


def _seg(text: str, offset: int) -> Token:
    return Token(TokenType.SEGMENT, offset, text)


# ─────────────────────────────────────────────────────────────────────────────
# Tokenizer: sentinels & offsets
# ─────────────────────────────────────────────────────────────────────────────

def test_empty_input_yields_only_sentinels():
    assert list(L.tokenize("")) == [_start(), _end(0)]


def test_simple_sentence_keeps_space_segments():
    assert list(L.tokenize("The quick brown fox")) == [
        _start(),
        _seg("The", 0),
        _seg(" ", 3),
        _seg("quick", 4),
        _seg(" ", 9),
        _seg("brown", 10),
        _seg(" ", 15),
        _seg("fox", 16),
        _end(19),
    ]


def test_simple_sentence_filtered():
    out = [t for t in L.tokenize("The quick brown fox") if L.is_boundary_token(t)]
    assert out == [
        _start(),
        _seg("The", 0),
        _seg("quick", 4),
        _seg("brown", 10),
        _seg("fox", 16),
        _end(19),
    ]


def test_spanish_sentence_counts_two_byte_letters():
    text = "Ajuste la temperatura a 23 grados centígrados por favor"
    out = [t for t in L.tokenize(text) if L.is_boundary_token(t)]
    assert out == [
        _start(),
        _seg("Ajuste", 0),
        _seg("la", 7),
        _seg("temperatura", 10),
        _seg("a", 22),
        _seg("23", 24),
        _seg("grados", 27),
        _seg("centígrados", 34),
        _seg("por", 47),
        _seg("favor", 51),
        _end(56),
    ]


def test_cjk_one_segment_per_ideograph():
    out = list(L.tokenize("现在几点？"))
    assert out == [
        _start(),
        _seg("现", 0),
        _seg("在", 3),
        _seg("几", 6),
        _seg("点", 9),
        _seg("？", 12),
        _end(15),
    ]


def test_newline_is_a_segment_not_a_newline_token():
    out = list(L.tokenize("a\nb"))
    assert out == [_start(), _seg("a", 0), _seg("\n", 1), _seg("b", 2), _end(3)]
    assert all(t.kind is not TokenType.NEWLINE for t in out)


def test_whitespace_only_input_still_yields_segments():
    out = list(L.tokenize("\t"))
    assert out == [_start(), _seg("\t", 0), _end(1)]


@pytest.mark.parametrize(
    "text",
    [
        "The quick brown fox",
        "e\u0301té à Paris",            # combining acute + precomposed
        "thumbs \U0001f44d\U0001f3fd up",         # emoji + skin-tone modifier
        "  double  spaces\r\nand CRLF",
        "\u0301\u0301",                           # combining marks only
    ],
)
def test_segments_partition_input_with_contiguous_byte_offsets(text):
    toks = list(L.tokenize(text))
    assert toks[0] == _start()
    assert toks[-1] == _end(len(text.encode("utf-8")))

    segs = toks[1:-1]
    assert all(t.kind is TokenType.SEGMENT for t in segs)
    assert "".join(t.text for t in segs) == text

    expected = 0
    for t in segs:
        assert t.byte_offset == expected
        expected = t.end_offset
    assert expected == toks[-1].byte_offset


# ─────────────────────────────────────────────────────────────────────────────
# Tokenizer: single-pass contract
# ─────────────────────────────────────────────────────────────────────────────

def test_tokenizer_is_not_restartable():
    tok = L.tokenize("hi")
    assert list(tok) == [_start(), _seg("hi", 0), _end(2)]
    assert list(tok) == []
    with pytest.raises(StopIteration):
        next(tok)


def test_end_emitted_once_even_without_boundaries():
    tok = L.Tokenizer("abc", segmenter=lambda s: iter(()))
    assert list(tok) == [_start(), _end(3)]
    assert next(tok, None) is None


def test_start_is_emitted_before_segmenter_is_pulled():
    pulled = []

    def _spy(text):
        for pair in SEG.word_bound_indices(text):
            pulled.append(pair)
            yield pair

    tok = L.Tokenizer("ab cd", segmenter=_spy)
    assert next(tok) == _start()
    assert pulled == []
    assert next(tok) == _seg("ab", 0)
    assert pulled == [(0, "ab")]


def test_tokenizer_rejects_non_str():
    with pytest.raises(TypeError):
        L.tokenize(b"bytes")  # type: ignore[arg-type]


# ─────────────────────────────────────────────────────────────────────────────
# Boundary filter
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "token,keep",
    [
        (_seg(" ", 0), False),
        (_seg("\n", 0), False),
        (_seg("\t", 0), True),          # tab non filtré
        (_seg("\u00a0", 0), True),      # NBSP non filtré
        (_seg("  ", 0), True),          # run de plusieurs espaces non filtré
        (_seg("\r\n", 0), True),
        (_seg("word", 0), True),
        (_seg("", 0), True),
        (_start(), True),
        (_end(10), True),
        (Token(TokenType.NEWLINE, 4), True),
    ],
)
def test_is_boundary_token_is_narrow(token, keep):
    assert L.is_boundary_token(token) is keep


# ─────────────────────────────────────────────────────────────────────────────
# Segmenter & token model
# ─────────────────────────────────────────────────────────────────────────────

def test_word_bound_indices_is_lazy_and_empty_for_empty_input():
    gen = SEG.word_bound_indices("")
    assert iter(gen) is gen
    assert list(gen) == []


def test_word_bounds_keeps_contractions_whole():
    assert SEG.word_bounds("couldn't they'd") == ["couldn't", " ", "they'd"]


def test_graphemes_group_combining_marks_and_modifiers():
    assert SEG.graphemes("e\u0301a") == ["e\u0301", "a"]
    assert SEG.graphemes("\U0001f44d\U0001f3fd!") == ["\U0001f44d\U0001f3fd", "!"]
    assert SEG.graphemes("") == []


def test_utf8_len_handles_lone_surrogates():
    assert SEG.utf8_len("é") == 2
    assert SEG.utf8_len("\ud800") == 3


def test_token_rendering_and_dict():
    assert str(_seg("The", 0)) == "Tok(Segment('The'), 0)"
    assert str(_start()) == "Tok(StartOfText, 0)"
    assert str(_end(19)) == "Tok(EndOfText, 19)"
    assert _seg("été", 4).to_dict() == {"kind": "segment", "text": "été", "byte_offset": 4}
    assert _seg("été", 4).end_offset == 9
    assert _end(7).end_offset == 7


def test_token_is_immutable():
    t = _seg("x", 0)
    with pytest.raises(AttributeError):
        t.byte_offset = 3  # type: ignore[misc]
