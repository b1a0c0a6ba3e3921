import pytest

from adapters.tokenizer import RegexTokenizer, tokenize
from contracts import LexError, TokenKind
from ports.tokenizer import Tokenizer


def test_tokenize_operators_parens_and_prefixed_literals():
    tokens = list(tokenize("12*(0x_1A-0b01)+0o12/0"))

    assert [t.kind for t in tokens] == [
        TokenKind.NUMBER, TokenKind.STAR, TokenKind.LPAREN,
        TokenKind.NUMBER, TokenKind.MINUS, TokenKind.NUMBER, TokenKind.RPAREN,
        TokenKind.PLUS, TokenKind.NUMBER, TokenKind.SLASH, TokenKind.NUMBER,
    ]
    assert [t.text for t in tokens if t.kind == TokenKind.NUMBER] == [
        "12", "0x_1A", "0b01", "0o12", "0",
    ]


def test_tokenize_skips_whitespace_and_records_positions():
    tokens = list(tokenize(" 1 +\t22 "))

    assert [(t.text, t.pos) for t in tokens] == [("1", 1), ("+", 3), ("22", 5)]


def test_tokenize_reads_decimal_literal_greedily():
    tokens = list(tokenize("3.25*1_000"))

    assert [t.text for t in tokens] == ["3.25", "*", "1_000"]


def test_tokenize_rejects_invalid_character_with_position():
    with pytest.raises(LexError) as exc_info:
        tokenize("2&3")

    assert exc_info.value.position == 1
    assert exc_info.value.char == "&"
    assert str(exc_info.value) == "Invalid character near 1: &"


@pytest.mark.parametrize("text, position", [
    ("1.", 1),
    (".5", 0),
    ("0abc", 1),
    ("1+a", 2),
])
def test_tokenize_rejects_unmatched_dot_and_letters(text, position):
    with pytest.raises(LexError) as exc_info:
        tokenize(text)

    assert exc_info.value.position == position


def test_token_stream_is_restartable_and_lazy():
    stream = tokenize("1+2")

    first = next(iter(stream))
    assert first.text == "1"
    assert list(stream) == list(stream)
    assert len(list(stream)) == 3


def test_tokenize_empty_input_gives_no_tokens():
    assert list(tokenize("   ")) == []


def test_regex_tokenizer_satisfies_protocol():
    assert isinstance(RegexTokenizer(), Tokenizer)
