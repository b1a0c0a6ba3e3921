"""
Adapter: RegexTokenizer
Implementuje port Tokenizer.

Struktura leksykalna:
  +  -  *  /  (  )     - operatory i nawiasy
  NUMBER               - literał liczbowy (najdłuższe dopasowanie):
    DEC   [0-9][0-9_]* ('.' [0-9]+)?
    HEX   0x[0-9a-fA-F_]*
    OCT   0o[0-7_]*
    BIN   0b[01_]*
  białe znaki          - pomijane

Tekst literału nie jest interpretowany - robi to ewaluator w wybranym trybie.
"""
from __future__ import annotations

import re
from typing import Iterator

from contracts import LexError, Token, TokenKind

_TOKEN_RE = re.compile(
    r'(?P<number>0x[0-9a-fA-F_]*|0o[0-7_]*|0b[01_]*|[0-9][0-9_]*(?:\.[0-9]+)?)'
    r'|(?P<op>[+\-*/()])'
    r'|(?P<ws>\s+)'
)


def _scan(text: str) -> Iterator[Token]:
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise LexError(pos, text[pos])
        if m.group("number"):
            yield Token(kind=TokenKind.NUMBER, text=m.group(), pos=pos)
        elif m.group("op"):
            yield Token(kind=TokenKind(m.group()), text=m.group(), pos=pos)
        pos = m.end()


class TokenStream:
    """
    Leniwa sekwencja tokenów. Każde iterowanie skanuje tekst od początku.
    Wejście jest walidowane w konstruktorze - LexError nigdy nie wypływa
    z iteracji poprawnie utworzonego strumienia.
    """

    def __init__(self, text: str) -> None:
        for _ in _scan(text):
            pass
        self._text = text

    def __iter__(self) -> Iterator[Token]:
        return _scan(self._text)

    def __repr__(self) -> str:
        return f"TokenStream({self._text!r})"


class RegexTokenizer:
    """Tokenizer oparty na pojedynczym wyrażeniu regularnym."""

    # -- Tokenizer protocol -------------------------------------------------

    def tokenize(self, text: str) -> TokenStream:
        return TokenStream(text)


_DEFAULT = RegexTokenizer()


def tokenize(text: str) -> TokenStream:
    """Skrót: tokenizacja domyślnym tokenizerem."""
    return _DEFAULT.tokenize(text)
