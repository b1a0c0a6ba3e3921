"""
Port: Tokenizer
Odpowiedzialność: zamiana surowego tekstu na sekwencję tokenów.
"""
from typing import Iterable, Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, text: str) -> Iterable[Token]:
        """
        Converts an expression into a lazy, restartable sequence of Tokens.
        Whitespace is skipped. Numeric literals are matched greedily.
        Raises LexError at the first unrecognized character; no tokens
        are produced for an invalid input.
        """
        ...
