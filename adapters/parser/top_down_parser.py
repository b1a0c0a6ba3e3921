"""
Adapter: TopDownParser
Implementuje port Parser - parser zstępujący (recursive descent).

Gramatyka (lewostronna łączność operatorów):
  expr   = term (('+'|'-') term)*
  term   = factor (('*'|'/') factor)*
  factor = NUMBER | '(' expr ')'

expr i term to iteracyjne lewe złożenia: 8-3-2 → BinOp(BinOp(8,3),2).
"""
from __future__ import annotations

from typing import Iterable, Iterator

from contracts import BinOpNode, ExprAST, NumberNode, ParseError, Token, TokenKind

_ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
_MULTIPLICATIVE = (TokenKind.STAR, TokenKind.SLASH)


class _Parser:
    def __init__(self, tokens: Iterable[Token]) -> None:
        self._iter: Iterator[Token] = iter(tokens)
        self._current: Token | None = next(self._iter, None)

    def _peek(self) -> Token | None:
        return self._current

    def _consume(self, expect: str) -> Token:
        tok = self._current
        if tok is None:
            raise ParseError(f"Expect {expect}, got nothing")
        self._current = next(self._iter, None)
        return tok

    def parse(self) -> ExprAST:
        node = self._expr()
        tok = self._peek()
        if tok is not None:
            raise ParseError(f"Invalid expression: unexpected {tok} at {tok.pos}")
        return node

    def _expr(self) -> ExprAST:
        left = self._term()
        while True:
            tok = self._peek()
            if tok is None or tok.kind not in _ADDITIVE:
                break
            self._consume(tok.text)
            right = self._term()
            left = BinOpNode(op=tok.text, left=left, right=right)  # type: ignore[arg-type]
        return left

    def _term(self) -> ExprAST:
        left = self._factor()
        while True:
            tok = self._peek()
            if tok is None or tok.kind not in _MULTIPLICATIVE:
                break
            self._consume(tok.text)
            right = self._factor()
            left = BinOpNode(op=tok.text, left=left, right=right)  # type: ignore[arg-type]
        return left

    def _factor(self) -> ExprAST:
        tok = self._consume("number")
        if tok.kind == TokenKind.NUMBER:
            return NumberNode(text=tok.text)
        if tok.kind == TokenKind.LPAREN:
            node = self._expr()
            closing = self._consume(")")
            if closing.kind != TokenKind.RPAREN:
                raise ParseError(f"Expect ), got {closing}")
            return node
        raise ParseError(f"Expect number, got {tok}")


class TopDownParser:
    """Domyślny parser: rekurencyjne zejście po gramatyce expr/term/factor."""

    # -- Parser protocol ----------------------------------------------------

    def parse(self, tokens: Iterable[Token]) -> ExprAST:
        return _Parser(tokens).parse()
