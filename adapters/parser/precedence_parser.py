"""
Adapter: PrecedenceParser
Implementuje port Parser - precedence climbing.

Alternatywa dla TopDownParser: ten sam AST i te same komunikaty błędów,
inna strategia. Binding power operatorów binarnych:
  + -   10
  * /   20
"""
from __future__ import annotations

from typing import Iterable

from contracts import BinOpNode, ExprAST, NumberNode, ParseError, Token, TokenKind

# Lewy binding power operatorów binarnych
_LEFT_BP: dict[TokenKind, int] = {
    TokenKind.PLUS: 10,
    TokenKind.MINUS: 10,
    TokenKind.STAR: 20,
    TokenKind.SLASH: 20,
}


class _Parser:
    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Token | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _consume(self, expect: str) -> Token:
        if self._pos >= len(self._tokens):
            raise ParseError(f"Expect {expect}, got nothing")
        t = self._tokens[self._pos]
        self._pos += 1
        return t

    def parse(self) -> ExprAST:
        node = self._expr(0)
        if self._pos < len(self._tokens):
            tok = self._tokens[self._pos]
            raise ParseError(f"Invalid expression: unexpected {tok} at {tok.pos}")
        return node

    def _expr(self, min_bp: int) -> ExprAST:
        left = self._primary()
        while True:
            tok = self._peek()
            if tok is None or tok.kind not in _LEFT_BP:
                break
            bp = _LEFT_BP[tok.kind]
            if bp <= min_bp:
                break
            self._consume(tok.text)
            # Lewostronne wiązanie: right_bp = bp (nie bp-1)
            right = self._expr(bp)
            left = BinOpNode(op=tok.text, left=left, right=right)  # type: ignore[arg-type]
        return left

    def _primary(self) -> ExprAST:
        tok = self._consume("number")
        if tok.kind == TokenKind.LPAREN:
            node = self._expr(0)
            closing = self._consume(")")
            if closing.kind != TokenKind.RPAREN:
                raise ParseError(f"Expect ), got {closing}")
            return node
        if tok.kind == TokenKind.NUMBER:
            return NumberNode(text=tok.text)
        raise ParseError(f"Expect number, got {tok}")


class PrecedenceParser:
    """Parser precedence climbing - wymienny z TopDownParser."""

    # -- Parser protocol ----------------------------------------------------

    def parse(self, tokens: Iterable[Token]) -> ExprAST:
        return _Parser(tokens).parse()
