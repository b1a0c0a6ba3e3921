"""
Port: Parser
Odpowiedzialność: budowa AST z sekwencji tokenów.
"""
from typing import Iterable, Protocol, runtime_checkable

from contracts import ExprAST, Token


@runtime_checkable
class Parser(Protocol):
    def parse(self, tokens: Iterable[Token]) -> ExprAST:
        """
        Parses tokens into a single expression tree:
          expr   := term (('+'|'-') term)*
          term   := factor (('*'|'/') factor)*
          factor := NUMBER | '(' expr ')'
        Binary operators are left-associative.
        The whole token sequence must be consumed.
        Raises ParseError on unexpected tokens or premature end of input.
        """
        ...
