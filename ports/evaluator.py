"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń AST w wybranym trybie liczbowym.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Evaluates an arithmetic AST to a numeric result.
        Returns EvalResult with:
          - value: int (integer mode) or float (float mode)
          - warning: True if any integer division in the tree truncated
          - steps: list of human-readable computation steps
        Raises DivisionByZeroError on integer division by zero.
        Raises MalformedLiteralError if a literal does not fit the mode.
        Raises IntegerOverflowError if a value leaves the i128 range.
        """
        ...
