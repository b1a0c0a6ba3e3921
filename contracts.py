"""
contracts.py - Jedyne źródło prawdy dla wszystkich typów danych w wcal.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

# Zakres i128
I128_MIN = -(2 ** 127)
I128_MAX = 2 ** 127 - 1


# ─────────────────────────── Tokenizer ───────────────────────────────────

class TokenKind(str, Enum):
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    text: str      # dosłowny tekst literału lub znak operatora
    pos: int       # offset pierwszego znaku w wejściu

    def __str__(self) -> str:
        return self.text


# ─────────────────────────── AST ─────────────────────────────────────────

class NumberNode(BaseModel):
    """Literał liczbowy. Tekst interpretowany dopiero przez ewaluator."""
    model_config = ConfigDict(frozen=True)

    node_type: Literal["number"] = "number"
    text: str


class BinOpNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["binop"] = "binop"
    op: Literal["+", "-", "*", "/"]
    left: "ExprAST"
    right: "ExprAST"


ExprAST = Union[NumberNode, BinOpNode]
BinOpNode.model_rebuild()


# ─────────────────────────── Evaluator ───────────────────────────────────

class NumericMode(str, Enum):
    INT = "int"       # i128, dzielenie obcina wynik
    FLOAT = "float"   # f64 (IEEE 754)

    @property
    def short(self) -> str:
        """Prefiks promptu: 'i' albo 'f'."""
        return self.value[0]


class EvalResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Union[int, float]
    mode: NumericMode
    warning: bool = False                            # dzielenie całkowite obcięło wynik
    steps: list[str] = Field(default_factory=list)   # czytelne kroki


# ─────────────────────────── Errors ──────────────────────────────────────

class CalcError(Exception):
    """Bazowy błąd pojedynczego obliczenia (lex / parse / eval)."""


class LexError(CalcError):
    def __init__(self, position: int, char: str) -> None:
        self.position = position
        self.char = char
        super().__init__(f"Invalid character near {position}: {char}")


class ParseError(CalcError):
    pass


class EvalError(CalcError):
    pass


class DivisionByZeroError(EvalError):
    def __init__(self) -> None:
        super().__init__("division by zero")


class MalformedLiteralError(EvalError):
    def __init__(self, text: str, mode: NumericMode) -> None:
        self.text = text
        self.mode = mode
        super().__init__(f"Invalid {mode.value} literal: {text!r}")


class IntegerOverflowError(EvalError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__("integer overflow: result does not fit in i128")
