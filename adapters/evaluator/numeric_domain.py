"""
Tryby liczbowe ewaluatora.

IntegerDomain - i128: dokładne + - *, dzielenie obcinane w stronę zera
                (jak w Rust, nie floor jak Pythonowe //). Niezerowa reszta
                → ostrzeżenie. Wynik spoza zakresu i128 → IntegerOverflowError.
FloatDomain   - f64: arytmetyka IEEE 754; x/0 daje ±inf albo nan, nigdy błąd.

apply() zwraca parę (wartość, czy_obcięto).
"""
from __future__ import annotations

import math
from decimal import Decimal
from typing import Protocol, Union

from contracts import (
    I128_MAX,
    I128_MIN,
    DivisionByZeroError,
    IntegerOverflowError,
    MalformedLiteralError,
    NumericMode,
)

Number = Union[int, float]

_RADIX = {"0x": 16, "0o": 8, "0b": 2}


def _int_literal(text: str, mode: NumericMode) -> int:
    digits = text.replace("_", "")
    radix = _RADIX.get(digits[:2])
    try:
        if radix is not None:
            body = digits[2:]
            # "0x" bez cyfr == 0
            return int(body, radix) if body else 0
        return int(digits, 10)
    except ValueError:
        raise MalformedLiteralError(text, mode) from None


def format_number(value: Number) -> str:
    """Zapis liczby jak w wyjściu CLI: 3 zamiast 3.0, bez notacji wykładniczej."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # najkrótszy zapis (repr) rozwinięty bez wykładnika: 1e23 -> 1000...0
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


class NumericDomain(Protocol):
    mode: NumericMode

    def literal(self, text: str) -> Number: ...

    def apply(self, op: str, a: Number, b: Number) -> tuple[Number, bool]: ...


class IntegerDomain:
    mode = NumericMode.INT

    def literal(self, text: str) -> int:
        return self._checked(_int_literal(text, self.mode))

    def apply(self, op: str, a: int, b: int) -> tuple[int, bool]:
        if op == "+":
            return self._checked(a + b), False
        if op == "-":
            return self._checked(a - b), False
        if op == "*":
            return self._checked(a * b), False
        if op == "/":
            if b == 0:
                raise DivisionByZeroError()
            q = abs(a) // abs(b)
            if (a < 0) != (b < 0):
                q = -q
            return self._checked(q), a % b != 0
        raise ValueError(f"Nieznany operator: {op!r}")

    @staticmethod
    def _checked(value: int) -> int:
        if value < I128_MIN or value > I128_MAX:
            raise IntegerOverflowError(value)
        return value


class FloatDomain:
    mode = NumericMode.FLOAT

    def literal(self, text: str) -> float:
        if text[:2] in _RADIX:
            try:
                return float(_int_literal(text, self.mode))
            except OverflowError:
                return math.inf
        try:
            return float(text.replace("_", ""))
        except ValueError:
            raise MalformedLiteralError(text, self.mode) from None

    def apply(self, op: str, a: float, b: float) -> tuple[float, bool]:
        if op == "+":
            return a + b, False
        if op == "-":
            return a - b, False
        if op == "*":
            return a * b, False
        if op == "/":
            return _ieee_div(a, b), False
        raise ValueError(f"Nieznany operator: {op!r}")


def _ieee_div(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


DOMAINS: dict[NumericMode, NumericDomain] = {
    NumericMode.INT: IntegerDomain(),
    NumericMode.FLOAT: FloatDomain(),
}
