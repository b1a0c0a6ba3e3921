import math

import pytest

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.evaluator.numeric_domain import format_number
from adapters.parser import TopDownParser
from adapters.tokenizer import tokenize
from contracts import (
    I128_MAX,
    BinOpNode,
    DivisionByZeroError,
    IntegerOverflowError,
    MalformedLiteralError,
    NumberNode,
    NumericMode,
)
from ports.evaluator import Evaluator


def _ast(text: str):
    return TopDownParser().parse(tokenize(text))


def _int(text: str):
    return ASTEvaluator(NumericMode.INT).eval_expr(_ast(text))


def _float(text: str):
    return ASTEvaluator(NumericMode.FLOAT).eval_expr(_ast(text))


def test_evaluates_single_literal():
    result = ASTEvaluator().eval_expr(NumberNode(text="3"))

    assert result.value == 3
    assert result.mode == NumericMode.INT
    assert result.warning is False
    assert result.steps == []


def test_integer_exact_division_has_no_warning():
    result = ASTEvaluator().eval_expr(
        BinOpNode(op="/", left=NumberNode(text="4"), right=NumberNode(text="2"))
    )

    assert result.value == 2
    assert result.warning is False


def test_integer_division_truncates_and_warns():
    result = _int("3/2")

    assert result.value == 1
    assert result.warning is True


def test_integer_division_truncates_toward_zero():
    result = _int("(1-8)/2")

    assert result.value == -3
    assert result.warning is True


def test_truncation_warning_is_sticky_across_tree():
    result = _int("(7/2)+(1/2)")

    assert result.value == 3
    assert result.warning is True


def test_integer_division_by_zero_fails():
    with pytest.raises(DivisionByZeroError):
        _int("1/0")


def test_float_division_by_zero_follows_ieee():
    assert _float("1/0").value == math.inf
    assert _float("1/0").warning is False
    assert _float("(1-2)/0").value == -math.inf
    assert math.isnan(_float("0/0").value)


def test_float_division_never_warns():
    result = _float("7/2")

    assert result.value == 3.5
    assert result.warning is False


def test_prefixed_literals_in_both_modes():
    assert _int("0x1A+0o12+0b11").value == 26 + 10 + 3
    assert _float("0x_1A").value == 26.0
    assert _int("0x").value == 0


def test_decimal_literal_is_malformed_in_integer_mode():
    with pytest.raises(MalformedLiteralError) as exc_info:
        _int("1.5*2")

    assert exc_info.value.text == "1.5"
    assert _float("1.5*2").value == 3.0


def test_integer_overflow_is_reported():
    assert _int(str(I128_MAX)).value == I128_MAX

    with pytest.raises(IntegerOverflowError):
        _int(f"{I128_MAX}+1")

    with pytest.raises(IntegerOverflowError):
        _int(f"{I128_MAX + 1}")


def test_steps_are_post_order():
    result = _int("7/2+1")

    assert result.steps == ["7 / 2 = 3 (truncated)", "3 + 1 = 4"]
    assert _float("1/2").steps == ["1 / 2 = 0.5"]


@pytest.mark.parametrize("mode", [NumericMode.INT, NumericMode.FLOAT])
@pytest.mark.parametrize("op", ["+", "*"])
def test_long_flat_chain_does_not_exhaust_stack(mode, op):
    terms = 5000
    result = ASTEvaluator(mode).eval_expr(_ast(op.join(["1"] * terms)))

    assert result.value == (terms if op == "+" else 1)
    assert len(result.steps) == terms - 1


def test_long_chain_keeps_sticky_warning():
    result = _int("7/2" + "+1" * 3000)

    assert result.value == 3003
    assert result.warning is True
    assert result.steps[0] == "7 / 2 = 3 (truncated)"


def test_unknown_node_type_raises_type_error():
    with pytest.raises(TypeError):
        ASTEvaluator().eval_expr("1+2")  # type: ignore[arg-type]


def test_evaluator_satisfies_protocol():
    assert isinstance(ASTEvaluator(), Evaluator)


@pytest.mark.parametrize("value, expected", [
    (12, "12"),
    (3.0, "3"),
    (12.5, "12.5"),
    (1e20, "100000000000000000000"),
    (1e23, "100000000000000000000000"),
    (1e-7, "0.0000001"),
    (0.1 + 0.2, "0.30000000000000004"),
    (-0.0, "-0"),
    (math.inf, "inf"),
    (-math.inf, "-inf"),
    (math.nan, "NaN"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected
