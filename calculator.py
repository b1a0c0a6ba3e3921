"""
calculator.py - fasada: tekst → tokeny → AST → EvalResult.

Pierwszy błąd (LexError / ParseError / EvalError) przerywa obliczenie
i jest przekazywany wywołującemu bez zmian. Ostrzeżenie o obcięciu
dzielenia nie jest błędem - siedzi w EvalResult.warning.

Użycie:
    calculate("2*6+(1/2)")                      # → value=12, warning=True
    calculate("2*6+(1/2)", NumericMode.FLOAT)   # → value=12.5
    calculate("8-3-2", parser=PrecedenceParser())
"""
from __future__ import annotations

import logging

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.evaluator.numeric_domain import format_number
from adapters.parser import TopDownParser
from adapters.tokenizer import tokenize
from contracts import CalcError, EvalResult, NumericMode
from ports.parser import Parser

logger = logging.getLogger("wcal.calculator")

_DEFAULT_PARSER = TopDownParser()


def calculate(
    text: str,
    mode: NumericMode = NumericMode.INT,
    parser: Parser | None = None,
) -> EvalResult:
    """
    Oblicza wyrażenie w podanym trybie.
    parser: dowolna implementacja portu Parser; None = TopDownParser.
    """
    parser = parser or _DEFAULT_PARSER
    try:
        tokens = tokenize(text)
        ast = parser.parse(tokens)
        logger.debug("Parsed %r with %s", text, type(parser).__name__)
        result = ASTEvaluator(mode).eval_expr(ast)
    except CalcError as exc:
        logger.debug("Calculation of %r failed: %s", text, exc)
        raise
    logger.debug("Result of %r (%s): %s", text, result.mode.value, result.value)
    return result


def format_value(result: EvalResult) -> str:
    """Wartość wyniku w formacie wyjścia CLI."""
    return format_number(result.value)
