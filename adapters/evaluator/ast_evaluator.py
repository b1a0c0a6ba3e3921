"""
Adapter: ASTEvaluator
Implementuje port Evaluator - przejście ExprAST post-order.
Lewostronne łańcuchy (a-b-c-...) liczone w pętli, więc głębokość rekurencji
zależy od zagnieżdżenia nawiasów, nie od liczby operatorów.

Jeden ewaluator dla obu trybów: semantykę operatorów i literałów
dostarcza NumericDomain (IntegerDomain / FloatDomain).

Ostrzeżenie o obcięciu dzielenia jest "lepkie": każde wywołanie _eval
zwraca własną flagę, a rodzic łączy flagi dzieci przez OR. Brak
współdzielonego stanu - ewaluator można używać z wielu wątków.
"""
from __future__ import annotations

from adapters.evaluator.numeric_domain import DOMAINS, Number, NumericDomain, format_number
from contracts import BinOpNode, EvalResult, ExprAST, NumberNode, NumericMode


class ASTEvaluator:
    """Ewaluator wyrażeń arytmetycznych oparty na AST."""

    def __init__(self, mode: NumericMode = NumericMode.INT) -> None:
        self._domain: NumericDomain = DOMAINS[NumericMode(mode)]

    @property
    def mode(self) -> NumericMode:
        return self._domain.mode

    # -- Evaluator protocol ------------------------------------------------

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Oblicza wartość AST (rekurencja tylko po prawych poddrzewach).
        Zwraca EvalResult z wartością, flagą ostrzeżenia i krokami.
        """
        value, warning, steps = self._eval(ast)
        return EvalResult(value=value, mode=self.mode, warning=warning, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, node: ExprAST) -> tuple[Number, bool, list[str]]:
        """Zwraca (wartość, czy_obcięto, lista kroków)."""

        if isinstance(node, NumberNode):
            return self._domain.literal(node.text), False, []

        if isinstance(node, BinOpNode):
            # Lewy kręgosłup iteracyjnie: a+b+c+... nie zużywa stosu
            spine: list[BinOpNode] = []
            while isinstance(node, BinOpNode):
                spine.append(node)
                node = node.left
            value, warning, steps = self._eval(node)

            for op_node in reversed(spine):
                right_val, right_warn, right_steps = self._eval(op_node.right)
                result, truncated = self._domain.apply(op_node.op, value, right_val)
                step = (
                    f"{format_number(value)} {op_node.op} "
                    f"{format_number(right_val)} = {format_number(result)}"
                )
                if truncated:
                    step += " (truncated)"
                steps.extend(right_steps)
                steps.append(step)
                value = result
                warning = warning or right_warn or truncated
            return value, warning, steps

        raise TypeError(f"Nieznany typ węzła AST: {type(node)}")
