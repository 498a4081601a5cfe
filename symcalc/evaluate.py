import math
from typing import Mapping, Optional, Union

import numpy as np

from .errors import UnboundVariableError
from .expression import Add, Const, Div, Expr, Ln, Mul, NodeVisitor, Pow, Sub, Var

Number = Union[int, float]

CONSTANTS = {"e": math.e}

OPERATORS = {
    Add: np.add,
    Sub: np.subtract,
    Mul: np.multiply,
    Div: np.divide,
    Pow: np.power,
}


class Evaluator(NodeVisitor):
    """Compute the float64 value of a tree for the given variable bindings.

    Unbound ``e`` falls back to Euler's number. Special values propagate the
    way they do in constant folding.
    """

    def __init__(self, bindings: Optional[Mapping[str, Number]] = None):
        self.bindings = dict(bindings or {})

    def visit_Const(self, node: Const) -> np.float64:
        return np.float64(node.value)

    def visit_Var(self, node: Var) -> np.float64:
        if node.name in self.bindings:
            return np.float64(self.bindings[node.name])
        if node.name in CONSTANTS:
            return np.float64(CONSTANTS[node.name])
        raise UnboundVariableError(node.name)

    def _binary(self, node) -> np.float64:
        left, right = (self.visit(child) for child in node)
        return OPERATORS[type(node)](left, right)

    visit_Add = visit_Sub = visit_Mul = visit_Div = visit_Pow = _binary

    def visit_Neg(self, node) -> np.float64:
        return np.negative(self.visit(node.arg))

    def visit_Ln(self, node: Ln) -> np.float64:
        return np.log(self.visit(node.arg))


def evaluate(expr: Expr, bindings: Optional[Mapping[str, Number]] = None) -> float:
    with np.errstate(all="ignore"):
        return float(Evaluator(bindings).visit(expr))
