"""Single-pass, bottom-up algebraic simplification.

Children are reduced first, then the node is matched against an ordered list
of shape checks where the first match wins. Constant co-location only looks
one level into a nested sum or product, so a single call is not guaranteed to
reach a fixpoint: ``1 + (-1 + x)`` reduces to ``0 + x`` and needs a second
call to become ``x``.

Constant folding runs on float64 with floating point errors silenced, so
``1 / 0`` becomes ``inf`` and ``ln(-1)`` becomes ``nan`` instead of raising.
"""

import logging
from typing import Callable, Optional

import numpy as np

from .expression import (
    Add,
    Const,
    Div,
    Expr,
    Ln,
    Mul,
    Neg,
    NodeVisitor,
    Pow,
    Sub,
    Var,
    is_const,
)

logger = logging.getLogger(__name__)


def fold(op: Callable, *values: float) -> Const:
    with np.errstate(all="ignore"):
        return Const(float(op(*(np.float64(v) for v in values))))


def _colocate(left: Expr, right: Expr, node_type, op) -> Optional[Expr]:
    """Merge a constant into a directly nested node of the same operator.

    ``c1 op (c2 op r)`` and ``c1 op (r op c2)`` become ``(c1 op c2) op r``;
    ``(c1 op l) op c2`` and ``(l op c1) op c2`` become ``l op (c1 op c2)``.
    """
    if isinstance(left, Const) and isinstance(right, node_type):
        if isinstance(right.left, Const):
            return node_type(fold(op, left.value, right.left.value), right.right)
        if isinstance(right.right, Const):
            return node_type(fold(op, left.value, right.right.value), right.left)
    if isinstance(left, node_type) and isinstance(right, Const):
        if isinstance(left.left, Const):
            return node_type(left.right, fold(op, left.left.value, right.value))
        if isinstance(left.right, Const):
            return node_type(left.left, fold(op, left.right.value, right.value))
    return None


class Reducer(NodeVisitor):
    def visit_Const(self, node: Const) -> Expr:
        return node

    def visit_Var(self, node: Var) -> Expr:
        return node

    def visit_Add(self, node: Add) -> Expr:
        left, right = self.visit(node.left), self.visit(node.right)
        if is_const(left, 0.0):
            return right
        if is_const(right, 0.0):
            return left
        colocated = _colocate(left, right, Add, np.add)
        if colocated is not None:
            return colocated
        if isinstance(left, Const) and isinstance(right, Const):
            return fold(np.add, left.value, right.value)
        return Add(left, right)

    def visit_Sub(self, node: Sub) -> Expr:
        left, right = self.visit(node.left), self.visit(node.right)
        if isinstance(left, Const) and isinstance(right, Const):
            return fold(np.subtract, left.value, right.value)
        return Sub(left, right)

    def visit_Mul(self, node: Mul) -> Expr:
        left, right = self.visit(node.left), self.visit(node.right)
        if is_const(left, 0.0) or is_const(right, 0.0):
            return Const(0.0)
        if is_const(left, 1.0):
            return right
        if is_const(right, 1.0):
            return left
        colocated = _colocate(left, right, Mul, np.multiply)
        if colocated is not None:
            return colocated
        if isinstance(left, Const) and isinstance(right, Const):
            return fold(np.multiply, left.value, right.value)
        return Mul(left, right)

    def visit_Div(self, node: Div) -> Expr:
        left, right = self.visit(node.left), self.visit(node.right)
        if isinstance(left, Const) and isinstance(right, Const):
            return fold(np.divide, left.value, right.value)
        return Div(left, right)

    def visit_Pow(self, node: Pow) -> Expr:
        base, exponent = self.visit(node.base), self.visit(node.exponent)
        # x^0 is checked before 0^x, which makes 0^0 == 1
        if is_const(exponent, 0.0):
            return Const(1.0)
        if is_const(base, 0.0):
            return Const(0.0)
        if is_const(exponent, 1.0):
            return base
        if isinstance(base, Const) and isinstance(exponent, Const):
            return fold(np.power, base.value, exponent.value)
        return Pow(base, exponent)

    def visit_Ln(self, node: Ln) -> Expr:
        arg = self.visit(node.arg)
        if isinstance(arg, Const):
            return fold(np.log, arg.value)
        if arg == Var("e"):
            return Const(1.0)
        return Ln(arg)

    def visit_Neg(self, node: Neg) -> Expr:
        arg = self.visit(node.arg)
        if isinstance(arg, Const):
            return fold(np.negative, arg.value)
        return Neg(arg)


def reduce(expr: Expr) -> Expr:
    reduced = Reducer().visit(expr)
    logger.debug(f"reduce: {expr!r} -> {reduced!r}")
    return reduced
