"""Structural differentiation with respect to one named variable.

No simplification happens here; callers are expected to ``reduce`` the result.
"""

import logging

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
)

logger = logging.getLogger(__name__)


class Deriver(NodeVisitor):
    def __init__(self, var_name: str):
        self.var_name = var_name

    def visit_Const(self, node: Const) -> Expr:
        return Const(0.0)

    def visit_Var(self, node: Var) -> Expr:
        return Const(1.0) if node.name == self.var_name else Const(0.0)

    def visit_Add(self, node: Add) -> Expr:
        return self.visit(node.left) + self.visit(node.right)

    def visit_Sub(self, node: Sub) -> Expr:
        return self.visit(node.left) - self.visit(node.right)

    def visit_Mul(self, node: Mul) -> Expr:
        u, v = node.left, node.right
        return self.visit(u) * v + self.visit(v) * u

    def visit_Div(self, node: Div) -> Expr:
        u, v = node.left, node.right
        return (self.visit(u) * v - self.visit(v) * u) / Pow(v, Const(2.0))

    def visit_Pow(self, node: Pow) -> Expr:
        # [f^g]' = g' * ln(f) * f^g + g * f' * f^(g - 1), assumes f > 0
        f, g = node.base, node.exponent
        exponential_part = self.visit(g) * Ln(f) * node
        power_part = g * self.visit(f) * Pow(f, g - Const(1.0))
        return exponential_part + power_part

    def visit_Neg(self, node: Neg) -> Expr:
        return -self.visit(node.arg)

    def visit_Ln(self, node: Ln) -> Expr:
        return self.visit(node.arg) / node.arg


def derive(expr: Expr, var_name: str) -> Expr:
    derivative = Deriver(var_name).visit(expr)
    logger.debug(f"d/d{var_name}: {expr!r} -> {derivative!r}")
    return derivative
