"""Text output for expression trees.

``render`` gives the human form: every node has a binding strength and a child
is parenthesised only when it binds more loosely than its parent requires.
``debug`` wraps every compound node in parentheses, no matter what.
"""

import math
from enum import IntEnum

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
)


class Precedence(IntEnum):
    Lowest = 0
    Sum = 1
    Product = 2
    Power = 3
    PowerLeft = 4
    Highest = 5


def format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    if math.isfinite(value):
        # the grammar has no exponent syntax
        return np.format_float_positional(value, trim="-")
    return repr(value)


def precedence_of(node: Expr) -> Precedence:
    if isinstance(node, (Add, Sub)):
        return Precedence.Sum
    # a leading minus is only accepted where a product operand may stand
    if isinstance(node, (Mul, Div, Neg)):
        return Precedence.Product
    if isinstance(node, Const) and node.value < 0:
        return Precedence.Product
    if isinstance(node, Pow):
        return Precedence.Power
    # ln takes a primary, so ln(ln x) keeps its parentheses
    if isinstance(node, Ln):
        return Precedence.PowerLeft
    return Precedence.Highest


class Renderer(NodeVisitor):
    def visit(self, node: Expr, required: Precedence = Precedence.Lowest) -> str:
        text = super().visit(node)
        if precedence_of(node) < required:
            return f"({text})"
        return text

    def visit_Add(self, node: Add) -> str:
        left = self.visit(node.left, Precedence.Sum)
        return f"{left} + {self.visit(node.right, Precedence.Product)}"

    def visit_Sub(self, node: Sub) -> str:
        left = self.visit(node.left, Precedence.Sum)
        return f"{left} - {self.visit(node.right, Precedence.Product)}"

    def visit_Mul(self, node: Mul) -> str:
        left = self.visit(node.left, Precedence.Product)
        return f"{left} * {self.visit(node.right, Precedence.Power)}"

    def visit_Div(self, node: Div) -> str:
        left = self.visit(node.left, Precedence.Product)
        return f"{left} / {self.visit(node.right, Precedence.Power)}"

    def visit_Pow(self, node: Pow) -> str:
        base = self.visit(node.base, Precedence.PowerLeft)
        return f"{base}^{self.visit(node.exponent, Precedence.Power)}"

    def visit_Neg(self, node: Neg) -> str:
        return f"-{self.visit(node.arg, Precedence.Power)}"

    def visit_Ln(self, node: Ln) -> str:
        if precedence_of(node.arg) < Precedence.Highest:
            return f"ln{self.visit(node.arg, Precedence.Highest)}"
        return f"ln {self.visit(node.arg, Precedence.Highest)}"

    def visit_Var(self, node: Var) -> str:
        return node.name

    def visit_Const(self, node: Const) -> str:
        return format_number(node.value)


class DebugRenderer(NodeVisitor):
    SYMBOLS = {Add: "+", Sub: "-", Mul: "*", Div: "/", Pow: "^"}

    def _binary(self, node) -> str:
        left, right = (self.visit(child) for child in node)
        return f"({left} {self.SYMBOLS[type(node)]} {right})"

    visit_Add = visit_Sub = visit_Mul = visit_Div = visit_Pow = _binary

    def visit_Neg(self, node: Neg) -> str:
        return f"(-{self.visit(node.arg)})"

    def visit_Ln(self, node: Ln) -> str:
        return f"ln({self.visit(node.arg)})"

    def visit_Var(self, node: Var) -> str:
        return node.name

    def visit_Const(self, node: Const) -> str:
        return format_number(node.value)


def render(expr: Expr) -> str:
    return Renderer().visit(expr)


def debug(expr: Expr) -> str:
    return DebugRenderer().visit(expr)
