from .expression import Const, Expr, Ln, Neg, NodeVisitor, Var


class Substituter(NodeVisitor):
    """Rebuild a tree with every ``Var(var_name)`` leaf swapped for ``replacement``.

    Nodes are immutable, so the one replacement tree is placed at every site.
    """

    def __init__(self, var_name: str, replacement: Expr):
        self.var_name = var_name
        self.replacement = replacement

    def visit_Var(self, node: Var) -> Expr:
        return self.replacement if node.name == self.var_name else node

    def visit_Const(self, node: Const) -> Expr:
        return node

    def _binary(self, node):
        return type(node)(*(self.visit(child) for child in node))

    visit_Add = visit_Sub = visit_Mul = visit_Div = visit_Pow = _binary

    def visit_Neg(self, node: Neg) -> Expr:
        return Neg(self.visit(node.arg))

    def visit_Ln(self, node: Ln) -> Expr:
        return Ln(self.visit(node.arg))


def substitute(expr: Expr, var_name: str, replacement: Expr) -> Expr:
    return Substituter(var_name, replacement).visit(expr)
