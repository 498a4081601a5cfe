"""Expression tree nodes.

Every node is an immutable dataclass owning its children; iterating over a
node yields its children. The rewrite operations live in their own modules as
``NodeVisitor`` subclasses and are reachable from any node through the
methods on ``Expr``.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Union

Number = Union[int, float]


class NodeVisitor:
    def visit(self, node: "Expr", *args) -> Any:
        method = f"visit_{type(node).__name__}"
        visitor = getattr(self, method, self.generic_visit)
        return visitor(node, *args)

    def generic_visit(self, node: "Expr", *args) -> Any:
        raise TypeError(f"{type(self).__name__} does not support node {node!r}")


def convert(value: Union["Expr", Number]) -> "Expr":
    if isinstance(value, Expr):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Const(float(value))
    raise TypeError(f"Cannot build an expression from {value!r}")


class Expr:
    def __iter__(self) -> Iterator["Expr"]:
        return iter(())

    def __add__(self, other):
        return Add(self, convert(other))

    def __radd__(self, other):
        return Add(convert(other), self)

    def __sub__(self, other):
        return Sub(self, convert(other))

    def __rsub__(self, other):
        return Sub(convert(other), self)

    def __mul__(self, other):
        return Mul(self, convert(other))

    def __rmul__(self, other):
        return Mul(convert(other), self)

    def __truediv__(self, other):
        return Div(self, convert(other))

    def __rtruediv__(self, other):
        return Div(convert(other), self)

    def __pow__(self, other):
        return Pow(self, convert(other))

    def __rpow__(self, other):
        return Pow(convert(other), self)

    def __neg__(self):
        return Neg(self)

    def __str__(self) -> str:
        return self.render()

    def reduce(self) -> "Expr":
        from .simplify import reduce

        return reduce(self)

    def derive(self, var_name: str) -> "Expr":
        from .calculus import derive

        return derive(self, var_name)

    def substitute(self, var_name: str, replacement: "Expr") -> "Expr":
        from .substitute import substitute

        return substitute(self, var_name, replacement)

    def render(self) -> str:
        from .printer import render

        return render(self)

    def debug(self) -> str:
        from .printer import debug

        return debug(self)

    def evaluate(
        self, bindings: Optional[Mapping[str, Number]] = None, **kwargs: Number
    ) -> float:
        from .evaluate import evaluate

        return evaluate(self, {**(bindings or {}), **kwargs})


@dataclass(frozen=True)
class Add(Expr):
    left: Expr
    right: Expr

    def __iter__(self):
        yield self.left
        yield self.right


@dataclass(frozen=True)
class Sub(Expr):
    left: Expr
    right: Expr

    def __iter__(self):
        yield self.left
        yield self.right


@dataclass(frozen=True)
class Mul(Expr):
    left: Expr
    right: Expr

    def __iter__(self):
        yield self.left
        yield self.right


@dataclass(frozen=True)
class Div(Expr):
    left: Expr
    right: Expr

    def __iter__(self):
        yield self.left
        yield self.right


@dataclass(frozen=True)
class Pow(Expr):
    base: Expr
    exponent: Expr

    def __iter__(self):
        yield self.base
        yield self.exponent


@dataclass(frozen=True)
class Neg(Expr):
    arg: Expr

    def __iter__(self):
        yield self.arg


@dataclass(frozen=True)
class Ln(Expr):
    arg: Expr

    def __iter__(self):
        yield self.arg


@dataclass(frozen=True)
class Var(Expr):
    name: str


@dataclass(frozen=True)
class Const(Expr):
    value: float


def ln(arg: Union[Expr, Number]) -> Ln:
    return Ln(convert(arg))


def is_const(node: Expr, value: float) -> bool:
    return isinstance(node, Const) and node.value == value
