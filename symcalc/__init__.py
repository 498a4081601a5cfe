from .errors import (
    ExpressionSyntaxError,
    LexError,
    MalformedExpression,
    ParseError,
    UnboundVariableError,
    UnexpectedEof,
    UnexpectedToken,
)
from .expression import Add, Const, Div, Expr, Ln, Mul, Neg, Pow, Sub, Var, ln
from .lexer import Token, TokenKind, tokenize
from .parser import parse, parse_tokens
from .printer import Precedence

__all__ = [
    "Add",
    "Const",
    "Div",
    "Expr",
    "ExpressionSyntaxError",
    "LexError",
    "Ln",
    "MalformedExpression",
    "Mul",
    "Neg",
    "ParseError",
    "Pow",
    "Precedence",
    "Sub",
    "Token",
    "TokenKind",
    "UnboundVariableError",
    "UnexpectedEof",
    "UnexpectedToken",
    "Var",
    "ln",
    "parse",
    "parse_tokens",
    "tokenize",
]
