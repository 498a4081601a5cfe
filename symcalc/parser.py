"""Recursive-descent parser.

Grammar, loosest binding first::

    expression := term
    term       := factor (('+' | '-') factor)*
    factor     := unary (('*' | '/') unary)*
    unary      := '-' unary | power
    power      := function ('^' power)?
    function   := 'ln' primary | primary
    primary    := NUMBER | IDENT | '(' expression ')'

``power`` recurses into itself for the exponent, so ``2^3^2`` is ``2^(3^2)``,
and ``unary`` sits above ``power``, so ``-x^2`` is ``-(x^2)``.
"""

import logging
from typing import List, Optional, Sequence

from .errors import MalformedExpression, UnexpectedEof, UnexpectedToken
from .expression import Const, Expr, Ln, Neg, Pow, Var
from .lexer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

ADDITIVE = {TokenKind.Plus, TokenKind.Minus}
MULTIPLICATIVE = {TokenKind.Star, TokenKind.Slash}


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.i = 0

    def peek(self) -> Optional[Token]:
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def peek_kind(self) -> Optional[TokenKind]:
        token = self.peek()
        return token.kind if token is not None else None

    def take(self) -> Token:
        token = self.peek()
        if token is None or token.kind is TokenKind.Eof:
            raise UnexpectedEof()
        self.i += 1
        return token

    def parse(self) -> Expr:
        expr = self.expression()
        token = self.peek()
        if token is not None and token.kind is not TokenKind.Eof:
            raise UnexpectedToken(token)
        return expr

    def expression(self) -> Expr:
        return self._term()

    def _term(self) -> Expr:
        node = self._factor()
        while self.peek_kind() in ADDITIVE:
            op = self.take()
            right = self._factor()
            node = node + right if op.kind is TokenKind.Plus else node - right
        return node

    def _factor(self) -> Expr:
        node = self._unary()
        while self.peek_kind() in MULTIPLICATIVE:
            op = self.take()
            right = self._unary()
            node = node * right if op.kind is TokenKind.Star else node / right
        return node

    def _unary(self) -> Expr:
        if self.peek_kind() is TokenKind.Minus:
            self.take()
            return Neg(self._unary())
        return self._power()

    def _power(self) -> Expr:
        node = self._function()
        if self.peek_kind() is TokenKind.Caret:
            self.take()
            node = Pow(node, self._power())
        return node

    def _function(self) -> Expr:
        if self.peek_kind() is TokenKind.FnLn:
            self.take()
            return Ln(self._primary())
        return self._primary()

    def _primary(self) -> Expr:
        token = self.take()
        if token.kind is TokenKind.Number:
            return Const(float(token.lexeme))
        if token.kind is TokenKind.Ident:
            return Var(token.lexeme)
        if token.kind is TokenKind.LeftParen:
            node = self.expression()
            paren = self.peek()
            if paren is None or paren.kind is not TokenKind.RightParen:
                line, column = paren.position if paren is not None else ("?", "?")
                raise MalformedExpression(
                    f"expected ')' after expression at {line}:{column}"
                )
            self.take()
            return node
        raise UnexpectedToken(token)


def parse_tokens(tokens: List[Token]) -> Expr:
    return Parser(tokens).parse()


def parse(source: str) -> Expr:
    """Lex and parse ``source``; the first lex or parse error is raised as is."""
    expr = parse_tokens(tokenize(source))
    logger.debug(f"Parsed {source!r} as {expr!r}")
    return expr
