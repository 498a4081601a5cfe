"""Turn source text into a flat list of positioned tokens.

Positions are ``(line, column)`` pairs, both starting at zero. Lexing fails on
the first character it cannot place; there is no resynchronisation.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import LexError, Position

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    LeftParen = 0
    RightParen = 1
    Minus = 2
    Plus = 3
    Slash = 4
    Star = 5
    Caret = 6
    Ident = 7
    Number = 8
    FnLn = 9
    Eof = 10


SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LeftParen,
    ")": TokenKind.RightParen,
    "+": TokenKind.Plus,
    "-": TokenKind.Minus,
    "*": TokenKind.Star,
    "/": TokenKind.Slash,
    "^": TokenKind.Caret,
}

KEYWORDS = {"ln": TokenKind.FnLn}

WHITESPACE = {" ", "\t"}


def _is_ident_char(c: str) -> bool:
    return c == "_" or ("a" <= c <= "z") or ("A" <= c <= "Z")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


@dataclass(frozen=True)
class Token:
    lexeme: str
    position: Position
    kind: TokenKind

    def __repr__(self) -> str:
        line, column = self.position
        return f"{self.kind.name} {line}:{column} {self.lexeme!r}"


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.i = 0
        self.line = 0
        self.column = 0

    @property
    def position(self) -> Position:
        return (self.line, self.column)

    def peek(self) -> Optional[str]:
        return self.source[self.i] if self.i < len(self.source) else None

    def advance(self) -> str:
        c = self.source[self.i]
        self.i += 1
        if c == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return c

    def tokens(self) -> List[Token]:
        tokens = []
        while (c := self.peek()) is not None:
            start = self.position
            if c in SINGLE_CHAR_TOKENS:
                tokens.append(Token(self.advance(), start, SINGLE_CHAR_TOKENS[c]))
            elif _is_ident_char(c):
                tokens.append(self._ident(start))
            elif _is_digit(c):
                tokens.append(self._number(start))
            elif c == "\n" or c in WHITESPACE:
                self.advance()
            else:
                raise LexError(c, start)
        tokens.append(Token("", self.position, TokenKind.Eof))
        logger.debug(f"Tokens: {tokens}")
        return tokens

    def _ident(self, start: Position) -> Token:
        lexeme = []
        while (c := self.peek()) is not None and _is_ident_char(c):
            lexeme.append(self.advance())
        text = "".join(lexeme)
        return Token(text, start, KEYWORDS.get(text, TokenKind.Ident))

    def _digits(self, lexeme: List[str]) -> None:
        while (c := self.peek()) is not None and _is_digit(c):
            lexeme.append(self.advance())

    def _number(self, start: Position) -> Token:
        lexeme: List[str] = []
        self._digits(lexeme)
        if self.peek() == ".":
            dot_position = self.position
            lexeme.append(self.advance())
            c = self.peek()
            if c is None or not _is_digit(c):
                raise LexError(".", dot_position)
            self._digits(lexeme)
        return Token("".join(lexeme), start, TokenKind.Number)


def tokenize(source: str) -> List[Token]:
    return Lexer(source).tokens()
