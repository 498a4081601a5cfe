from typing import Tuple

Position = Tuple[int, int]


def _format_position(position: Position) -> str:
    return f"{position[0]}:{position[1]}"


class ExpressionSyntaxError(SyntaxError):
    """Base class for everything that can go wrong turning text into a tree."""


class LexError(ExpressionSyntaxError):
    def __init__(self, unexpected: str, position: Position):
        self.unexpected = unexpected
        self.position = position
        super().__init__(
            f"unexpected character {unexpected!r} at {_format_position(position)}"
        )


class ParseError(ExpressionSyntaxError):
    pass


class UnexpectedToken(ParseError):
    def __init__(self, token):
        self.token = token
        super().__init__(
            f"unexpected token: {token.kind.name} {token.lexeme!r} "
            f"at {_format_position(token.position)}"
        )


class UnexpectedEof(ParseError):
    def __init__(self):
        super().__init__("unexpected EOF")


class MalformedExpression(ParseError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnboundVariableError(NameError):
    def __init__(self, name: str):
        super().__init__(f"no value bound to variable '{name}'")
        self.name = name
