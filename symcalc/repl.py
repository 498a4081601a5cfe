#! /usr/bin/env python
"""Interactive shell around the expression core.

Type an expression to make it the working expression, then apply actions to
it::

    >>> x^2 + ln x
    x^2 + ln x
    >>> derive x
    2 * x + 1 / x
    >>> substitute x 2
    2 * 2 + 1 / 2
    >>> reduce
    4.5
"""

import atexit
import logging
import os
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .errors import ExpressionSyntaxError, UnboundVariableError
from .expression import Expr
from .parser import parse

try:
    import readline
except ImportError:  # pragma: no cover
    readline = None

LOG_LEVEL = logging.ERROR
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"
HISTORY_FILE = "~/.symcalc_history"
PROMPT = ">>> "
EXIT_COMMANDS = {"exit", "quit"}

logger = logging.getLogger(__name__)


class ActionError(ValueError):
    pass


ActionResult = Tuple[Expr, Optional[str]]


@dataclass(frozen=True)
class Action:
    name: str
    usage: str
    run: Callable[[Expr, str], ActionResult]


def _derive(expr: Expr, args: str) -> ActionResult:
    names = args.split()
    if len(names) != 1:
        raise ActionError("derive expects exactly one variable name")
    return expr.derive(names[0]).reduce(), None


def _substitute(expr: Expr, args: str) -> ActionResult:
    parts = args.split(maxsplit=1)
    if len(parts) != 2:
        raise ActionError("substitute expects a variable name and an expression")
    name, replacement = parts
    return expr.substitute(name, parse(replacement)), None


def _reduce(expr: Expr, args: str) -> ActionResult:
    return expr.reduce(), None


def _debug(expr: Expr, args: str) -> ActionResult:
    return expr, expr.debug()


def _parse_bindings(args: str) -> Dict[str, float]:
    bindings = {}
    for item in args.split():
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ActionError(f"expected name=value, got {item!r}")
        try:
            bindings[name] = float(value)
        except ValueError:
            raise ActionError(f"{value!r} is not a number") from None
    return bindings


def _eval(expr: Expr, args: str) -> ActionResult:
    value = expr.evaluate(_parse_bindings(args))
    return expr, repr(value)


ACTIONS: Dict[str, Action] = {
    action.name: action
    for action in (
        Action("derive", "derive <var>", _derive),
        Action("substitute", "substitute <var> <expression>", _substitute),
        Action("reduce", "reduce", _reduce),
        Action("debug", "debug", _debug),
        Action("eval", "eval [name=value ...]", _eval),
    )
}


def help_text() -> str:
    usages = [action.usage for action in ACTIONS.values()]
    return "\n".join(["<expression>", *usages, "help", "exit | quit"])


class Session:
    def __init__(self, expr: Optional[Expr] = None):
        self.expr = expr

    def handle(self, line: str) -> str:
        """Apply one line of input and return the text to show for it."""
        line = line.strip()
        if not line:
            return ""
        command, *rest = line.split(maxsplit=1)
        args = rest[0] if rest else ""
        try:
            if command == "help":
                return help_text()
            if command in ACTIONS:
                return self._dispatch(ACTIONS[command], args.strip())
            self.expr = parse(line)
            return self.expr.render()
        except (ExpressionSyntaxError, UnboundVariableError, ActionError) as exc:
            return f"error: {exc}"

    def _dispatch(self, action: Action, args: str) -> str:
        if self.expr is None:
            raise ActionError("no expression yet, type one first")
        logger.debug(f"{action.name} {args!r} on {self.expr!r}")
        self.expr, output = action.run(self.expr, args)
        rendered = self.expr.render()
        return f"{output}\n{rendered}" if output is not None else rendered


def _setup_history(history_path: str) -> None:
    if readline is None:
        return
    readline.parse_and_bind("tab: complete")
    try:
        readline.read_history_file(history_path)
    except FileNotFoundError:
        pass
    except (OSError, ValueError):
        corrupted_path = f"{history_path}.corrupt"
        try:
            os.replace(history_path, corrupted_path)
        except OSError:
            logger.warning(f"Could not move aside history file {history_path}")

    def _persist_history():
        try:
            readline.write_history_file(history_path)
        except OSError:
            logger.warning(f"Could not write history file {history_path}")

    atexit.register(_persist_history)


def build_arg_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="Simplify, differentiate and substitute arithmetic expressions."
    )
    parser.add_argument(
        "expression", nargs="?", default=None, help="Initial working expression"
    )
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(LOG_LEVEL),
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Logging level",
    )
    parser.add_argument(
        "--history-file", default=HISTORY_FILE, help="Where to keep line history"
    )
    parser.add_argument(
        "--no-history", action="store_true", help="Do not read or write history"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    if not args.no_history:
        _setup_history(os.path.expanduser(args.history_file))

    session = Session()
    if args.expression is not None:
        print(session.handle(args.expression))
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if line.strip().lower() in EXIT_COMMANDS:
            break
        output = session.handle(line)
        if output:
            print(output)


if __name__ == "__main__":
    main()
