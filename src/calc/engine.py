"""Line-level entry points: text in, float (or diagnostic) out."""

from __future__ import annotations

from typing import Dict

from .ast import Expr
from .errors import CalcError
from .evaluator import Evaluator
from .lexer import Lexer
from .parser import Parser, ParseError

TOO_DEEP = "expression is nested too deeply"


def parse_line(line: str) -> Expr:
    try:
        return Parser(Lexer(line).tokens()).parse()
    except RecursionError:
        raise ParseError(TOO_DEEP) from None


def evaluate_tree(node: Expr, env: Dict[str, float]) -> float:
    try:
        return Evaluator(env).evaluate(node)
    except RecursionError:
        raise CalcError(TOO_DEEP) from None


def evaluate(line: str, env: Dict[str, float]) -> float:
    """Lex, parse and evaluate one line.

    ``env`` is read for variable lookups and written by assignments; it is
    never replaced or cleared. Raises a CalcError subclass on failure, in
    which case bindings made by earlier lines are left as they were.
    """
    return evaluate_tree(parse_line(line), env)


def format_value(value: float) -> str:
    return "=%f" % value


def run_line(line: str, env: Dict[str, float]) -> str:
    try:
        return format_value(evaluate(line, env))
    except CalcError as e:
        return str(e)


__all__ = ["parse_line", "evaluate_tree", "evaluate", "format_value", "run_line"]
