"""Tree-walking evaluation against a caller-owned variable environment.

Arithmetic follows IEEE-754: division by zero and out-of-domain powers
produce inf/nan instead of raising.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional

from . import ast
from .errors import CalcError

logger = logging.getLogger(__name__)


class UndefinedVariableError(CalcError):
    def __init__(self, name: str, start: Optional[int] = None, end: Optional[int] = None):
        super().__init__(
            f"found undefined variable '{name}', "
            "all variables must be defined before being used in expressions"
        )
        self.name = name
        self.start = start
        self.end = end


class Evaluator:
    def __init__(self, env: Dict[str, float]):
        self.env = env

    def evaluate(self, node: ast.Expr) -> float:
        if isinstance(node, (ast.Number, ast.Constant)):
            return node.value
        if isinstance(node, ast.Var):
            if node.name not in self.env:
                raise UndefinedVariableError(node.name, node.start, node.end)
            return self.env[node.name]
        if isinstance(node, ast.Binary):
            # Left spine in a loop: left operand first, then each right side.
            spine = []
            while isinstance(node, ast.Binary):
                spine.append(node)
                node = node.left
            value = self.evaluate(node)
            for b in reversed(spine):
                value = apply(b.op, value, self.evaluate(b.right))
            return value
        if isinstance(node, ast.Assign):
            value = self.evaluate(node.expr)
            self.env[node.name] = value
            logger.debug("bound %s = %r", node.name, value)
            return value
        raise TypeError(f"Unhandled expr {node!r}")


def apply(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        return _divide(left, right)
    if op == "^":
        return _power(left, right)
    raise ValueError(f"unhandled operator {op!r}")


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    # Sign follows both operands, including a signed zero divisor.
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power, or a negative base to a fractional power.
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and float(x).is_integer() and int(x) % 2 == 1


__all__ = ["Evaluator", "UndefinedVariableError", "apply"]
