"""AST node definitions for calc expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Base node for source span info
@dataclass(kw_only=True)
class Node:
    start: Optional[int] = None
    end: Optional[int] = None


@dataclass
class Expr(Node):
    pass


@dataclass
class Number(Expr):
    value: float


@dataclass
class Constant(Expr):
    name: str
    value: float


@dataclass
class Var(Expr):
    name: str


@dataclass
class Binary(Expr):
    op: str
    left: Expr
    right: Expr


@dataclass
class Assign(Expr):
    name: str
    expr: Expr


CONSTANTS = {
    "e": 2.7182818,
    "pi": 3.1415927,
}


def format_tree(node: Expr) -> str:
    """Render a tree on one line, fully bracketed: ``[[2 ^ 3] ^ 2]``."""
    if isinstance(node, Number):
        return f"{node.value:g}"
    if isinstance(node, Constant):
        return node.name
    if isinstance(node, Var):
        return node.name
    if isinstance(node, Binary):
        # Flat runs like 1 + 2 + 3 build left-deep chains; walk the left
        # spine in a loop so chain length is not bounded by the stack.
        spine = []
        while isinstance(node, Binary):
            spine.append(node)
            node = node.left
        text = format_tree(node)
        for b in reversed(spine):
            text = f"[{text} {b.op} {format_tree(b.right)}]"
        return text
    if isinstance(node, Assign):
        return f"{node.name} = {format_tree(node.expr)}"
    raise TypeError(f"Unhandled node {node!r}")


__all__ = [
    "Node",
    "Expr",
    "Number",
    "Constant",
    "Var",
    "Binary",
    "Assign",
    "CONSTANTS",
    "format_tree",
]
