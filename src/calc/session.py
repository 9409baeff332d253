"""Interactive session state and session commands (exit, clear, list)."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .ast import format_tree
from .engine import evaluate_tree, format_value, parse_line
from .errors import CalcError

logger = logging.getLogger(__name__)

COMMANDS = ["exit", "clear", "list", "list-pretty"]


class Session:
    def __init__(self, show_tree: bool = False):
        self.env: Dict[str, float] = {}
        self.running = True
        self.show_tree = show_tree

    def handle(self, line: str) -> Optional[str]:
        text = line.strip()
        if not text:
            return None
        if text == "exit":
            self.running = False
            return "exiting..."
        if text == "clear":
            logger.debug("clearing %d bindings", len(self.env))
            self.env = {}
            return None
        if text == "list":
            return self.listing()
        if text == "list-pretty":
            return self.listing(pretty=True)
        return self.eval(line)

    def eval(self, line: str) -> str:
        try:
            node = parse_line(line)
            value = evaluate_tree(node, self.env)
        except CalcError as e:
            return str(e)
        if self.show_tree:
            return f"{format_tree(node)}\n{format_value(value)}"
        return format_value(value)

    def listing(self, pretty: bool = False) -> str:
        if pretty:
            rows = "".join(f" {name}={value:f}\n" for name, value in self.env.items())
            return "Values:" + rows
        parts = "".join(f" {name}={value:f}" for name, value in self.env.items())
        return "Values:" + parts


def loop(session: Session, read: Callable[[], str], write: Callable[[str], None] = print) -> None:
    """Feed lines from ``read`` to the session until ``exit`` or end of input.

    ``read`` raises EOFError at end of input; KeyboardInterrupt drops the
    current line and keeps the session alive.
    """
    while session.running:
        try:
            line = read()
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        out = session.handle(line)
        if out is not None:
            write(out)


__all__ = ["Session", "COMMANDS", "loop"]
