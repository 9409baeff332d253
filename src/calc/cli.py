"""calc: evaluate arithmetic lines once (-e) or in an interactive session."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from .ast import format_tree
from .engine import evaluate_tree, format_value, parse_line
from .errors import CalcError
from .session import COMMANDS, Session, loop

BANNER = "Type 'exit' followed by pressing return/enter to exit the program."
PROMPT = "calc> "


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Evaluate arithmetic expressions")
    ap.add_argument(
        "-e",
        "--expr",
        default=None,
        help="Evaluate one expression and exit instead of starting a session",
    )
    ap.add_argument(
        "--tree",
        action="store_true",
        help="Print the parsed expression tree before each result",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log lexer/parser/evaluator activity at DEBUG level",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.expr is not None:
        return one_shot(args.expr, args.tree)

    session = Session(show_tree=args.tree)
    prompt = PromptSession(
        history=InMemoryHistory(),
        completer=WordCompleter(COMMANDS),
    )
    print(BANNER)
    loop(session, lambda: prompt.prompt(PROMPT))
    return 0


def one_shot(expr: str, show_tree: bool = False) -> int:
    try:
        node = parse_line(expr)
        if show_tree:
            print(format_tree(node))
        value = evaluate_tree(node, {})
    except CalcError as e:
        log_error(str(e))
        return 1
    print(format_value(value))
    return 0


def log_error(msg: str) -> None:
    print(f"[calc:error] {msg}")


if __name__ == "__main__":
    raise SystemExit(main())
