"""Simple CLI to lex a calc expression and print its tokens."""

import argparse

from .lexer import Lexer, TokenKind


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Lex a calc expression")
    parser.add_argument("expr", help="Expression to tokenize, e.g. 'x = 2 ^ 3'")
    args = parser.parse_args(argv)

    status = 0
    for t in Lexer(args.expr).tokens():
        print(f"{t.kind.name}\t{t.lexeme!r}\t[{t.start}:{t.end})")
        if t.kind == TokenKind.ERROR:
            status = 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())
