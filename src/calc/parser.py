"""Parser for calc lines.

Each expression level is read into a flat list that alternates operand and
operator, which is then collapsed into a tree one precedence tier at a
time. Every tier is reduced left to right, so ``2 ^ 3 ^ 2`` is
``(2 ^ 3) ^ 2``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .ast import CONSTANTS, Assign, Binary, Constant, Expr, Number, Var, format_tree
from .buffer import TokenBuffer
from .errors import CalcError
from .lexer import LexError, Token, TokenKind

logger = logging.getLogger(__name__)


class ParseError(CalcError):
    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.token = token


class ReservedNameError(ParseError):
    pass


OPERATORS = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.CARET: "^",
}

# Highest first. '-' and '+' share a tier so mixed runs stay left-to-right.
PRECEDENCE = [
    ("^",),
    ("/",),
    ("*",),
    ("-", "+"),
]

TERMINATORS = {TokenKind.EOF, TokenKind.ERROR, TokenKind.RPAREN}


@dataclass
class Operator:
    op: str
    token: Token


Item = Union[Expr, Operator]


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = tokens if isinstance(tokens, TokenBuffer) else TokenBuffer(tokens)

    def parse(self) -> Expr:
        root = self._line()
        tok = self.tokens.take()
        if tok.kind != TokenKind.EOF:
            raise ParseError(f"unexpected token {_describe(tok)}", tok)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("parsed %s", format_tree(root))
        return root

    # --- line ---
    def _line(self) -> Expr:
        first = self.tokens.take()
        if first.kind == TokenKind.VARIABLE:
            second = self.tokens.take()
            if second.kind == TokenKind.EQUAL:
                if first.lexeme in CONSTANTS:
                    raise ReservedNameError(
                        f"cannot use '{first.lexeme}' as a variable name, "
                        "'e' and 'pi' are reserved for constants",
                        first,
                    )
                value = self._expression()
                return Assign(first.lexeme, value, start=first.start, end=value.end)
            self.tokens.put(first, second)
        else:
            self.tokens.put(first)
        return self._expression()

    # --- expressions ---
    def _expression(self, nested: bool = False) -> Expr:
        return self._reduce(self._flat_list(nested))

    def _flat_list(self, nested: bool) -> List[Item]:
        items: List[Item] = []
        tok = self.tokens.peek()
        while tok.kind not in TERMINATORS:
            if len(items) % 2 == 0:
                items.append(self._operand())
            else:
                items.append(self._operator())
            tok = self.tokens.peek()

        if tok.kind == TokenKind.ERROR:
            raise LexError.from_token(tok)
        if not items:
            where = "parenthetical" if nested else "expression"
            raise ParseError(f"empty {where} before {_describe(tok)}", tok)
        last = items[-1]
        if isinstance(last, Operator):
            raise ParseError(
                f"expression ended in operator '{last.op}' at "
                f"[{last.token.start}:{last.token.end}), "
                "it must end in a number, variable or parenthetical",
                last.token,
            )
        return items

    def _operand(self) -> Expr:
        tok = self.tokens.take()
        if tok.kind == TokenKind.LPAREN:
            inner = self._expression(nested=True)
            closing = self.tokens.take()
            if closing.kind != TokenKind.RPAREN:
                raise ParseError(
                    f"missing closing parenthesis for '(' at [{tok.start}:{tok.end})",
                    closing,
                )
            return inner
        if tok.kind == TokenKind.VARIABLE:
            if tok.lexeme in CONSTANTS:
                return Constant(
                    tok.lexeme, CONSTANTS[tok.lexeme], start=tok.start, end=tok.end
                )
            return Var(tok.lexeme, start=tok.start, end=tok.end)
        if tok.kind == TokenKind.NUMBER:
            return Number(_to_float(tok), start=tok.start, end=tok.end)
        self.tokens.put(tok)
        raise ParseError(
            f"unexpected token {_describe(tok)}, "
            "expected a number, variable or '('",
            tok,
        )

    def _operator(self) -> Operator:
        tok = self.tokens.peek()
        op = OPERATORS.get(tok.kind)
        if op is None:
            raise ParseError(
                f"unexpected token {_describe(tok)}, "
                "expected one of + - * / ^",
                tok,
            )
        self.tokens.take()
        return Operator(op, tok)

    # --- precedence reduction ---
    def _reduce(self, items: List[Item]) -> Expr:
        for tier in PRECEDENCE:
            i = _find_op(items, 1, tier)
            while i != -1:
                left, op, right = items[i - 1], items[i], items[i + 1]
                node = Binary(op.op, left, right, start=left.start, end=right.end)
                items[i - 1 : i + 2] = [node]
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("reduced %s", format_tree(node))
                i = _find_op(items, i, tier)
        return items[0]


def _find_op(items: List[Item], start: int, tier: tuple) -> int:
    # Operators only ever sit at odd indices.
    for i in range(start, len(items), 2):
        item = items[i]
        if isinstance(item, Operator) and item.op in tier:
            return i
    return -1


def _to_float(tok: Token) -> float:
    try:
        return float(tok.lexeme)
    except ValueError:
        raise ParseError(
            f"invalid number literal '{tok.lexeme}' at [{tok.start}:{tok.end})", tok
        ) from None


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.EOF:
        return "end of input"
    return f"'{tok.lexeme}' at [{tok.start}:{tok.end})"


__all__ = ["Parser", "ParseError", "ReservedNameError", "Operator"]
