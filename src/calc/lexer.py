"""
calc lexer.

Scans a single line into NUMBER / VARIABLE / operator tokens. Tokens are
produced lazily so the parser pulls them one at a time; the stream always
ends in exactly one terminal token (EOF or ERROR).
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List

from .errors import CalcError


class TokenKind(Enum):
    # Single-char operators / punctuation
    LPAREN = auto()
    RPAREN = auto()
    EQUAL = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Literals / identifiers
    NUMBER = auto()
    VARIABLE = auto()

    # Terminals
    EOF = auto()
    ERROR = auto()


SINGLE_CHAR = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.EQUAL,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
}

NUMERIC = set(string.digits + ".")
LETTERS = set(string.ascii_letters)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    start: int
    end: int

    @property
    def terminal(self) -> bool:
        return self.kind in (TokenKind.EOF, TokenKind.ERROR)

    def __str__(self) -> str:
        if self.kind == TokenKind.EOF:
            return "EOF"
        if self.kind == TokenKind.ERROR:
            return f"invalid sequence '{self.lexeme}' at [{self.start}:{self.end})"
        return f"{self.lexeme!r} ({self.kind.name})"


class LexError(CalcError):
    def __init__(self, message: str, start: int, end: int, text: str):
        super().__init__(message)
        self.start = start
        self.end = end
        self.text = text

    @classmethod
    def from_token(cls, tok: Token) -> "LexError":
        return cls(
            f"encountered an {tok} in the input",
            tok.start,
            tok.end,
            tok.lexeme,
        )


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.start = 0

    def scan(self) -> List[Token]:
        return list(self.tokens())

    def tokens(self) -> Iterator[Token]:
        while not self._is_at_end():
            self.start = self.pos
            c = self._peek()

            if c.isspace():
                self._advance()
                continue

            kind = SINGLE_CHAR.get(c)
            if kind is not None:
                self._advance()
                yield self._make(kind)
                continue

            if c in NUMERIC:
                self._run(NUMERIC)
                yield self._make(TokenKind.NUMBER)
                continue

            if c in LETTERS:
                self._run(LETTERS)
                yield self._make(TokenKind.VARIABLE)
                continue

            # Nothing valid starts here: report the whole bad run and stop.
            self._invalid_run()
            yield self._make(TokenKind.ERROR)
            return

        self.start = self.pos
        yield self._make(TokenKind.EOF)

    def _make(self, kind: TokenKind) -> Token:
        return Token(kind, self.source[self.start : self.pos], self.start, self.pos)

    def _is_at_end(self) -> bool:
        return self.pos >= self.length

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.pos]

    def _run(self, allowed: set) -> None:
        while not self._is_at_end() and self._peek() in allowed:
            self._advance()

    def _invalid_run(self) -> None:
        while not self._is_at_end() and not _starts_lexeme(self._peek()):
            self._advance()


def _starts_lexeme(c: str) -> bool:
    return c.isspace() or c in SINGLE_CHAR or c in NUMERIC or c in LETTERS


__all__ = ["Lexer", "Token", "TokenKind", "LexError", "SINGLE_CHAR"]
