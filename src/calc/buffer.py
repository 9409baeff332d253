"""Look-ahead buffer between the lexer's token stream and the parser."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, Iterator, Optional

from .lexer import Token

logger = logging.getLogger(__name__)


class TokenBuffer:
    """Wraps a token iterator with peek/take and in-order push-back.

    Pushed-back tokens are always served before anything still in the
    stream. Once the terminal token has been pulled, the stream is never
    touched again and further pulls repeat that terminal token.
    """

    def __init__(self, stream: Iterable[Token]):
        self._stream: Iterator[Token] = iter(stream)
        self._pending: Deque[Token] = deque()
        self._terminal: Optional[Token] = None

    def peek(self) -> Token:
        if not self._pending:
            self._pending.append(self._pull())
        return self._pending[0]

    def take(self) -> Token:
        if self._pending:
            return self._pending.popleft()
        return self._pull()

    def put(self, *tokens: Token) -> "TokenBuffer":
        self._pending.extendleft(reversed(tokens))
        return self

    def _pull(self) -> Token:
        if self._terminal is not None:
            return self._terminal
        tok = next(self._stream)
        logger.debug("token %s", tok)
        if tok.terminal:
            self._terminal = tok
        return tok


__all__ = ["TokenBuffer"]
