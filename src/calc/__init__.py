from .errors import CalcError
from .lexer import Lexer, Token, TokenKind, LexError
from .buffer import TokenBuffer
from .parser import Parser, ParseError, ReservedNameError
from .evaluator import Evaluator, UndefinedVariableError
from .engine import evaluate, parse_line, run_line
from .session import Session

__all__ = [
    "CalcError",
    "Lexer",
    "Token",
    "TokenKind",
    "LexError",
    "TokenBuffer",
    "Parser",
    "ParseError",
    "ReservedNameError",
    "Evaluator",
    "UndefinedVariableError",
    "evaluate",
    "parse_line",
    "run_line",
    "Session",
]
