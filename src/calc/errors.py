"""Base exception shared by every calc pipeline stage."""


class CalcError(Exception):
    pass


__all__ = ["CalcError"]
