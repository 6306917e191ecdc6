"""
errors.py  –  failure kinds raised by the coding engine

Every error is raised where it is detected and never recovered from inside
the package; str(exc) is short enough to show to a user as-is.
"""

from __future__ import annotations


class CodingError(Exception):
    """Base class for every classified coding failure"""


class EmptyInput(CodingError):
    def __init__(self, message: str = "input contains no symbols"):
        super().__init__(message)


class InsufficientInput(CodingError):
    def __init__(self, count: int, minimum: int):
        self.count, self.minimum = count, minimum
        super().__init__(f"input has {count} symbols, at least {minimum} required")


class UnknownSymbol(CodingError):
    def __init__(self, symbol, position: int):
        self.symbol, self.position = symbol, position
        super().__init__(f"symbol {symbol!r} at position {position} has no code")


class AmbiguousCode(CodingError):
    def __init__(self, code: str, first, second):
        self.code, self.first, self.second = code, first, second
        super().__init__(f"code {code!r} is shared by {first!r} and {second!r}")


class InvalidCodeTable(CodingError):
    def __init__(self, symbol, code, message: str = None):
        self.symbol, self.code = symbol, code
        super().__init__(message or f"symbol {symbol!r} has invalid code {code!r}")


class UndecodableTail(CodingError):
    def __init__(self, tail: str, position: int):
        self.tail, self.position = tail, position
        super().__init__(f"bits {tail!r} starting at position {position} match no code")


class ConfigError(CodingError, ValueError):
    pass
