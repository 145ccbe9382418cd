"""
Library exceptions.

Every exception carries a human-readable ``message`` and a ``details``
dict describing the offending arguments. Each class also derives from the
builtin exception a caller would expect (``ValueError`` or
``ZeroDivisionError``), so plain ``except ArithmeticError`` keeps working.
"""

from typing import Any, Dict, Optional


class DQError(Exception):
    """Base exception for dq errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(DQError, ValueError):
    """Raised when an argument has the wrong type or shape"""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        details = {"argument": argument, "value": value} if argument else {}
        super().__init__(message, details)


class UndefinedResultError(DQError, ZeroDivisionError):
    """Raised when an operation would divide by zero"""


class VerticalLineError(UndefinedResultError):
    """Raised when two points share an x-coordinate"""

    def __init__(self, x: float):
        super().__init__(
            f"Points share the x-coordinate {x}; the line through them is vertical",
            details={"x": x},
        )


class ParallelLinesError(UndefinedResultError):
    """Raised when two lines have the same gradient"""

    def __init__(self, gradient: float):
        super().__init__(
            f"Lines share the gradient {gradient} and do not have a single intercept",
            details={"gradient": gradient},
        )


class DegenerateRangeError(DQError, ValueError):
    """Raised when a random parameter range is empty"""

    def __init__(self, message: str, **details: Any):
        super().__init__(message, details)
