from __future__ import annotations

from typing import Any


class CalcError(Exception):
    """ Base class for all calculator errors"""

    def __init__(self, message: str, context: Any = None):
        super().__init__(message)
        # offending character, literal text, operator or variable name
        self.context = context


class CalcSyntaxError(CalcError):
    """ Raised when the source text cannot be tokenized"""


class CalcStructureError(CalcError):
    """ Raised when parentheses do not match"""


class CalcEvalError(CalcError):
    """ Base class for errors raised while evaluating an ordered token sequence"""


class CalcUnboundSymbol(CalcEvalError):
    """ Raised when a variable is used before it is bound"""


class CalcArityError(CalcEvalError):
    """ Raised when an operator does not find enough values, or the result stack is unbalanced"""


class CalcTypeError(CalcEvalError):
    """ Raised when a bitwise operator is applied to a non-integer value"""


class CalcZeroDivisionError(CalcEvalError):
    """ Raised when an integer is divided by zero"""
