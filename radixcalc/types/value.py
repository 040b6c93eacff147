"""Numeric values for the calculator.

A Value is one of three variants:

    - Undefined  -> no defined numeric value (absorbing for arithmetic)
    - Integer    -> 64-bit signed integer, results wrap on overflow
    - Float      -> IEEE-754 double

Arithmetic, comparison and coercion rules live on the Value base class so that
the evaluator can apply Python operators directly (`left + right`, `left < right`).
Mixed Integer/Float pairs promote the Integer side to float.
"""

from __future__ import annotations

import math
from decimal import Decimal
from dataclasses import dataclass
from typing import Any, Callable

from radixcalc.errors import CalcTypeError, CalcZeroDivisionError

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1
_INT_MOD = 1 << INT_BITS
_SHIFT_MASK = INT_BITS - 1


def wrap_int(i: int) -> int:
    """Reinterpret an unbounded Python int as a two's complement 64-bit value."""
    return ((i - INT_MIN) % _INT_MOD) + INT_MIN


def float_to_int(f: float) -> int:
    """Saturating float -> 64-bit conversion (NaN becomes 0)."""
    if math.isnan(f):
        return 0
    if f >= -float(INT_MIN):
        return INT_MAX
    if f <= float(INT_MIN):
        return INT_MIN
    return int(f)


def format_float(f: float) -> str:
    """Positional rendering (no exponent) that reads back as the same float literal.

    Non-finite values keep Python's 'inf', '-inf' and 'nan'.
    """
    if not math.isfinite(f):
        return repr(f)
    text = format(Decimal(repr(f)), "f")
    if "." not in text:
        text += ".0"
    return text


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


# ----------------------------
# Native operations
# ----------------------------
def _int_div(left: int, right: int) -> int:
    if right == 0:
        raise CalcZeroDivisionError("integer division by zero", "/")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _int_mod(left: int, right: int) -> int:
    if right == 0:
        raise CalcZeroDivisionError("integer modulo by zero", "%")
    return left - right * _int_div(left, right)


def _float_div(left: float, right: float) -> float:
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _float_mod(left: float, right: float) -> float:
    if right == 0.0 or math.isinf(left) or math.isnan(left) or math.isnan(right):
        return math.nan
    return math.fmod(left, right)


def _float_pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # zero to a negative power, or a negative base to a fractional power
        if base == 0.0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _shift_left(left: int, right: int) -> int:
    return left << (right & _SHIFT_MASK)


def _shift_right(left: int, right: int) -> int:
    return left >> (right & _SHIFT_MASK)


class Value:
    """Base class of the three numeric variants."""

    __slots__ = ()

    # -- coercions ---------------------------------------------------------

    def as_float(self) -> float:
        """Float coercion used by logical not; Undefined coerces to 0.0."""
        match self:
            case UndefinedType():
                return 0.0
            case Integer(value=i):
                return float(i)
            case Float(value=f):
                return f
        raise TypeError(f"Unknown value type: {type(self).__name__}")

    def ordering_float(self) -> float:
        """Float coercion used for ordering; Undefined coerces to NaN."""
        if isinstance(self, UndefinedType):
            return math.nan
        return self.as_float()

    def is_undefined(self) -> bool:
        return isinstance(self, UndefinedType)

    def floor(self) -> Value:
        match self:
            case UndefinedType():
                return Undefined
            case Integer():
                return self
            case Float(value=f):
                if math.isfinite(f):
                    return Integer(float_to_int(math.floor(f)))
                return Integer(float_to_int(f))
        raise TypeError(f"Unknown value type: {type(self).__name__}")

    # -- unary -------------------------------------------------------------

    def __neg__(self) -> Value:
        match self:
            case UndefinedType():
                return Undefined
            case Integer(value=i):
                return Integer(-i)
            case Float(value=f):
                return Float(-f)
        raise TypeError(f"Unknown value type: {type(self).__name__}")

    def __invert__(self) -> Value:
        if isinstance(self, Integer):
            return Integer(~self.value)
        raise CalcTypeError("bitwise operations are only allowed for integer values", "~")

    def logical_not(self) -> Value:
        return Integer(1 if self.as_float() == 0.0 else 0)

    # -- arithmetic --------------------------------------------------------

    def _arith(
        self,
        other: Any,
        int_op: Callable[[int, int], int],
        float_op: Callable[[float, float], float],
    ) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        match self, other:
            case (UndefinedType(), _) | (_, UndefinedType()):
                return Undefined
            case Integer(value=l), Integer(value=r):
                return Integer(int_op(l, r))
            case Integer(value=l), Float(value=r):
                return Float(float_op(float(l), r))
            case Float(value=l), Integer(value=r):
                return Float(float_op(l, float(r)))
            case Float(value=l), Float(value=r):
                return Float(float_op(l, r))
        raise TypeError(f"Unknown value types: {type(self).__name__}, {type(other).__name__}")

    def __add__(self, other: Value) -> Value:
        return self._arith(other, lambda a, b: a + b, lambda a, b: a + b)

    def __sub__(self, other: Value) -> Value:
        return self._arith(other, lambda a, b: a - b, lambda a, b: a - b)

    def __mul__(self, other: Value) -> Value:
        return self._arith(other, lambda a, b: a * b, lambda a, b: a * b)

    def __truediv__(self, other: Value) -> Value:
        return self._arith(other, _int_div, _float_div)

    def __mod__(self, other: Value) -> Value:
        return self._arith(other, _int_mod, _float_mod)

    def __pow__(self, other: Value) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        match self, other:
            case (UndefinedType(), _) | (_, UndefinedType()):
                return Undefined
            case Integer(value=l), Integer(value=r):
                if r < 0:
                    return Float(_float_pow(float(l), float(r)))
                return Integer(pow(l, r, _INT_MOD))
            case _:
                return Float(_float_pow(self.as_float(), other.as_float()))

    def __floordiv__(self, other: Value) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        if isinstance(self, Integer) and isinstance(other, Integer):
            if other.value == 0:
                raise CalcZeroDivisionError("integer division by zero", "//")
            return Integer(self.value // other.value)
        return (self / other).floor()

    # -- bitwise -----------------------------------------------------------

    def _bitwise(self, other: Any, op: Callable[[int, int], int], symbol: str) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        match self, other:
            case (Float(), _) | (_, Float()):
                raise CalcTypeError(
                    f"failed to use operator `{symbol}`: "
                    "bitwise operators are not supported between floating-point values",
                    symbol,
                )
            case Integer(value=l), Integer(value=r):
                return Integer(op(l, r))
            case _:
                return Undefined

    def __and__(self, other: Value) -> Value:
        return self._bitwise(other, lambda a, b: a & b, "&")

    def __or__(self, other: Value) -> Value:
        return self._bitwise(other, lambda a, b: a | b, "|")

    def __xor__(self, other: Value) -> Value:
        return self._bitwise(other, lambda a, b: a ^ b, "^")

    def __lshift__(self, other: Value) -> Value:
        return self._bitwise(other, _shift_left, "<<")

    def __rshift__(self, other: Value) -> Value:
        return self._bitwise(other, _shift_right, ">>")

    # -- comparison --------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        match self, other:
            case UndefinedType(), UndefinedType():
                return True
            case (UndefinedType(), _) | (_, UndefinedType()):
                return False
            case Integer(value=l), Integer(value=r):
                return l == r
            case _:
                return self.as_float() == other.as_float()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        if isinstance(self, UndefinedType):
            return hash(UndefinedType)
        return hash(self.value)

    def _ordered(self, other: Value) -> tuple[float, float]:
        # ordering always goes through doubles, Integer pairs included
        return self.ordering_float(), other.ordering_float()

    def compare(self, other: Value) -> int:
        """Three-way classification: -1 less, 0 equal, 1 for anything else.

        Any NaN involvement (including an Undefined operand) classifies as 1.
        """
        l, r = self._ordered(other)
        if l < r:
            return -1
        if l == r:
            return 0
        return 1

    # Relational operators are unordered (always False) when NaN or Undefined is involved.
    def __lt__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        l, r = self._ordered(other)
        return l < r

    def __le__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        l, r = self._ordered(other)
        return l <= r

    def __gt__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        l, r = self._ordered(other)
        return l > r

    def __ge__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        l, r = self._ordered(other)
        return l >= r


class UndefinedType(Value):
    __slots__ = ()

    def __repr__(self):
        return "Undefined"

    def __str__(self):
        return "undefined"

    def __bool__(self):
        return False


Undefined = UndefinedType()


@dataclass(frozen=True, eq=False, repr=False)
class Integer(Value):
    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", wrap_int(int(self.value)))

    def __repr__(self):
        return f"Integer({self.value})"

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True, eq=False, repr=False)
class Float(Value):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __repr__(self):
        return f"Float({self.value!r})"

    def __str__(self):
        return format_float(self.value)


def to_value(obj: Any) -> Value:
    """Convert a plain Python number (or None) into a Value."""
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Undefined
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, float):
        return Float(obj)
    raise TypeError(f"Cannot convert {type(obj).__name__} to a calculator value")
