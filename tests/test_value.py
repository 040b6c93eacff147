import math

import pytest

from radixcalc.errors import CalcTypeError, CalcZeroDivisionError
from radixcalc.types.value import (
    INT_MAX,
    INT_MIN,
    Float,
    Integer,
    Undefined,
    UndefinedType,
    float_to_int,
    format_float,
    to_value,
    wrap_int,
)


def _same(result, expected):
    """Equal and of the same variant (Integer(1) == Float(1.0) on its own)."""
    return type(result) is type(expected) and result == expected


@pytest.mark.parametrize(
    "result,expected",
    [
        (Integer(2) + Integer(3), Integer(5)),
        (Integer(2) + Float(0.5), Float(2.5)),
        (Float(0.5) + Integer(2), Float(2.5)),
        (Integer(2) - Integer(5), Integer(-3)),
        (Integer(6) * Float(0.5), Float(3.0)),
        (Integer(7) / Integer(2), Integer(3)),
        (Integer(-7) / Integer(2), Integer(-3)),
        (Integer(7) / Float(2.0), Float(3.5)),
        (Integer(7) % Integer(3), Integer(1)),
        (Integer(-7) % Integer(2), Integer(-1)),
        (Integer(7) % Integer(-2), Integer(1)),
        (Float(-7.5) % Integer(2), Float(-1.5)),
        (Integer(INT_MAX) + Integer(1), Integer(INT_MIN)),
        (Integer(INT_MIN) - Integer(1), Integer(INT_MAX)),
        (Integer(INT_MIN) / Integer(-1), Integer(INT_MIN)),
    ],
)
def test_arithmetic(result, expected):
    assert _same(result, expected)


@pytest.mark.parametrize(
    "left,right",
    [
        (Undefined, Integer(1)),
        (Integer(1), Undefined),
        (Undefined, Float(1.0)),
        (Undefined, Undefined),
    ],
)
def test_undefined_absorbs_arithmetic(left, right):
    for result in (left + right, left - right, left * right, left / right,
                   left % right, left ** right, left // right):
        assert result is Undefined


def test_undefined_absorbs_division_by_zero():
    assert Undefined / Integer(0) is Undefined


@pytest.mark.parametrize(
    "left,right",
    [
        (Integer(1), Integer(0)),
        (Integer(0), Integer(0)),
    ],
)
def test_integer_division_by_zero(left, right):
    with pytest.raises(CalcZeroDivisionError):
        left / right
    with pytest.raises(CalcZeroDivisionError):
        left % right
    with pytest.raises(CalcZeroDivisionError):
        left // right


def test_float_division_by_zero_follows_ieee():
    assert (Float(1.0) / Float(0.0)).value == math.inf
    assert (Float(-1.0) / Integer(0)).value == -math.inf
    assert (Integer(1) / Float(-0.0)).value == -math.inf
    assert math.isnan((Float(0.0) / Float(0.0)).value)
    assert math.isnan((Float(5.5) % Float(0.0)).value)


@pytest.mark.parametrize(
    "result,expected",
    [
        (Integer(2) ** Integer(10), Integer(1024)),
        (Integer(-2) ** Integer(3), Integer(-8)),
        (Integer(2) ** Integer(0), Integer(1)),
        (Integer(2) ** Integer(64), Integer(0)),
        (Integer(2) ** Integer(-1), Float(0.5)),
        (Float(2.0) ** Integer(3), Float(8.0)),
        (Integer(4) ** Float(0.5), Float(2.0)),
        (Float(9.0) ** Float(0.5), Float(3.0)),
    ],
)
def test_pow(result, expected):
    assert _same(result, expected)


def test_float_pow_edge_cases():
    assert (Float(10.0) ** Integer(400)).value == math.inf
    assert (Float(-10.0) ** Integer(401)).value == -math.inf
    assert (Float(0.0) ** Integer(-1)).value == math.inf
    assert math.isnan((Float(-8.0) ** Float(1 / 3)).value)


@pytest.mark.parametrize(
    "result,expected",
    [
        (Integer(10) // Integer(3), Integer(3)),
        (Integer(-7) // Integer(2), Integer(-4)),
        (Float(-7.0) // Integer(2), Integer(-4)),
        (Float(7.5) // Float(2.0), Integer(3)),
        (Integer(7) // Float(0.5), Integer(14)),
    ],
)
def test_floor_division(result, expected):
    assert _same(result, expected)


def test_floor_division_saturates():
    assert Float(1.0) // Float(0.0) == Integer(INT_MAX)
    assert Float(-1.0) // Float(0.0) == Integer(INT_MIN)
    assert Float(0.0) // Float(0.0) == Integer(0)
    assert Float(1e300).floor() == Integer(INT_MAX)


@pytest.mark.parametrize(
    "result,expected",
    [
        (Integer(5) & Integer(3), Integer(1)),
        (Integer(5) | Integer(2), Integer(7)),
        (Integer(5) ^ Integer(1), Integer(4)),
        (Integer(1) << Integer(4), Integer(16)),
        (Integer(1) << Integer(63), Integer(INT_MIN)),
        (Integer(1) << Integer(64), Integer(1)),
        (Integer(256) >> Integer(4), Integer(16)),
        (Integer(-16) >> Integer(2), Integer(-4)),
        (~Integer(5), Integer(-6)),
        (~Integer(0), Integer(-1)),
    ],
)
def test_bitwise(result, expected):
    assert _same(result, expected)


@pytest.mark.parametrize(
    "left,right",
    [
        (Float(5.0), Integer(3)),
        (Integer(5), Float(3.0)),
        (Float(5.0), Float(3.0)),
        (Float(5.0), Undefined),
        (Undefined, Float(5.0)),
    ],
)
def test_bitwise_rejects_floats(left, right):
    for apply in (lambda: left & right, lambda: left | right, lambda: left ^ right,
                  lambda: left << right, lambda: left >> right):
        with pytest.raises(CalcTypeError, match="floating-point"):
            apply()


def test_bitwise_with_undefined_is_undefined():
    assert (Undefined & Integer(1)) is Undefined
    assert (Integer(1) | Undefined) is Undefined
    assert (Undefined << Undefined) is Undefined


@pytest.mark.parametrize("value", [Float(1.0), Undefined])
def test_invert_requires_integer(value):
    with pytest.raises(CalcTypeError, match="only allowed for integer values"):
        ~value


def test_negate():
    assert _same(-Integer(5), Integer(-5))
    assert _same(-Float(0.5), Float(-0.5))
    assert -Undefined is Undefined
    assert -Integer(INT_MIN) == Integer(INT_MIN)


def test_equality():
    assert Undefined == Undefined
    assert Undefined != Integer(0)
    assert Float(0.0) != Undefined
    assert Integer(1) == Float(1.0)
    assert Integer(1) != Float(1.5)
    assert Float(math.nan) != Float(math.nan)
    assert hash(Integer(1)) == hash(Float(1.0))


def test_ordering():
    assert Integer(1) < Float(1.5)
    assert Float(2.0) >= Integer(2)
    assert Integer(3) > Integer(2)
    # integers are ordered through doubles, so neighbours above 2**53 tie
    assert not (Integer(2**53 + 1) > Integer(2**53))
    assert Integer(2**53 + 1) >= Integer(2**53)
    assert not (Integer(INT_MAX) > Integer(INT_MAX - 1))
    # undefined is unordered for relational operators
    assert not (Undefined < Integer(1))
    assert not (Undefined > Integer(1))
    assert not (Integer(1) <= Undefined)
    assert not (Undefined >= Undefined)


@pytest.mark.parametrize(
    "left,right,expected",
    [
        (Integer(1), Integer(2), -1),
        (Integer(2), Float(2.0), 0),
        (Float(3.0), Integer(2), 1),
        (Undefined, Integer(1), 1),
        (Integer(1), Undefined, 1),
        (Undefined, Undefined, 1),
        (Float(math.nan), Float(0.0), 1),
        (Integer(2**53 + 1), Integer(2**53), 0),
        (Integer(2**53), Integer(2**53 + 2), -1),
    ],
)
def test_compare_three_way(left, right, expected):
    assert left.compare(right) == expected


def test_logical_not():
    assert _same(Integer(0).logical_not(), Integer(1))
    assert _same(Float(0.5).logical_not(), Integer(0))
    assert _same(Float(-0.0).logical_not(), Integer(1))
    assert _same(Undefined.logical_not(), Integer(1))


def test_rendering():
    assert str(Undefined) == "undefined"
    assert str(Integer(-5)) == "-5"
    assert str(Float(0.5)) == "0.5"
    assert str(Float(-0.0)) == "-0.0"
    assert repr(Integer(3)) == "Integer(3)"


@pytest.mark.parametrize(
    "f,expected",
    [
        (2.0 ** 60, "1152921504606847000.0"),
        (1e16, "10000000000000000.0"),
        (1e-7, "0.0000001"),
        (-2.5e-5, "-0.000025"),
        (0.1, "0.1"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
    ],
)
def test_format_float_is_positional(f, expected):
    assert format_float(f) == expected
    assert str(Float(f)) == expected


def test_conversions():
    assert _same(to_value(5), Integer(5))
    assert _same(to_value(2.5), Float(2.5))
    assert to_value(None) is Undefined
    assert to_value(Undefined) is Undefined
    assert isinstance(Undefined, UndefinedType)
    with pytest.raises(TypeError):
        to_value("five")


def test_helpers():
    assert wrap_int(1 << 63) == INT_MIN
    assert wrap_int(-1) == -1
    assert float_to_int(math.nan) == 0
    assert float_to_int(math.inf) == INT_MAX
    assert float_to_int(-math.inf) == INT_MIN
    assert float_to_int(-3.0) == -3


def test_integer_payload_wraps_on_construction():
    assert Integer(1 << 64).value == 0
    assert Integer(INT_MAX + 2).value == INT_MIN + 1
