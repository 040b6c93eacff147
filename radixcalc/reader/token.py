"""Lexical units produced by the tokenizer.

Tokens are small frozen dataclasses, one class per variant, so that consumers can
dispatch with `match`. Operator kinds are enums whose values are their lexemes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from radixcalc.types.value import Float, Integer, Value, format_float

# Characters that start (or continue) a binary operator
OPERATOR_CHARS = "+-*/%&|^<>="
UNARY_CHARS = "-!~"


class UnaryOp(Enum):
    NEGATE = "-"
    NOT = "!"
    INVERT = "~"

    def __str__(self):
        return self.value


class BinaryOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    EXP = "**"
    FLOOR_DIV = "//"
    BIT_AND = "&"
    BIT_OR = "|"
    BIT_XOR = "^"
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"
    LESS = "<"
    LESS_EQ = "<="
    GREATER = ">"
    GREATER_EQ = ">="
    EQUAL = "=="
    NOT_EQUAL = "!="

    def __str__(self):
        return self.value

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]

    @property
    def right_associative(self) -> bool:
        return self is BinaryOp.EXP


# Higher binds tighter
PRECEDENCE: dict[BinaryOp, int] = {
    BinaryOp.BIT_OR: 0,
    BinaryOp.BIT_XOR: 1,
    BinaryOp.BIT_AND: 2,
    BinaryOp.LESS: 3,
    BinaryOp.LESS_EQ: 3,
    BinaryOp.GREATER: 3,
    BinaryOp.GREATER_EQ: 3,
    BinaryOp.EQUAL: 3,
    BinaryOp.NOT_EQUAL: 3,
    BinaryOp.SHIFT_LEFT: 4,
    BinaryOp.SHIFT_RIGHT: 4,
    BinaryOp.ADD: 5,
    BinaryOp.SUB: 5,
    BinaryOp.MUL: 6,
    BinaryOp.DIV: 6,
    BinaryOp.MOD: 6,
    BinaryOp.FLOOR_DIV: 6,
    BinaryOp.EXP: 7,
}


class NumberBase(IntEnum):
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16

    def is_digit(self, c: str) -> bool:
        match self:
            case NumberBase.DECIMAL:
                return "0" <= c <= "9"
            case NumberBase.BINARY:
                return c in "01"
            case NumberBase.OCTAL:
                return "0" <= c <= "7"
            case NumberBase.HEX:
                return "0" <= c <= "9" or "a" <= c.lower() <= "f"

    @property
    def prefix(self) -> str:
        return _BASE_PREFIXES[self]

    @classmethod
    def from_name(cls, name: str) -> NumberBase:
        """Resolve 'dec', 'hex', 'oct', 'bin' (or the full enum name)."""
        key = name.strip().lower()
        for base, aliases in _BASE_NAMES.items():
            if key in aliases:
                return base
        raise ValueError(f"Unknown number base {name!r}")


_BASE_PREFIXES = {
    NumberBase.BINARY: "0b",
    NumberBase.OCTAL: "0o",
    NumberBase.DECIMAL: "",
    NumberBase.HEX: "0x",
}

_BASE_NAMES = {
    NumberBase.BINARY: ("bin", "binary", "2"),
    NumberBase.OCTAL: ("oct", "octal", "8"),
    NumberBase.DECIMAL: ("dec", "decimal", "10"),
    NumberBase.HEX: ("hex", "hexadecimal", "16"),
}

# A literal prefix character after a leading zero selects the base
BASE_PREFIX_CHARS = {
    "x": NumberBase.HEX,
    "b": NumberBase.BINARY,
    "o": NumberBase.OCTAL,
}


# ----------------------------
# Token variants
# ----------------------------
@dataclass(frozen=True)
class Token:
    def is_operator(self) -> bool:
        return isinstance(self, (UnaryOperator, BinaryOperator))

    def ends_operand(self) -> bool:
        """True if a value can end at this token (so a following '-' is binary)."""
        return isinstance(self, (IntegerLiteral, FloatLiteral, Identifier, CloseParen))


@dataclass(frozen=True)
class Invalid(Token):
    def __str__(self):
        return "<invalid>"


@dataclass(frozen=True)
class IntegerLiteral(Token):
    value: int

    def to_value(self) -> Value:
        return Integer(self.value)

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class FloatLiteral(Token):
    value: float

    def to_value(self) -> Value:
        return Float(self.value)

    def __str__(self):
        return format_float(self.value)


@dataclass(frozen=True)
class Identifier(Token):
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class UnaryOperator(Token):
    op: UnaryOp

    def __str__(self):
        return str(self.op)


@dataclass(frozen=True)
class BinaryOperator(Token):
    op: BinaryOp

    @property
    def precedence(self) -> int:
        return self.op.precedence

    def __str__(self):
        return str(self.op)


@dataclass(frozen=True)
class Assignment(Token):
    def __str__(self):
        return "="


@dataclass(frozen=True)
class OpenParen(Token):
    def __str__(self):
        return "("


@dataclass(frozen=True)
class CloseParen(Token):
    def __str__(self):
        return ")"
