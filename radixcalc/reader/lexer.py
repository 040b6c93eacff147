"""
  Calculator tokenizer

- Character-at-a-time state machine (Default, Number, Identifier, Operator)
- One character of lookahead disambiguates multi-character operators
- Number literals:

    - 123, 1_000       -> IntegerLiteral
    - 1.5, 0.25        -> FloatLiteral (decimal base only)
    - 0x1A, 0b101, 0o17, 017
                       -> IntegerLiteral, parsed as unsigned 64-bit then reinterpreted as signed

- The first error aborts tokenizing; no partial token list is returned.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from radixcalc.errors import CalcSyntaxError
from radixcalc.types.value import INT_BITS, INT_MAX, wrap_int
from radixcalc.reader.token import (
    BASE_PREFIX_CHARS,
    OPERATOR_CHARS,
    UNARY_CHARS,
    Assignment,
    BinaryOp,
    BinaryOperator,
    CloseParen,
    FloatLiteral,
    Identifier,
    IntegerLiteral,
    NumberBase,
    OpenParen,
    Token,
    UnaryOp,
    UnaryOperator,
)

logger = logging.getLogger(__name__)

_UNARY_OPS = {
    "-": UnaryOp.NEGATE,
    "!": UnaryOp.NOT,
    "~": UnaryOp.INVERT,
}

# Operators that never combine with the following character
_SINGLE_CHAR_OPS = {
    "+": BinaryOp.ADD,
    "-": BinaryOp.SUB,
    "%": BinaryOp.MOD,
    "&": BinaryOp.BIT_AND,
    "|": BinaryOp.BIT_OR,
    "^": BinaryOp.BIT_XOR,
}

# first char -> ((second char, operator), ...), fallback operator
_DOUBLE_CHAR_OPS = {
    "*": ((("*", BinaryOp.EXP),), BinaryOp.MUL),
    "/": ((("/", BinaryOp.FLOOR_DIV),), BinaryOp.DIV),
    "<": ((("<", BinaryOp.SHIFT_LEFT), ("=", BinaryOp.LESS_EQ)), BinaryOp.LESS),
    ">": (((">", BinaryOp.SHIFT_RIGHT), ("=", BinaryOp.GREATER_EQ)), BinaryOp.GREATER),
}


class LexState(Enum):
    DEFAULT = auto()
    NUMBER = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()


def _ends_literal(c: str) -> bool:
    return c.isspace() or c in OPERATOR_CHARS or c in "()!~"


def _parse_decimal_int(text: str) -> int:
    value = int(text, 10)
    if value > INT_MAX:
        raise ValueError(f"number too large to fit in {INT_BITS} bits")
    return value


def _parse_radix_int(text: str, base: NumberBase) -> int:
    value = int(text, int(base))
    if value >> INT_BITS:
        raise ValueError(f"number too large to fit in {INT_BITS} bits")
    return wrap_int(value)


class Tokenizer:
    """Single-use scanner; create one per source string."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.state = LexState.DEFAULT
        self.tokens: list[Token] = []
        # scratch for the literal being scanned
        self.buffer: list[str] = []
        self.start = 0
        self.found_decimal = False
        self.base = NumberBase.DECIMAL

    def peek(self, offset: int = 0) -> Optional[str]:
        i = self.pos + offset
        if i < len(self.source):
            return self.source[i]
        return None

    def run(self) -> list[Token]:
        n = len(self.source)
        while self.pos < n:
            c = self.source[self.pos]
            match self.state:
                case LexState.DEFAULT:
                    self._scan_default(c)
                case LexState.NUMBER:
                    self._scan_number(c)
                case LexState.IDENTIFIER:
                    self._scan_identifier(c)
                case LexState.OPERATOR:
                    self._scan_operator(c)

        # End of input terminates any pending literal
        if self.state is LexState.NUMBER:
            self._emit_number()
        elif self.state is LexState.IDENTIFIER:
            self._emit_identifier()

        logger.debug("Tokens: %s", self.tokens)
        return self.tokens

    # ----------------------
    # States
    # ----------------------
    def _scan_default(self, c: str) -> None:
        if c.isspace():
            self.pos += 1
        elif c.isalpha() or c == "_":
            self._begin_literal()
            self.state = LexState.IDENTIFIER
        elif "0" <= c <= "9":
            self._begin_number(c)
        elif c in UNARY_CHARS and self._is_unary(c):
            self._emit_unary(c)
        elif c in OPERATOR_CHARS:
            self.state = LexState.OPERATOR
        elif c == "(":
            self.tokens.append(OpenParen())
            self.pos += 1
        elif c == ")":
            self.tokens.append(CloseParen())
            self.pos += 1
        else:
            raise CalcSyntaxError(f"unexpected character '{c}'", c)

    def _scan_number(self, c: str) -> None:
        if c == "_":
            self.pos += 1
        elif c == "." and self.base is NumberBase.DECIMAL:
            if self.found_decimal:
                raw = self.source[self.start:self.pos + 1]
                raise CalcSyntaxError(f'invalid number literal "{raw}"', raw)
            self.buffer.append(c)
            self.found_decimal = True
            self.pos += 1
        elif self.base.is_digit(c):
            self.buffer.append(c)
            self.pos += 1
        elif _ends_literal(c):
            self._emit_number()
            self.state = LexState.DEFAULT
        else:
            raw = self.source[self.start:self.pos + 1]
            raise CalcSyntaxError(f'invalid number literal "{raw}"', raw)

    def _scan_identifier(self, c: str) -> None:
        if c.isalnum() or c == "_":
            self.buffer.append(c)
            self.pos += 1
        elif _ends_literal(c):
            self._emit_identifier()
            self.state = LexState.DEFAULT
        else:
            raise CalcSyntaxError(f"unexpected character '{c}'", c)

    def _scan_operator(self, c: str) -> None:
        nxt = self.peek(1)
        token: Token
        width = 1
        if c in _SINGLE_CHAR_OPS:
            token = BinaryOperator(_SINGLE_CHAR_OPS[c])
        elif c in _DOUBLE_CHAR_OPS:
            pairs, fallback = _DOUBLE_CHAR_OPS[c]
            token = BinaryOperator(fallback)
            for second, op in pairs:
                if nxt == second:
                    token = BinaryOperator(op)
                    width = 2
                    break
        elif c == "=":
            if nxt == "=":
                token = BinaryOperator(BinaryOp.EQUAL)
                width = 2
            else:
                token = Assignment()
        else:
            raise CalcSyntaxError(f"invalid operator '{c}'", c)
        self.tokens.append(token)
        self.pos += width
        self.state = LexState.DEFAULT

    # ----------------------
    # Helpers
    # ----------------------
    def _begin_literal(self) -> None:
        self.buffer.clear()
        self.start = self.pos
        self.found_decimal = False
        self.base = NumberBase.DECIMAL

    def _begin_number(self, c: str) -> None:
        self._begin_literal()
        if c == "0":
            nxt = self.peek(1)
            if nxt is not None and nxt.lower() in BASE_PREFIX_CHARS:
                self.base = BASE_PREFIX_CHARS[nxt.lower()]
                self.pos += 2
            elif nxt is not None and "0" <= nxt <= "9":
                # leading zero followed by a digit: octal, e.g. 017
                self.base = NumberBase.OCTAL
                self.pos += 1
        self.state = LexState.NUMBER

    def _is_unary(self, c: str) -> bool:
        if c != "-":
            return True
        return not self.tokens or not self.tokens[-1].ends_operand()

    def _emit_unary(self, c: str) -> None:
        if c == "!" and self.peek(1) == "=":
            self.tokens.append(BinaryOperator(BinaryOp.NOT_EQUAL))
            self.pos += 2
            return
        self.tokens.append(UnaryOperator(_UNARY_OPS[c]))
        self.pos += 1

    def _emit_number(self) -> None:
        text = "".join(self.buffer)
        raw = self.source[self.start:self.pos]
        try:
            if self.base is not NumberBase.DECIMAL:
                token: Token = IntegerLiteral(_parse_radix_int(text, self.base))
            elif self.found_decimal:
                token = FloatLiteral(float(text))
            else:
                token = IntegerLiteral(_parse_decimal_int(text))
        except ValueError as ex:
            raise CalcSyntaxError(f'failed to parse number literal "{raw}": {ex}', raw) from None
        self.tokens.append(token)

    def _emit_identifier(self) -> None:
        self.tokens.append(Identifier("".join(self.buffer)))


def tokenize(source: str) -> list[Token]:
    """Convert source text into a list of Tokens, raising CalcSyntaxError on the first error."""
    return Tokenizer(source).run()


def is_identifier(name: str) -> bool:
    """True if `name` would tokenize as a single Identifier."""
    if not name or not (name[0].isalpha() or name[0] == "_"):
        return False
    return all(c.isalnum() or c == "_" for c in name)
