"""Stack evaluator for ordered (postfix) token lists.

Operators are applied through dispatch tables keyed by operator kind; the
numeric rules themselves live on the Value types.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable, Iterable, Mapping

from radixcalc.errors import (
    CalcArityError,
    CalcStructureError,
    CalcSyntaxError,
    CalcUnboundSymbol,
)
from radixcalc.reader.token import (
    Assignment,
    BinaryOp,
    BinaryOperator,
    CloseParen,
    FloatLiteral,
    Identifier,
    IntegerLiteral,
    Invalid,
    OpenParen,
    Token,
    UnaryOp,
    UnaryOperator,
)
from radixcalc.types.stack import Stack
from radixcalc.types.value import Integer, Value, to_value

logger = logging.getLogger(__name__)

Bindings = Mapping[str, Value]


def _relation(compare: Callable[[Value, Value], bool]) -> Callable[[Value, Value], Value]:
    return lambda left, right: Integer(1 if compare(left, right) else 0)


UNARY_DISPATCH: dict[UnaryOp, Callable[[Value], Value]] = {
    UnaryOp.NEGATE: operator.neg,
    UnaryOp.NOT: Value.logical_not,
    UnaryOp.INVERT: operator.invert,
}

BINARY_DISPATCH: dict[BinaryOp, Callable[[Value, Value], Value]] = {
    BinaryOp.ADD: operator.add,
    BinaryOp.SUB: operator.sub,
    BinaryOp.MUL: operator.mul,
    BinaryOp.DIV: operator.truediv,
    BinaryOp.MOD: operator.mod,
    BinaryOp.EXP: operator.pow,
    BinaryOp.FLOOR_DIV: operator.floordiv,
    BinaryOp.BIT_AND: operator.and_,
    BinaryOp.BIT_OR: operator.or_,
    BinaryOp.BIT_XOR: operator.xor,
    BinaryOp.SHIFT_LEFT: operator.lshift,
    BinaryOp.SHIFT_RIGHT: operator.rshift,
    BinaryOp.LESS: _relation(operator.lt),
    BinaryOp.LESS_EQ: _relation(operator.le),
    BinaryOp.GREATER: _relation(operator.gt),
    BinaryOp.GREATER_EQ: _relation(operator.ge),
    BinaryOp.EQUAL: _relation(operator.eq),
    BinaryOp.NOT_EQUAL: _relation(operator.ne),
}


def evaluate(ordered: Iterable[Token], bindings: Bindings) -> Value:
    """
    Evaluate an ordered token list against `bindings`.
    `bindings` is only read, once per identifier occurrence.
    """
    stack: Stack[Value] = Stack()

    for token in ordered:
        match token:
            case IntegerLiteral() | FloatLiteral():
                stack.push(token.to_value())

            case Identifier(name=name):
                try:
                    value = bindings[name]
                except KeyError:
                    raise CalcUnboundSymbol(f"variable `{name}` is undefined", name) from None
                stack.push(to_value(value))

            case UnaryOperator(op=op):
                operand = stack.pop()
                if operand is None:
                    raise CalcArityError(f"not enough values for operation `{op}`", op)
                stack.push(UNARY_DISPATCH[op](operand))

            case BinaryOperator(op=op):
                if len(stack) < 2:
                    raise CalcArityError(f"not enough values for operation `{op}`", op)
                right = stack.pop()
                left = stack.pop()
                stack.push(BINARY_DISPATCH[op](left, right))

            case OpenParen():
                raise CalcStructureError("no matching close parenthesis", "(")

            case CloseParen():
                raise CalcStructureError("no matching open parenthesis", ")")

            case Invalid() | Assignment():
                raise CalcSyntaxError(f"unexpected token `{token}`", token)

            case _:
                raise TypeError(f"Unknown token type: {type(token).__name__}")

    if stack.is_empty():
        raise CalcArityError("no value produced")
    if len(stack) > 1:
        raise CalcArityError(f"too many values: expression produced {len(stack)} values", len(stack))
    result = stack.pop()
    logger.debug("Result: %r", result)
    return result
