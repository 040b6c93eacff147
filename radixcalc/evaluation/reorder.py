"""Shunting-yard reordering of an infix token list into evaluation order.

Reordering never fails: an unmatched ')' or '(' is passed through to the output
so that the evaluator reports it.
"""

from __future__ import annotations

import logging
from typing import Iterable

from radixcalc.reader.token import (
    BinaryOp,
    BinaryOperator,
    CloseParen,
    FloatLiteral,
    Identifier,
    IntegerLiteral,
    OpenParen,
    Token,
    UnaryOperator,
)
from radixcalc.types.stack import Stack

logger = logging.getLogger(__name__)


def _releases(top: Token, incoming: BinaryOperator) -> bool:
    """Should `top` leave the operator stack before `incoming` is pushed?"""
    match top:
        case UnaryOperator():
            # unary binds to the next operand, except under a following '**'
            return incoming.op is not BinaryOp.EXP
        case BinaryOperator():
            if top.precedence > incoming.precedence:
                return True
            return top.precedence == incoming.precedence and not incoming.op.right_associative
        case _:
            return False


def reorder(tokens: Iterable[Token]) -> list[Token]:
    output: list[Token] = []
    operators: Stack[Token] = Stack()

    for token in tokens:
        match token:
            case IntegerLiteral() | FloatLiteral() | Identifier():
                output.append(token)
            case UnaryOperator() | OpenParen():
                operators.push(token)
            case BinaryOperator():
                while (top := operators.peek()) is not None and _releases(top, token):
                    output.append(operators.pop())
                operators.push(token)
            case CloseParen():
                while (top := operators.pop()) is not None:
                    if isinstance(top, OpenParen):
                        break
                    output.append(top)
                else:
                    # exhausted without an open paren
                    output.append(token)
            case _:
                # Invalid / Assignment: left for the evaluator to reject
                output.append(token)

    output.extend(operators.drain())
    logger.debug("Sorted values: %s", format_ordered(output))
    return output


def format_ordered(tokens: Iterable[Token]) -> str:
    """Render an ordered token list on one line, e.g. '2 3 4 * +'."""
    return " ".join(str(t) for t in tokens)


def disassemble(tokens: Iterable[Token]) -> str:
    """Numbered listing of an ordered token list with the stack depth after each step."""
    out = []
    depth = 0
    for i, token in enumerate(tokens):
        match token:
            case IntegerLiteral() | FloatLiteral() | Identifier():
                kind = "PUSH"
                depth += 1
            case UnaryOperator():
                kind = "UNARY"
            case BinaryOperator():
                kind = "BINARY"
                depth -= 1
            case _:
                kind = "???"
        out.append(f"{i:04d}: {kind:<6} {token}  [depth={depth}]")
    return "\n".join(out)
