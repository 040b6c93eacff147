"""Rendering of results for the console.

Integers can be shown in binary, octal, decimal or hex; negative integers are
shown as their 64-bit two's complement so the output re-tokenizes to the same
value. Floats and undefined values always use their default rendering.
"""

from __future__ import annotations

from typing import Optional

from radixcalc.errors import CalcError
from radixcalc.reader.token import NumberBase
from radixcalc.types.value import INT_BITS, Integer, Value

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_ERROR = "\033[91m"
COLOR_VARIABLE = "\033[96m"

_UNSIGNED_MASK = (1 << INT_BITS) - 1
_FORMAT_SPECS = {
    NumberBase.BINARY: "b",
    NumberBase.OCTAL: "o",
    NumberBase.HEX: "X",
}


def format_int(i: int, base: NumberBase = NumberBase.DECIMAL) -> str:
    if base is NumberBase.DECIMAL:
        return str(i)
    return base.prefix + format(i & _UNSIGNED_MASK, _FORMAT_SPECS[base])


def format_value(value: Value, base: NumberBase = NumberBase.DECIMAL) -> str:
    if isinstance(value, Integer):
        return format_int(value.value, base)
    return str(value)


def colorize(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{color}{text}{RESET}"


def format_assignment(
    name: str, value: Value, base: NumberBase = NumberBase.DECIMAL, color: bool = False
) -> str:
    return f"[{colorize(name, COLOR_VARIABLE, color)}]: {format_value(value, base)}"


def format_error(error: CalcError | str, color: bool = False, prefix: Optional[str] = "Error") -> str:
    message = str(error)
    if prefix:
        message = f"{prefix}: {message}"
    return colorize(message, COLOR_ERROR, color)
