# Expression engine for the radixcalc calculator.
#
# Pipeline: source text -> tokenize -> reorder (shunting-yard) -> evaluate (+ bindings) -> Value
#
# Values are radixcalc.types.value.Undefined / Integer / Float. Bindings are any
# Mapping[str, Value] owned by the caller; the engine only reads them.

from radixcalc.errors import (
    CalcError,
    CalcSyntaxError,
    CalcStructureError,
    CalcEvalError,
    CalcUnboundSymbol,
    CalcArityError,
    CalcTypeError,
    CalcZeroDivisionError,
)
from radixcalc.types.value import Value, Undefined, Integer, Float
from radixcalc.reader.lexer import tokenize
from radixcalc.evaluation.reorder import reorder
from radixcalc.evaluation.evaluator import evaluate, Bindings
from radixcalc.calculator import Calculator, calculate

__all__ = [
    "CalcError",
    "CalcSyntaxError",
    "CalcStructureError",
    "CalcEvalError",
    "CalcUnboundSymbol",
    "CalcArityError",
    "CalcTypeError",
    "CalcZeroDivisionError",
    "Value",
    "Undefined",
    "Integer",
    "Float",
    "Bindings",
    "tokenize",
    "reorder",
    "evaluate",
    "calculate",
    "Calculator",
]
