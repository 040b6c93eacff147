from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from radixcalc.errors import CalcSyntaxError, CalcUnboundSymbol
from radixcalc.evaluation.evaluator import evaluate
from radixcalc.evaluation.reorder import reorder
from radixcalc.reader.lexer import is_identifier, tokenize
from radixcalc.reader.token import Assignment, Identifier, Token
from radixcalc.types.value import Value, to_value


def calculate(source: str, bindings: Optional[Mapping[str, Value]] = None) -> Value:
    """Tokenize, reorder and evaluate `source` against read-only `bindings`."""
    return evaluate(reorder(tokenize(source)), bindings if bindings is not None else {})


def split_assignment(tokens: list[Token]) -> tuple[Optional[str], list[Token]]:
    """Split a leading `name =` off a token list; returns (name or None, remaining tokens)."""
    match tokens:
        case [Identifier(name=name), Assignment(), *rest]:
            return name, rest
    return None, tokens


@dataclass
class Outcome:
    value: Value
    target: Optional[str] = None  # variable assigned by this evaluation, if any


class Calculator:
    """
    Runs the tokenize -> reorder -> evaluate pipeline and owns the variable
    bindings that persist across calls.
    """

    def __init__(self, bindings: Optional[Mapping[str, Any]] = None):
        self.globals: dict[str, Value] = {}
        for name, value in (bindings or {}).items():
            self.set_var(name, value)

    def set_var(self, name: str, value: Any) -> None:
        """Insert or overwrite a binding."""
        if not is_identifier(name):
            raise CalcSyntaxError(f"invalid variable name `{name}`", name)
        self.globals[name] = to_value(value)

    def get_var(self, name: str) -> Value:
        try:
            return self.globals[name]
        except KeyError:
            raise CalcUnboundSymbol(f"variable `{name}` is undefined", name) from None

    def execute(self, source: str) -> Outcome:
        target, tokens = split_assignment(tokenize(source))
        value = evaluate(reorder(tokens), self.globals)
        if target is not None:
            self.set_var(target, value)
        return Outcome(value, target)

    def calculate(self, source: str) -> Value:
        return self.execute(source).value

    def assign(self, name: str, source: str) -> Value:
        value = self.calculate(source)
        self.set_var(name, value)
        return value
