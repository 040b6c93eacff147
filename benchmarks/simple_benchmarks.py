from timeit import timeit

from radixcalc.calculator import Calculator
from radixcalc.reader.lexer import tokenize
from radixcalc.evaluation.reorder import reorder
from radixcalc.evaluation.evaluator import evaluate
from radixcalc.types.value import Integer, Float


EXPRESSIONS = {
    "arith": "1 + 2 * 3 - 4 / 2 + 10 % 3",
    "bases": "0x1F & 0b1010 | 0o17 ^ 255",
    "nested": "((((1 + 2) * (3 + 4)) // 5) ** 2) << 3",
    "floats": "1.5 * 2.25 - 0.125 / 3 + 7.0 // 2",
    "vars": "a * x ** 2 + b * x + c",
}

BINDINGS = {"a": Integer(3), "b": Float(-2.5), "c": Integer(7), "x": Integer(11)}


def time_tokenize(code: str, rounds: int) -> float:
    return timeit(lambda: tokenize(code), number=rounds)


def time_reorder(code: str, rounds: int) -> float:
    """Time the shunting-yard pass only: tokenize once, reorder repeatedly."""
    tokens = tokenize(code)
    return timeit(lambda: reorder(tokens), number=rounds)


def time_evaluate(code: str, rounds: int) -> float:
    """Time evaluation only on a pre-ordered token list."""
    ordered = reorder(tokenize(code))
    evaluate(ordered, BINDINGS)  # warmup
    return timeit(lambda: evaluate(ordered, BINDINGS), number=rounds)


def time_pipeline(code: str, rounds: int) -> float:
    calc = Calculator(BINDINGS)
    return timeit(lambda: calc.calculate(code), number=rounds)


if __name__ == "__main__":
    rounds = 10_000
    print(f"{'name':<8} {'tokenize':>10} {'reorder':>10} {'evaluate':>10} {'pipeline':>10}   (s / {rounds} rounds)")
    for name, code in EXPRESSIONS.items():
        t_tok = time_tokenize(code, rounds)
        t_reo = time_reorder(code, rounds)
        t_eval = time_evaluate(code, rounds)
        t_all = time_pipeline(code, rounds)
        print(f"{name:<8} {t_tok:>10.4f} {t_reo:>10.4f} {t_eval:>10.4f} {t_all:>10.4f}")
