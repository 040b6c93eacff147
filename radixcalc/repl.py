"""
Interactive read loop and command line for the calculator.

Line commands:
- `exit`                 -> leave the loop
- `hex <expr>`           -> show the result in hex (also `dec`, `oct`, `bin`)
- `set <name> <expr>`    -> evaluate and bind the result to <name>
- `<name> = <expr>`      -> same as `set`
- anything else          -> evaluate and print the result
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from radixcalc import config
from radixcalc.calculator import Calculator
from radixcalc.display import format_assignment, format_error, format_value
from radixcalc.errors import CalcError, CalcSyntaxError
from radixcalc.reader.token import NumberBase

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
SET_COMMAND = "set"
BASE_COMMANDS = {
    "hex": NumberBase.HEX,
    "dec": NumberBase.DECIMAL,
    "oct": NumberBase.OCTAL,
    "bin": NumberBase.BINARY,
}


@dataclass
class Command:
    source: str
    base: NumberBase
    target: Optional[str] = None


def _split_name(text: str) -> tuple[str, str]:
    end = 0
    while end < len(text) and (text[end].isalnum() or text[end] == "_"):
        end += 1
    return text[:end], text[end:]


def parse_command(line: str, default_base: NumberBase = NumberBase.DECIMAL) -> Command:
    """Strip a leading `set`/base command off a line."""
    line = line.strip()
    head, _, rest = line.partition(" ")
    if head == SET_COMMAND:
        name, expr = _split_name(rest.strip())
        if not name:
            raise CalcSyntaxError("`set` expects a variable name", rest)
        expr = expr.strip()
        # allow `set x = 1` as well as `set x 1`
        if expr.startswith("=") and not expr.startswith("=="):
            expr = expr[1:].strip()
        return Command(expr, default_base, target=name)
    if head in BASE_COMMANDS:
        return Command(rest.strip(), BASE_COMMANDS[head])
    return Command(line, default_base)


class Repl:
    """Prompt, evaluate, print; keeps one Calculator alive so bindings persist."""

    def __init__(
        self,
        calculator: Optional[Calculator] = None,
        *,
        prompt: Optional[str] = None,
        color: Optional[bool] = None,
        base: Optional[NumberBase] = None,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.calculator = calculator if calculator is not None else Calculator()
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.color = color if color is not None else config.color_enabled()
        self.base = base if base is not None else config.get_display_base()
        self.input_fn = input_fn
        self.output = output if output is not None else sys.stdout

    def render(self, line: str) -> Optional[str]:
        """Evaluate one line and return the text to print; raises CalcError."""
        if not line.strip():
            return None
        command = parse_command(line, self.base)
        if command.target is not None:
            value = self.calculator.assign(command.target, command.source)
            return format_assignment(command.target, value, command.base, self.color)
        outcome = self.calculator.execute(command.source)
        if outcome.target is not None:
            return format_assignment(outcome.target, outcome.value, command.base, self.color)
        return format_value(outcome.value, command.base)

    def handle_line(self, line: str) -> Optional[str]:
        """Like render(), but errors come back as formatted text."""
        try:
            return self.render(line)
        except CalcError as err:
            logger.debug("Evaluation failed for %r: %s", line, err)
            return format_error(err, self.color)

    def run(self) -> None:
        try:
            import readline  # noqa: F401  (line editing where available)
        except ImportError:
            pass
        while True:
            try:
                line = self.input_fn(self.prompt)
            except (EOFError, KeyboardInterrupt):
                print(file=self.output)
                break
            if line.strip() == EXIT_COMMAND:
                break
            text = self.handle_line(line)
            if text is not None:
                print(text, file=self.output)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="radixcalc",
        description="Evaluate integer/float expressions in binary, octal, decimal and hex.",
    )
    p.add_argument("-e", "--expr", default=None,
                   help="evaluate one expression, print the result and exit")
    p.add_argument("--base", choices=sorted(BASE_COMMANDS), default=None,
                   help="display base for results (default: $RADIXCALC_BASE or dec)")
    p.add_argument("--no-color", action="store_true",
                   help="do not colour error messages")
    p.add_argument("--log-level", default=None,
                   help="logging level (default: $RADIXCALC_LOG_LEVEL or WARNING)")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None, output: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    level = config.get_log_level()
    if args.log_level:
        level = config.resolve_log_level(args.log_level, default=level)
    logging.basicConfig(level=level)

    repl = Repl(
        color=False if args.no_color else None,
        base=BASE_COMMANDS[args.base] if args.base else None,
        output=output,
    )
    if args.expr is not None:
        try:
            text = repl.render(args.expr)
        except CalcError as err:
            print(format_error(err, repl.color), file=repl.output)
            return 1
        if text is not None:
            print(text, file=repl.output)
        return 0
    repl.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
