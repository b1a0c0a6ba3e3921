#!/usr/bin/env python3
"""
wcal.py - CLI kalkulatora wyrażeń arytmetycznych.

Tryby:
    wcal "2*6+(1/2)"             - wyrażenia pozycyjne w trybie domyślnym
    wcal -f "1/2" "3/4" -i "7/2" - przełączniki trybu f64 / i128 dla kolejnych
                                 wyrażeń, wynik z prefiksem "f> " / "i> "
    wcal                         - interaktywny REPL (prompt "i> " lub "f> ")

Konfiguracja: zmienne środowiskowe z prefiksem WCAL_ lub plik .env
(np. WCAL_DEFAULT_MODE=float, WCAL_PARSER=precedence, WCAL_LOG_LEVEL=DEBUG).

Kod wyjścia w trybie jednorazowym: 0 gdy wszystkie wyrażenia się policzyły,
1 gdy choć jedno zwróciło błąd.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.parser import PARSERS, get_parser
from calculator import calculate, format_value
from config import Settings
from contracts import CalcError, EvalResult, NumericMode
from ports.parser import Parser

logger = logging.getLogger("wcal.cli")

WARNING_TEXT = "Warning: division will cause a cast"

_HELP_ROWS = [
    ("help, h", "Show this help"),
    ("i, i128", "Enter i128 mod"),
    ("f, f64", "Enter f64 mod"),
    ("quit, q", "Quit"),
    ("<expr>", "Evaluate expression in the current mode"),
]


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False, soft_wrap=True)
    return _CONSOLE


def _print_result(console: Console, result: EvalResult, show_steps: bool) -> None:
    if result.warning:
        console.print(WARNING_TEXT, style="yellow", markup=False)
    console.print(format_value(result), markup=False)
    if show_steps:
        for step in result.steps:
            console.print(f"  {step}", style="dim", markup=False)


def _evaluate(
    console: Console,
    text: str,
    mode: NumericMode,
    parser: Parser,
    show_steps: bool = False,
) -> bool:
    """Liczy i wypisuje wynik. Zwraca False, jeśli wystąpił błąd."""
    try:
        result = calculate(text, mode, parser)
    except CalcError as exc:
        console.print(f"Error: {exc}", style="red", markup=False)
        return False
    _print_result(console, result, show_steps)
    return True


def _print_help(console: Console) -> None:
    table = Table(box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Command", no_wrap=True, style="bold cyan")
    table.add_column("Description")
    for cmd, desc in _HELP_ROWS:
        table.add_row(cmd, desc)
    console.print(table)


# -- one-shot --------------------------------------------------------------

_MODE_SWITCHES = {"-i": NumericMode.INT, "-f": NumericMode.FLOAT}

# Opcje z wartością w osobnym argumencie - wartość nie jest wyrażeniem
_VALUE_OPTIONS = ("--parser",)


def _takes_value(arg: str) -> bool:
    return "=" not in arg and len(arg) > 2 and any(
        opt.startswith(arg) for opt in _VALUE_OPTIONS
    )


def _plan_jobs(
    argv: Sequence[str], exprs: Sequence[str]
) -> list[tuple[NumericMode | None, str]]:
    """
    Przypisuje każdemu wyrażeniu tryb z ostatniego poprzedzającego -i/-f
    (None = tryb domyślny, bez przełącznika). Kolejność jak w argv.
    """
    jobs: list[tuple[NumericMode | None, str]] = []
    pending = list(exprs)
    mode: NumericMode | None = None
    skip_next = False
    for arg in argv:
        if skip_next:
            skip_next = False
        elif arg in _MODE_SWITCHES:
            mode = _MODE_SWITCHES[arg]
        elif arg.startswith("--"):
            skip_next = _takes_value(arg)
        elif pending and arg == pending[0]:
            jobs.append((mode, pending.pop(0)))
    return jobs


def _run_once(
    jobs: Sequence[tuple[NumericMode | None, str]],
    settings: Settings,
    parser: Parser,
    show_steps: bool,
) -> int:
    console = _console()
    ok = True

    default_mode = NumericMode(settings.default_mode)
    for mode, expr in jobs:
        if mode is None:
            ok = _evaluate(console, expr, default_mode, parser, show_steps) and ok
            continue
        console.print(f"{mode.short}> {expr}", markup=False)
        ok = _evaluate(console, expr, mode, parser, show_steps) and ok

    return 0 if ok else 1


# -- interactive -----------------------------------------------------------

class Repl:
    """Pętla read-evaluate-print. Tryb jest jedynym stanem sesji."""

    def __init__(
        self,
        console: Console,
        parser: Parser,
        mode: NumericMode = NumericMode.INT,
        show_steps: bool = False,
    ) -> None:
        self.console = console
        self.parser = parser
        self.mode = mode
        self.show_steps = show_steps

    @property
    def prompt(self) -> str:
        return f"{self.mode.short}> "

    def handle(self, line: str) -> bool:
        """Obsługuje jedną linię. Zwraca False, gdy sesja ma się zakończyć."""
        cmd = line.strip()
        if not cmd:
            return True
        if cmd in ("q", "quit"):
            self.console.print("Bye!")
            return False
        if cmd in ("h", "help"):
            _print_help(self.console)
        elif cmd in ("i", "i128"):
            self.mode = NumericMode.INT
            self.console.print("Enter i128 mod")
        elif cmd in ("f", "f64"):
            self.mode = NumericMode.FLOAT
            self.console.print("Enter f64 mod")
        else:
            _evaluate(self.console, cmd, self.mode, self.parser, self.show_steps)
        return True

    def run(self, read_line: Callable[[str], str] | None = None) -> int:
        read_line = read_line or (lambda prompt: self.console.input(prompt, markup=False))
        while True:
            try:
                line = read_line(self.prompt)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self.console.print("Bye!")
                return 0
            if not self.handle(line):
                return 0


# -- main ------------------------------------------------------------------

def build_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wcal",
        description="wcal - kalkulator wyrażeń arytmetycznych (i128 / f64)",
    )
    parser.add_argument("exprs", nargs="*", metavar="EXPR",
                        help="Wyrażenie liczone w trybie domyślnym")
    parser.add_argument("-i", dest="switches", action="append_const",
                        const=NumericMode.INT,
                        help="Kolejne wyrażenia licz w trybie i128")
    parser.add_argument("-f", dest="switches", action="append_const",
                        const=NumericMode.FLOAT,
                        help="Kolejne wyrażenia licz w trybie f64")
    parser.add_argument("--parser", default=settings.parser, choices=sorted(PARSERS),
                        help="Implementacja parsera")
    parser.add_argument("--steps", action="store_true",
                        help="Wypisz kroki obliczeń")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    argv = sys.argv[1:] if argv is None else list(argv)
    args = build_arg_parser(settings).parse_intermixed_args(argv)
    parser = get_parser(args.parser)
    logger.debug("Using parser %s", type(parser).__name__)
    show_steps = args.steps or settings.show_steps

    # Sam przełącznik -i/-f bez wyrażeń nic nie liczy i nie uruchamia REPL
    if args.exprs or args.switches:
        return _run_once(_plan_jobs(argv, args.exprs), settings, parser, show_steps)

    repl = Repl(
        _console(),
        parser,
        mode=NumericMode(settings.default_mode),
        show_steps=show_steps,
    )
    return repl.run()


if __name__ == "__main__":
    sys.exit(main())
