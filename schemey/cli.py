"""Command line entry point and interactive REPL for Schemey.

    schemey                    start the REPL
    schemey -e EXPR            evaluate one expression and print the result
    schemey FILE [ARGS...]     run a script with `args` bound to ARGS
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from schemey import LispValue
from schemey.config import get_log_level, get_recursion_limit
from schemey.errors import SchemeyError
from schemey.interpreter import Interpreter, guard_recursion
from schemey.printer import render_result

PROMPT = "schemey> "

log = logging.getLogger(__name__)


def print_result(thunk: Callable[[], LispValue], out: TextIO = sys.stdout) -> bool:
    """Run `thunk` and print its value or its error on one line.

    Returns False when evaluation failed.
    """
    try:
        text = guard_recursion(lambda: render_result(thunk()))
    except SchemeyError as ex:
        print(str(ex), file=out)
        return False
    if text:
        print(text, file=out)
    return True


def repl(interp: Interpreter, read_line: Callable[[str], str] = input, out: TextIO = sys.stdout) -> None:
    """Read-eval-print until end of input or an interrupt."""
    try:
        import readline as _  # noqa: F401  line editing when available
    except ImportError:
        pass

    while True:
        # Ctrl-C while reading or evaluating ends the session
        try:
            line = read_line(PROMPT)
            if line.strip():
                print_result(lambda: interp.read_eval(line), out)
        except EOFError:
            print(file=out)
            return
        except KeyboardInterrupt:
            print("\nquitting...", file=out)
            return


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schemey", description="A small Scheme interpreter")
    parser.add_argument("-e", dest="expr", metavar="EXPR", help="evaluate a single expression")
    parser.add_argument("file", nargs="?", help="script to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="arguments bound to `args` in the script")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    opts = build_parser().parse_args(argv)

    logging.basicConfig(
        level=get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    interp = Interpreter()
    if opts.expr is not None:
        return 0 if print_result(lambda: interp.read_eval(opts.expr)) else 1
    if opts.file is not None:
        log.info("running script %s", opts.file)
        return 0 if print_result(lambda: interp.run_file(opts.file, opts.args)) else 1
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
