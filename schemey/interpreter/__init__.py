from __future__ import annotations
import logging
from typing import Callable, Optional, Sequence

from schemey import SExpression, LispValue
from schemey.errors import GenericError
from schemey.reader.parser import read_one
from schemey.types.environment import Environment
from schemey.builtin.primitives import primitive_env
from schemey.evaluation.evaluator import evaluate
from schemey.evaluation.special_forms.load_form import eval_source
from schemey.modules.file_loader import read_source

log = logging.getLogger(__name__)

RECURSION_MESSAGE = "Recursion depth exceeded"


def guard_recursion(thunk: Callable[[], LispValue]) -> LispValue:
    """Run `thunk`, reporting host stack exhaustion as a Schemey error.

    Reading, evaluating and rendering all recurse on the host stack, so any
    deeply nested input can exhaust it.
    """
    try:
        return thunk()
    except RecursionError:
        raise GenericError(RECURSION_MESSAGE) from None


class Interpreter:
    """
    Orchestrates reading and evaluating Schemey code.
    Keeps one root environment, populated with the primitives, across calls.
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env: Environment = env if env is not None else primitive_env()
        log.debug("interpreter ready with %d root bindings", len(self.env))

    def evaluate(self, expr: SExpression, env: Optional[Environment] = None) -> LispValue:
        target = env if env is not None else self.env
        return guard_recursion(lambda: evaluate(expr, target))

    def read_eval(self, code: str) -> LispValue:
        """Read exactly one expression from `code` and evaluate it."""
        return guard_recursion(lambda: evaluate(read_one(code), self.env))

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; returns the last value, or unit."""
        return guard_recursion(lambda: eval_source(code, self.env, evaluate))

    def run_file(self, path: str, args: Sequence[str] = ()) -> LispValue:
        """Run a script with `args` bound to its command-line arguments.

        The script runs in an extension of the root environment, so its
        top-level definitions do not leak back into `self.env`.
        """
        log.debug("running %s with args %r", path, list(args))
        env = self.env.extend([("args", [str(a) for a in args])])
        source = read_source(path)
        return guard_recursion(lambda: eval_source(source, env, evaluate))
