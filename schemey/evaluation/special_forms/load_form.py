from schemey import EvaluatorFn
from schemey import SExpression, LispValue
from schemey.types.environment import Environment
from schemey.modules.file_loader import read_source
from schemey.reader.parser import read_all
from schemey.evaluation.special_forms.shape import unrecognised


def eval_source(source: str, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Read every expression in `source` and evaluate them in order in `env`.

    Returns the last value, or the empty list when there is nothing to evaluate.
    The first failure stops evaluation of the remaining expressions.
    """
    result: LispValue = []
    for expr in read_all(source):
        result = evaluate_fn(expr, env)
    return result


def load_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(load "path") evaluates a file's expressions in the calling environment."""
    if len(form) != 2 or not isinstance(form[1], str):
        raise unrecognised(form)
    return eval_source(read_source(form[1]), env, evaluate_fn)
