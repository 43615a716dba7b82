from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.printer import display
from mlisp.types.errors import InvalidNumberOfArguments
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda p1 p2 ... body): every form but the last names a parameter.
    if len(tail) < 2:
        raise InvalidNumberOfArguments("lambda requires at least one parameter and a body")

    *params, body = tail
    return Lambda([display(p) for p in params], body)
