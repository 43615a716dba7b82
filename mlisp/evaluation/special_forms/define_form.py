from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.printer import display
from mlisp.types.errors import InvalidNumberOfArguments
from mlisp.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current environment and returns the bound value.
    """
    if len(tail) != 2:
        raise InvalidNumberOfArguments("define requires exactly 2 arguments")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    env.define(display(name), value)
    return value
