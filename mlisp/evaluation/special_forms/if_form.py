from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.types.errors import InvalidIfStatement, InvalidNumberOfArguments
from mlisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if cond then else)
    Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise InvalidNumberOfArguments("if requires a condition, a then-expression and an else-expression")

    cond = evaluate_fn(tail[0], env)
    if not isinstance(cond, bool):
        raise InvalidIfStatement()

    if cond:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
