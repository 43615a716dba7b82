import logging

from mlisp import EvaluatorFn
from mlisp import SExpression, LispValue
from mlisp.printer import display
from mlisp.types.errors import InvalidNumberOfArguments
from mlisp.types.environment import Environment
from mlisp.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn name p1 p2 ... body)
    Named shorthand for (define name (lambda p1 p2 ... body)), returns true.
    """
    if len(tail) < 3:
        raise InvalidNumberOfArguments("fn requires a name, at least one parameter and a body")

    name, *params, body = tail
    fn = Lambda([display(p) for p in params], body)
    env.define(display(name), fn)
    logger.debug("defined %s as %s", display(name), fn)
    return True
