"""Application engine for mlisp.

Function application lives here so that the evaluator only has to decide
*what* is being called:
- NativeFunction values receive every evaluated argument as one list.
- Lambda values run their body in a private scope opened over the caller's
  environment (see Lambda.extend_env). The scope is never returned, shared,
  or merged back, so it disappears with the call.
"""

from __future__ import annotations

from mlisp import LispValue, EvaluatorFn
from mlisp.types.environment import Environment
from mlisp.types.builtin_fn import NativeFunction
from mlisp.types.lambda_fn import Lambda
from mlisp.types.errors import InvalidNumberOfArguments, InvalidFunctionCall


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments.

    A call with no arguments at all is rejected, as is a call with fewer
    arguments than parameters. Surplus arguments are ignored.
    """
    if not args:
        raise InvalidNumberOfArguments("A lambda call requires at least one argument")
    scope = fn.extend_env(args, caller_env)
    return evaluate_fn(fn.body, scope)


def apply(
    name: str,
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a NativeFunction.

    Anything else bound under `name` raises InvalidFunctionCall.
    """
    if isinstance(head, NativeFunction):
        return head(args)
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn)
    raise InvalidFunctionCall(name)
