"""Core evaluator for mlisp.

Walks a parsed expression against an Environment. Literals evaluate to
themselves, symbols are looked up, and list forms are dispatched to a
special form or applied as a function call.
"""

from __future__ import annotations

from mlisp import SExpression, LispValue
from mlisp.types.environment import Environment
from mlisp.types.symbol import Symbol
from mlisp.types.builtin_fn import NativeFunction
from mlisp.types.lambda_fn import Lambda
from mlisp.types.errors import (
    InvalidFunctionCall,
    InvalidListExpression,
    NonDefineInThisScope,
)
from mlisp.evaluation.apply import apply
from mlisp.evaluation.special_forms import SPECIAL_FORMS

_MISSING = object()


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, raising an EvalError on failure."""
    match expr:
        case bool() | float():
            return expr

        case Symbol():
            return env.lookup(expr.id)

        case []:
            raise InvalidListExpression("Cannot evaluate an empty list")

        case [list() as head, *tail]:
            # A list in head position is run for its effects and dropped;
            # the rest of the form is then evaluated as a form of its own.
            evaluate(head, env)
            return evaluate(tail, env)

        case [Symbol() as head, *tail]:
            name = head.id
            if name in SPECIAL_FORMS:
                return SPECIAL_FORMS[name](tail, env, evaluate)
            return call_function(name, tail, env)

        case [_, *_]:
            raise InvalidListExpression("The head of a call must be a symbol or a list")

    # Only the parser's primitives reach the evaluator, so anything else is
    # an already-evaluated value handed back in.
    return expr


def call_function(name: str, tail: list[SExpression], env: Environment) -> LispValue:
    """Look up `name` and apply it to the evaluated `tail` expressions."""
    fn = env.get(name, _MISSING)
    if fn is _MISSING:
        raise NonDefineInThisScope(name)
    if not isinstance(fn, (NativeFunction, Lambda)):
        raise InvalidFunctionCall(name)

    args = [evaluate(arg, env) for arg in tail]
    return apply(name, fn, args, env, evaluate)
