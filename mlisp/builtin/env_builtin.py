"""Built-in functions for the mlisp runtime environment.

Every builtin receives all of its evaluated arguments as one list. Arithmetic,
comparison and logic fold over that list and quietly skip elements of the
wrong type; the list, set and I/O builtins validate their arguments and raise
EvalError subclasses.
"""
from __future__ import annotations

import math
import operator
import sys
from typing import Callable

from mlisp import LispValue
from mlisp.printer import display
from mlisp.types.builtin_fn import NativeFunction
from mlisp.types.environment import Environment
from mlisp.types.lisp_set import LispSet
from mlisp.types.errors import (
    InvalidArgumentType,
    InvalidNumberOfArguments,
    UnexpectedEvalExpression,
)


def is_number(x: LispValue) -> bool:
    return isinstance(x, float)


def is_boolean(x: LispValue) -> bool:
    return isinstance(x, bool)


# -------------------------------
# Folds
# -------------------------------
def accumulate(
    args: list[LispValue],
    op: Callable[[LispValue, LispValue], LispValue],
    accept: Callable[[LispValue], bool] = is_number,
    initial: LispValue = 0.0,
) -> LispValue:
    """Left fold of `op` over the accepted elements of `args`.

    The accumulator is replaced by element 0 when that element is accepted,
    so (- 10 3) is 7. Rejected elements are skipped, and if element 0 is
    rejected the fold continues from `initial`.
    """
    result = initial
    for i, x in enumerate(args):
        if not accept(x):
            continue
        result = x if i == 0 else op(result, x)
    return result


def compare(args: list[LispValue], rel: Callable[[float, float], bool]) -> bool:
    """Apply `rel` to adjacent numbers and return the result of the last pair.

    Earlier pairs do not affect the result: (< 5 1 2) is true.
    """
    prev = 0.0
    result = False
    for i, x in enumerate(args):
        if not is_number(x):
            continue
        if i > 0:
            result = rel(prev, x)
        prev = x
    return result


# -------------------------------
# Arithmetic
# -------------------------------
def _div(x: float, y: float) -> float:
    """IEEE division: dividing by zero yields an infinity or NaN."""
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _mod(x: float, y: float) -> float:
    """Truncated remainder (sign follows the dividend); modulo zero is NaN."""
    if y == 0.0 or math.isinf(x):
        return math.nan
    return math.fmod(x, y)


def add(args: list[LispValue]) -> LispValue:
    """Sum of the numeric arguments."""
    return accumulate(args, operator.add)


def sub(args: list[LispValue]) -> LispValue:
    """Subtract every later number from the first."""
    return accumulate(args, operator.sub)


def mul(args: list[LispValue]) -> LispValue:
    """Product of the numeric arguments."""
    return accumulate(args, operator.mul)


def div(args: list[LispValue]) -> LispValue:
    """Divide left-to-right."""
    return accumulate(args, _div)


def mod(args: list[LispValue]) -> LispValue:
    """Remainder, folded left-to-right."""
    return accumulate(args, _mod)


# -------------------------------
# Comparison
# -------------------------------
def equals(args: list[LispValue]) -> bool:
    return compare(args, operator.eq)


def lt(args: list[LispValue]) -> bool:
    return compare(args, operator.lt)


def gt(args: list[LispValue]) -> bool:
    return compare(args, operator.gt)


def lte(args: list[LispValue]) -> bool:
    return compare(args, operator.le)


def gte(args: list[LispValue]) -> bool:
    return compare(args, operator.ge)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(args: list[LispValue]) -> bool:
    """Negate the first argument; anything after it is ignored."""
    if not args:
        raise InvalidNumberOfArguments("not requires an argument")
    if not is_boolean(args[0]):
        raise InvalidArgumentType("not requires a boolean")
    return not args[0]


def logical_and(args: list[LispValue]) -> bool:
    return accumulate(args, lambda a, b: a and b, is_boolean, False)


def logical_or(args: list[LispValue]) -> bool:
    return accumulate(args, lambda a, b: a or b, is_boolean, False)


# -------------------------------
# List and set construction
# -------------------------------
def to_list(args: list[LispValue]) -> list[LispValue]:
    """(list a b c) => (a b c)"""
    if not isinstance(args, list):
        raise InvalidArgumentType("list requires a list argument")
    return list(args)


def to_set(args: list[LispValue]) -> LispSet:
    """(set a b a) => {a b}"""
    if not isinstance(args, list):
        raise InvalidArgumentType("set requires a list argument")
    return LispSet(args)


def _single_list(name: str, args: list[LispValue]) -> list[LispValue]:
    if len(args) != 1:
        raise InvalidNumberOfArguments(f"{name} requires exactly 1 argument")
    xs = args[0]
    if not isinstance(xs, list):
        raise InvalidArgumentType(f"{name} requires a list")
    return xs


def head(args: list[LispValue]) -> LispValue:
    """(head (list 1 2 3)) => 1"""
    xs = _single_list("head", args)
    if not xs:
        raise UnexpectedEvalExpression("head of an empty list")
    return xs[0]


def tail(args: list[LispValue]) -> list[LispValue]:
    """(tail (list 1 2 3)) => (2 3); the tail of an empty list is empty."""
    xs = _single_list("tail", args)
    return xs[1:]


def cons(args: list[LispValue]) -> list[LispValue]:
    """Prepend the first argument to the second.

    If the second argument is not a list the result is a one-element list.
    """
    if len(args) != 2:
        raise InvalidNumberOfArguments("cons requires exactly 2 arguments")
    first, rest = args
    if isinstance(rest, list):
        return [first, *rest]
    return [first]


def concat(args: list[LispValue]) -> list[LispValue]:
    """Concatenate any number of lists."""
    result: list[LispValue] = []
    for xs in args:
        if not isinstance(xs, list):
            raise InvalidArgumentType("concat requires list arguments")
        result.extend(xs)
    return result


def _sets(name: str, args: list[LispValue]) -> list[LispSet]:
    if not args:
        raise InvalidNumberOfArguments(f"{name} requires at least 1 set")
    for s in args:
        if not isinstance(s, LispSet):
            raise InvalidArgumentType(f"{name} requires set arguments")
    return args


def union(args: list[LispValue]) -> LispSet:
    sets = _sets("union", args)
    result = LispSet()
    for s in sets:
        result = result.union(s)
    return result


def inter(args: list[LispValue]) -> LispSet:
    sets = _sets("inter", args)
    result = LispSet(sets[0])
    for s in sets[1:]:
        result = result.intersection(s)
    return result


# -------------------------------
# I/O
# -------------------------------
def print_builtin(args: list[LispValue]) -> LispValue:
    """Write the rendering of the single argument to stdout and return it."""
    if len(args) != 1:
        raise InvalidNumberOfArguments("print requires exactly 1 argument")
    sys.stdout.write(display(args[0]) + "\n")
    return args[0]


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "=": equals,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "not": logical_not,
    "and": logical_and,
    "or": logical_or,
    "list": to_list,
    "set": to_set,
    "head": head,
    "tail": tail,
    "cons": cons,
    "concat": concat,
    "union": union,
    "inter": inter,
    "print": print_builtin,
}

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({name: NativeFunction(name, fn) for name, fn in BUILTINS.items()})
    env.update(CONSTANTS)


def default_env() -> Environment:
    """Build a fresh top-level environment holding every builtin."""
    env = Environment()
    register(env)
    return env
