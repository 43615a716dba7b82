"""Textual rendering of mlisp expressions and values.

`display` is used for printing results, for the `print` builtin, and by the
evaluator to turn `define`/`lambda`/`fn` name expressions into binding names.
"""

from __future__ import annotations

import math
from decimal import Decimal

from mlisp import LispValue
from mlisp.types.symbol import Symbol
from mlisp.types.lisp_set import LispSet
from mlisp.types.builtin_fn import NativeFunction
from mlisp.types.lambda_fn import Lambda


def format_number(n: float) -> str:
    """Shortest round-trip decimal form, never in exponent notation.

    Integral values drop the fractional part: 7.0 -> "7", -0.0 -> "-0".
    """
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    text = format(Decimal(repr(n)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def display(obj: LispValue) -> str:
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, float):
        return format_number(obj)
    if isinstance(obj, int):
        return format_number(float(obj))
    if isinstance(obj, Symbol):
        return str(obj)
    if isinstance(obj, list):
        return "(" + " ".join(display(x) for x in obj) + ")"
    if isinstance(obj, LispSet):
        return "{" + " ".join(display(x) for x in obj) + "}"
    if isinstance(obj, (NativeFunction, Lambda)):
        return repr(obj)
    return str(obj)
