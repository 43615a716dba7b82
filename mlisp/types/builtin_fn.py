from __future__ import annotations

from typing import Callable

from mlisp import LispValue


class NativeFunction:
    """A builtin implemented in Python.

    `fn` receives every evaluated argument as a single list and returns a
    value or raises an EvalError.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
