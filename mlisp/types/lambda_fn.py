"""User-defined function values for mlisp."""

from __future__ import annotations

from io import StringIO

from mlisp import SExpression, LispValue
from mlisp.types.environment import Environment
from mlisp.types.errors import InvalidNumberOfArguments


class Lambda:
    """A first-class lambda: parameter names plus a body expression.

    No defining environment is captured. The body runs in a scope opened on
    top of whichever environment the call is made from.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[str], body: SExpression):
        self.params: list[str] = params
        self.body: SExpression = body

    def __str__(self) -> str:
        from mlisp.printer import display

        with StringIO() as buffer:
            buffer.write("(lambda ")
            for p in self.params:
                buffer.write(p)
                buffer.write(" ")
            buffer.write(display(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue], caller_env: Environment) -> Environment:
        """Bind `args` to the parameters in a private scope over `caller_env`.

        Arguments beyond the parameter count are ignored.
        """
        if len(args) < len(self.params):
            raise InvalidNumberOfArguments(
                f"Expected {len(self.params)} arguments, got {len(args)}"
            )
        scope = caller_env.child()
        for name, value in zip(self.params, args):
            scope.define(name, value)
        return scope
