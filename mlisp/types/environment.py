"""Runtime environment for mlisp.

The Environment stores bindings of symbol names to evaluated Lisp values.
A lambda call runs in a child frame whose `outer` link points at the
caller's environment: the call sees every caller binding, writes only to
its own frame, and the frame is dropped when the call returns.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from mlisp import LispValue
from mlisp.types.errors import UnknownSymbol

_MISSING = object()


class Environment:
    """Mapping from symbol names to Lisp values, optionally layered on a parent."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[name] = value

    def update(self, mapping: Mapping[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        self.vars.update(mapping)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str, default: LispValue = None) -> LispValue:
        env = self.find(name)
        if env is None:
            return default
        return env.vars[name]

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`.

        Raises UnknownSymbol if no frame in the chain binds it.
        """
        value = self.get(name, _MISSING)
        if value is _MISSING:
            raise UnknownSymbol(name)
        return value

    def child(self) -> Environment:
        """Open a new, empty frame on top of this one."""
        return Environment(outer=self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
