"""Set values for mlisp.

Python's own set cannot hold mlisp values directly: True == 1.0 in Python
but Boolean(true) and Number(1) are different Lisp values, and lists are
unhashable. LispSet therefore stores its members under a structural key
built by `value_key`.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator

from mlisp import LispValue


def value_key(value: LispValue) -> Hashable:
    """Structural identity of a value for set membership.

    Booleans and numbers compare by exact value and never with each other,
    lists element-wise, sets as unordered collections. Callables fall back
    to object identity.
    """
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, float):
        return ("number", value)
    if isinstance(value, list):
        return ("list", tuple(value_key(v) for v in value))
    if isinstance(value, LispSet):
        return ("set", frozenset(value._members))
    return ("object", id(value))


class LispSet:
    """Insertion-ordered, deduplicated collection of Lisp values."""

    __slots__ = ("_members",)

    def __init__(self, values: Iterable[LispValue] = ()):
        self._members: dict[Hashable, LispValue] = {}
        for v in values:
            self.add(v)

    def add(self, value: LispValue) -> None:
        self._members.setdefault(value_key(value), value)

    def union(self, other: LispSet) -> LispSet:
        result = LispSet(self)
        for v in other:
            result.add(v)
        return result

    def intersection(self, other: LispSet) -> LispSet:
        return LispSet(v for k, v in self._members.items() if k in other._members)

    def __contains__(self, value: object) -> bool:
        return value_key(value) in self._members

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self._members.values())

    def __len__(self) -> int:
        return len(self._members)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LispSet) and self._members.keys() == other._members.keys()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"LispSet({list(self)!r})"
