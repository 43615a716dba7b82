"""
  Recursive-descent parser

Turns a token sequence into expressions built from Python primitives:

    - true / false -> bool
    - numbers      -> float
    - symbols      -> Symbol
    - ( ... )      -> list
    - { ... }      -> [Symbol("set"), ...]
    - '( ... )     -> [Symbol("list"), ...]

`parse` consumes one expression from the front of a token sequence and
hands back the unconsumed remainder, so several top-level forms can be
read from one token stream.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from mlisp import SExpression
from mlisp.types.errors import (
    EmptyInput,
    MissingToken,
    UnexpectedExpression,
    UnexpectedToken,
)
from mlisp.types.symbol import Symbol

OPENERS = {"(": ")", "{": "}"}
CLOSERS = {")", "}"}
BOOLEANS = {"true": True, "false": False}


def parse_token(token: str) -> SExpression:
    """Parse a single atom into a boolean, a number, or a symbol."""
    if token in BOOLEANS:
        return BOOLEANS[token]
    if "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    return Symbol(token)


class TokenStream:
    """Cursor over an immutable token sequence."""

    def __init__(self, tokens: Sequence[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> str | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> str:
        tok = self.peek()
        if tok is None:
            raise MissingToken()
        self.pos += 1
        return tok

    def remaining(self) -> list[str]:
        return list(self.tokens[self.pos:])

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.peek()
        if tok is None:
            raise EmptyInput()
        self.advance()

        # Quote sugar: '( ... ) reads as (list ...)
        if tok == "'":
            nxt = self.peek()
            if nxt is None:
                raise MissingToken()
            if nxt != "(":
                raise UnexpectedToken(nxt)
            expr = self.parse_expr()
            if not isinstance(expr, list):
                raise UnexpectedExpression()
            return [Symbol("list"), *expr]

        if tok in OPENERS:
            items = self._parse_seq(OPENERS[tok])
            if tok == "{":
                return [Symbol("set"), *items]
            return items

        if tok in CLOSERS:
            raise UnexpectedToken(tok)

        return parse_token(tok)

    def _parse_seq(self, closer: str) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            nxt = self.peek()
            if nxt is None:
                raise MissingToken()
            if nxt == closer:
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Sequence[str]) -> tuple[SExpression, list[str]]:
    """Parse one expression from the front of `tokens`.

    Returns the expression and the tokens left over after it.
    """
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    return expr, stream.remaining()


def parse_all(tokens: Sequence[str]) -> list[SExpression]:
    """Parse every top-level expression in `tokens`."""
    return list(TokenStream(tokens).parse_all())
