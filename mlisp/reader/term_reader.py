"""Split raw source text into balanced top-level terms.

A term is either one bracketed form, e.g. "(define x {1 2})", or one bare
atom at the top level, e.g. "x". Each term is later tokenized and parsed on
its own.
"""

from __future__ import annotations

from typing import Iterable

from mlisp.types.errors import MissingSymbol, UnexpectedSymbol

MATCHING = {"(": ")", "{": "}"}


def read_terms(lines: Iterable[str]) -> list[str]:
    """Read every balanced top-level term from an iterable of lines.

    Raises UnexpectedSymbol for a closer with no opener, and MissingSymbol
    (naming the expected closer) if the input ends inside a term.
    """
    terms: list[str] = []
    term: list[str] = []
    open_brackets: list[str] = []

    def flush() -> None:
        text = "".join(term).strip()
        if text:
            terms.append(text)
        term.clear()

    def quote_pending() -> bool:
        # A lone top-level quote belongs to the term after it.
        return term == ["'"]

    for line in lines:
        for c in line.rstrip("\r\n"):
            if not open_brackets and c.isspace():
                if not quote_pending():
                    flush()
                continue
            if c in MATCHING:
                open_brackets.append(c)
                term.append(c)
            elif c in (")", "}"):
                if not open_brackets:
                    raise UnexpectedSymbol(c)
                open_brackets.pop()
                term.append(c)
                if not open_brackets:
                    flush()
            else:
                term.append(c)
        if open_brackets:
            term.append(" ")
        elif not quote_pending():
            flush()

    if open_brackets:
        raise MissingSymbol(MATCHING[open_brackets[-1]])
    flush()
    return terms


def read_terms_from_string(source: str) -> list[str]:
    return read_terms(source.splitlines())
