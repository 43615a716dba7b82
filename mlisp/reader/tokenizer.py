"""
  Tokenizer

Brackets are the only punctuation: each of ( ) { } becomes its own token,
everything else is split on whitespace. There are no string literals, no
escapes and no comments. A quote only forms its own token when it is
separated from its neighbours, e.g. "'(1 2)" or "' (1 2)".
"""

from __future__ import annotations

import re

BRACKET_RE = re.compile(r"([(){}])")


def tokenize(source: str) -> list[str]:
    """Split `source` into a flat list of string tokens."""
    return BRACKET_RE.sub(r" \1 ", source).split()
